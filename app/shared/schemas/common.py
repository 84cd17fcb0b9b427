# app/shared/schemas/common.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional

class ApiModel(BaseModel):
    """Modelo base: camelCase en el JSON, snake_case en Python"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class ErrorResponse(BaseModel):
    detail: str

class ValidationErrorItem(BaseModel):
    loc: List[Any]
    msg: str
    type: str

class ValidationErrorResponse(ErrorResponse):
    errors: List[ValidationErrorItem] = []

class HealthResponse(BaseModel):
    status: str
    app: str
    version: str
    api_version: str
    database: Optional[str] = None

# Segmento {deletedStatus}: solo "true" / "false", sin distinguir mayúsculas
DELETED_STATUS_PATTERN = r"^([Tt][Rr][Uu][Ee]|[Ff][Aa][Ll][Ss][Ee])$"

def parse_deleted_status(value: str) -> bool:
    return value.lower() == "true"
