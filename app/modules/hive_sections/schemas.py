# app/modules/hive_sections/schemas.py
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from app.shared.schemas.common import ApiModel

class UpdateHiveSectionRequest(ApiModel):
    """Datos para crear o actualizar una sección de colmena"""
    name: str = Field(..., min_length=4, max_length=60, description="Nombre de la sección")
    code: str = Field(..., min_length=5, max_length=5, description="Código único de 5 caracteres")
    store_hive_id: int = Field(..., ge=1, description="ID de la colmena a la que pertenece")

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            raise ValueError('El nombre no puede estar vacío')
        return v

class HiveSectionListItem(ApiModel):
    id: int
    name: str
    code: str
    is_deleted: bool

class HiveSection(ApiModel):
    id: int
    name: str
    code: str
    is_deleted: bool
    store_hive_id: int
    last_updated: Optional[datetime] = None
