# app/modules/hives/schemas.py
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from app.shared.schemas.common import ApiModel

class UpdateHiveRequest(ApiModel):
    """Datos para crear o actualizar una colmena"""
    name: str = Field(..., min_length=4, max_length=60, description="Nombre de la colmena")
    code: str = Field(..., min_length=5, max_length=5, description="Código único de 5 caracteres")
    address: str = Field(..., min_length=1, max_length=300, description="Dirección de la colmena")

    # Se recorta antes de aplicar min_length/max_length
    @field_validator('name', 'address', mode='before')
    @classmethod
    def validate_not_blank(cls, v):
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            raise ValueError('El campo no puede estar vacío')
        return v

class HiveListItem(ApiModel):
    """Proyección ligera para listados"""
    id: int
    name: str
    code: str
    is_deleted: bool
    hive_section_count: int = 0

class Hive(ApiModel):
    id: int
    name: str
    code: str
    address: str
    is_deleted: bool
    last_updated: Optional[datetime] = None
