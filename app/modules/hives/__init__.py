# app/modules/hives/__init__.py
"""
Módulo Hives - Gestión de colmenas (unidades de almacenamiento)

Este módulo implementa las operaciones sobre colmenas:
- Listado con conteo de secciones
- Consulta, creación y actualización
- Marcado de borrado (soft delete) y eliminación definitiva
- Listado de secciones de una colmena

Arquitectura:
- router.py: Endpoints de colmenas
- interfaces.py: Contrato IHiveService
- service.py: Lógica de negocio de colmenas
- repository.py: Acceso a datos de colmenas
- schemas.py: Modelos de request/response
"""

from .router import router
from .interfaces import IHiveService
from .service import HiveService
from .repository import HiveRepository

__all__ = [
    "router",
    "IHiveService",
    "HiveService",
    "HiveRepository"
]
