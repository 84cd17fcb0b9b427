# app/modules/hive_sections/__init__.py
"""
Módulo Hive Sections - Gestión de secciones de colmena

Cada sección pertenece a una sola colmena y tiene su propio estado de
borrado.  Eliminar una sección la marca primero como borrada y después
la elimina.

Arquitectura:
- router.py: Endpoints de secciones
- interfaces.py: Contrato IHiveSectionService
- service.py: Lógica de negocio de secciones
- repository.py: Acceso a datos de secciones
- schemas.py: Modelos de request/response
"""

from .router import router
from .interfaces import IHiveSectionService
from .service import HiveSectionService
from .repository import HiveSectionRepository

__all__ = [
    "router",
    "IHiveSectionService",
    "HiveSectionService",
    "HiveSectionRepository"
]
