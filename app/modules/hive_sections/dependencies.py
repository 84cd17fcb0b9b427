# app/modules/hive_sections/dependencies.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config.database import get_db
from .interfaces import IHiveSectionService

def get_hive_section_service(request: Request, db: Session = Depends(get_db)) -> IHiveSectionService:
    """Servicio de secciones resuelto desde el registro de la aplicación"""
    return request.app.state.registry.resolve(IHiveSectionService, db)
