# app/modules/hives/dependencies.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config.database import get_db
from .interfaces import IHiveService

def get_hive_service(request: Request, db: Session = Depends(get_db)) -> IHiveService:
    """Servicio de colmenas resuelto desde el registro de la aplicación"""
    return request.app.state.registry.resolve(IHiveService, db)
