# app/modules/hives/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List, Optional, Tuple
from datetime import datetime
import logging

from app.shared.database.models import StoreHive, StoreHiveSection

logger = logging.getLogger(__name__)

class HiveRepository:
    """Repository para colmenas"""

    def __init__(self, db: Session):
        self.db = db

    def get_hives_with_section_count(self) -> List[Tuple[StoreHive, int]]:
        """Colmenas ordenadas por id con el número de secciones"""
        return self.db.query(
            StoreHive,
            func.count(StoreHiveSection.id).label('hive_section_count')
        ).outerjoin(
            StoreHiveSection, StoreHiveSection.store_hive_id == StoreHive.id
        ).group_by(StoreHive.id).order_by(StoreHive.id).all()

    def get_hive(self, hive_id: int) -> Optional[StoreHive]:
        return self.db.query(StoreHive).filter(StoreHive.id == hive_id).first()

    def code_exists(self, code: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(StoreHive.id).filter(StoreHive.code == code)
        if exclude_id is not None:
            query = query.filter(StoreHive.id != exclude_id)
        return query.first() is not None

    def count_sections(self, hive_id: int) -> int:
        return self.db.query(func.count(StoreHiveSection.id)).filter(
            StoreHiveSection.store_hive_id == hive_id
        ).scalar() or 0

    def create_hive(self, name: str, code: str, address: str, user_id: int) -> StoreHive:
        hive = StoreHive(
            name=name,
            code=code,
            address=address,
            is_deleted=False,
            created_by=user_id,
            last_updated_by=user_id,
            created=datetime.now(),
            last_updated=datetime.now()
        )

        self.db.add(hive)
        self.db.commit()
        self.db.refresh(hive)
        return hive

    def update_hive(self, hive: StoreHive, name: str, code: str, address: str, user_id: int) -> StoreHive:
        hive.name = name
        hive.code = code
        hive.address = address
        hive.last_updated_by = user_id
        hive.last_updated = datetime.now()

        self.db.commit()
        self.db.refresh(hive)
        return hive

    def set_status(self, hive: StoreHive, deleted_status: bool, user_id: int) -> StoreHive:
        hive.is_deleted = deleted_status
        hive.last_updated_by = user_id
        hive.last_updated = datetime.now()

        self.db.commit()
        self.db.refresh(hive)
        return hive

    def delete_hive(self, hive: StoreHive) -> None:
        self.db.delete(hive)
        self.db.commit()
