# app/modules/hive_sections/repository.py
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
import logging

from app.shared.database.models import StoreHive, StoreHiveSection

logger = logging.getLogger(__name__)

class HiveSectionRepository:
    """Repository para secciones de colmena"""

    def __init__(self, db: Session):
        self.db = db

    def get_hive_sections(self, hive_id: Optional[int] = None) -> List[StoreHiveSection]:
        query = self.db.query(StoreHiveSection)
        if hive_id is not None:
            query = query.filter(StoreHiveSection.store_hive_id == hive_id)
        return query.order_by(StoreHiveSection.id).all()

    def get_hive_section(self, hive_section_id: int) -> Optional[StoreHiveSection]:
        return self.db.query(StoreHiveSection).filter(
            StoreHiveSection.id == hive_section_id
        ).first()

    def hive_exists(self, hive_id: int) -> bool:
        return self.db.query(StoreHive.id).filter(StoreHive.id == hive_id).first() is not None

    def code_exists(self, code: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(StoreHiveSection.id).filter(StoreHiveSection.code == code)
        if exclude_id is not None:
            query = query.filter(StoreHiveSection.id != exclude_id)
        return query.first() is not None

    def create_hive_section(self, name: str, code: str, store_hive_id: int, user_id: int) -> StoreHiveSection:
        section = StoreHiveSection(
            name=name,
            code=code,
            store_hive_id=store_hive_id,
            is_deleted=False,
            created_by=user_id,
            last_updated_by=user_id,
            created=datetime.now(),
            last_updated=datetime.now()
        )

        self.db.add(section)
        self.db.commit()
        self.db.refresh(section)
        return section

    def update_hive_section(
        self,
        section: StoreHiveSection,
        name: str,
        code: str,
        store_hive_id: int,
        user_id: int
    ) -> StoreHiveSection:
        section.name = name
        section.code = code
        section.store_hive_id = store_hive_id
        section.last_updated_by = user_id
        section.last_updated = datetime.now()

        self.db.commit()
        self.db.refresh(section)
        return section

    def set_status(self, section: StoreHiveSection, deleted_status: bool, user_id: int) -> StoreHiveSection:
        section.is_deleted = deleted_status
        section.last_updated_by = user_id
        section.last_updated = datetime.now()

        self.db.commit()
        self.db.refresh(section)
        return section

    def delete_hive_section(self, section: StoreHiveSection) -> None:
        self.db.delete(section)
        self.db.commit()
