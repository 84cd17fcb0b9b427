# app/modules/hive_sections/service.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from starlette.concurrency import run_in_threadpool
import logging

from .interfaces import IHiveSectionService
from .repository import HiveSectionRepository
from .schemas import HiveSection, HiveSectionListItem, UpdateHiveSectionRequest
from app.config.settings import settings
from app.core.exceptions import (
    RequestedResourceNotFoundError, RequestedResourceHasConflictError
)

logger = logging.getLogger(__name__)

class HiveSectionService(IHiveSectionService):
    def __init__(self, db: Session, user_id: int = None):
        self.db = db
        self.user_id = user_id if user_id is not None else settings.system_user_id
        self.repository = HiveSectionRepository(db)

    async def get_hive_sections(self, hive_id: Optional[int] = None) -> List[HiveSectionListItem]:
        if hive_id is not None and not await run_in_threadpool(self.repository.hive_exists, hive_id):
            raise RequestedResourceNotFoundError(f"Hive {hive_id} doesn't exist.")

        sections = await run_in_threadpool(self.repository.get_hive_sections, hive_id)
        return [HiveSectionListItem.model_validate(section) for section in sections]

    async def get_hive_section(self, hive_section_id: int) -> HiveSection:
        section = await self._get_existing_section(hive_section_id)
        return HiveSection.model_validate(section)

    async def create_hive_section(self, create_request: UpdateHiveSectionRequest) -> HiveSection:
        await self._check_can_store(create_request)

        try:
            section = await run_in_threadpool(
                self.repository.create_hive_section,
                name=create_request.name,
                code=create_request.code,
                store_hive_id=create_request.store_hive_id,
                user_id=self.user_id
            )
        except IntegrityError as e:
            await run_in_threadpool(self.db.rollback)
            logger.warning(f"Integrity error creating hive section {create_request.code}: {e}")
            raise RequestedResourceHasConflictError("The hive section can't be created.") from e

        logger.info(f"Created hive section {section.id} in hive {section.store_hive_id}")
        return HiveSection.model_validate(section)

    async def update_hive_section(self, hive_section_id: int, update_request: UpdateHiveSectionRequest) -> HiveSection:
        section = await self._get_existing_section(hive_section_id)
        await self._check_can_store(update_request, exclude_id=hive_section_id)

        try:
            section = await run_in_threadpool(
                self.repository.update_hive_section,
                section,
                name=update_request.name,
                code=update_request.code,
                store_hive_id=update_request.store_hive_id,
                user_id=self.user_id
            )
        except IntegrityError as e:
            await run_in_threadpool(self.db.rollback)
            logger.warning(f"Integrity error updating hive section {hive_section_id}: {e}")
            raise RequestedResourceHasConflictError("The hive section can't be updated.") from e

        logger.info(f"Updated hive section {hive_section_id}")
        return HiveSection.model_validate(section)

    async def delete_hive_section(self, hive_section_id: int) -> None:
        """Solo se eliminan secciones marcadas como borradas"""
        section = await self._get_existing_section(hive_section_id)

        if not section.is_deleted:
            raise RequestedResourceHasConflictError(
                f"Hive section {hive_section_id} must be marked as deleted before removal."
            )

        try:
            await run_in_threadpool(self.repository.delete_hive_section, section)
        except IntegrityError as e:
            await run_in_threadpool(self.db.rollback)
            raise RequestedResourceHasConflictError("The hive section can't be deleted.") from e

        logger.info(f"Deleted hive section {hive_section_id}")

    async def set_status(self, hive_section_id: int, deleted_status: bool) -> None:
        section = await self._get_existing_section(hive_section_id)
        await run_in_threadpool(self.repository.set_status, section, deleted_status, self.user_id)
        logger.info(f"Hive section {hive_section_id} deleted status set to {deleted_status}")

    async def _get_existing_section(self, hive_section_id: int):
        section = await run_in_threadpool(self.repository.get_hive_section, hive_section_id)
        if section is None:
            raise RequestedResourceNotFoundError(f"Hive section {hive_section_id} doesn't exist.")
        return section

    async def _check_can_store(self, request: UpdateHiveSectionRequest, exclude_id: Optional[int] = None):
        if not await run_in_threadpool(self.repository.hive_exists, request.store_hive_id):
            raise RequestedResourceHasConflictError(
                f"Hive {request.store_hive_id} doesn't exist."
            )

        if await run_in_threadpool(self.repository.code_exists, request.code, exclude_id=exclude_id):
            raise RequestedResourceHasConflictError(
                f"A hive section with code '{request.code}' already exists."
            )
