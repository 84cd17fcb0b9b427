# app/modules/hives/service.py
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from starlette.concurrency import run_in_threadpool
import logging

from .interfaces import IHiveService
from .repository import HiveRepository
from .schemas import Hive, HiveListItem, UpdateHiveRequest
from app.config.settings import settings
from app.core.exceptions import (
    RequestedResourceNotFoundError, RequestedResourceHasConflictError
)

logger = logging.getLogger(__name__)

class HiveService(IHiveService):
    """Reglas de negocio de colmenas.

    El repositorio usa una ``Session`` síncrona; cada llamada se ejecuta en
    el threadpool para no bloquear el event loop.
    """

    def __init__(self, db: Session, user_id: int = None):
        self.db = db
        self.user_id = user_id if user_id is not None else settings.system_user_id
        self.repository = HiveRepository(db)

    async def get_hives(self) -> List[HiveListItem]:
        """Listado de colmenas con el conteo de secciones"""
        rows = await run_in_threadpool(self.repository.get_hives_with_section_count)
        return [
            HiveListItem(
                id=hive.id,
                name=hive.name,
                code=hive.code,
                is_deleted=hive.is_deleted,
                hive_section_count=section_count
            )
            for hive, section_count in rows
        ]

    async def get_hive(self, hive_id: int) -> Hive:
        hive = await self._get_existing_hive(hive_id)
        return Hive.model_validate(hive)

    async def create_hive(self, create_request: UpdateHiveRequest) -> Hive:
        if await run_in_threadpool(self.repository.code_exists, create_request.code):
            raise RequestedResourceHasConflictError(
                f"A hive with code '{create_request.code}' already exists."
            )

        try:
            hive = await run_in_threadpool(
                self.repository.create_hive,
                name=create_request.name,
                code=create_request.code,
                address=create_request.address,
                user_id=self.user_id
            )
        except IntegrityError as e:
            await run_in_threadpool(self.db.rollback)
            logger.warning(f"Integrity error creating hive {create_request.code}: {e}")
            raise RequestedResourceHasConflictError("The hive can't be created.") from e

        logger.info(f"Created hive {hive.id} ({hive.code})")
        return Hive.model_validate(hive)

    async def update_hive(self, hive_id: int, update_request: UpdateHiveRequest) -> Hive:
        hive = await self._get_existing_hive(hive_id)

        if await run_in_threadpool(self.repository.code_exists, update_request.code, exclude_id=hive_id):
            raise RequestedResourceHasConflictError(
                f"A hive with code '{update_request.code}' already exists."
            )

        try:
            hive = await run_in_threadpool(
                self.repository.update_hive,
                hive,
                name=update_request.name,
                code=update_request.code,
                address=update_request.address,
                user_id=self.user_id
            )
        except IntegrityError as e:
            await run_in_threadpool(self.db.rollback)
            logger.warning(f"Integrity error updating hive {hive_id}: {e}")
            raise RequestedResourceHasConflictError("The hive can't be updated.") from e

        logger.info(f"Updated hive {hive_id}")
        return Hive.model_validate(hive)

    async def delete_hive(self, hive_id: int) -> None:
        """Solo se eliminan colmenas marcadas como borradas y sin secciones"""
        hive = await self._get_existing_hive(hive_id)

        if not hive.is_deleted:
            raise RequestedResourceHasConflictError(
                f"Hive {hive_id} must be marked as deleted before removal."
            )

        section_count = await run_in_threadpool(self.repository.count_sections, hive_id)
        if section_count:
            raise RequestedResourceHasConflictError(
                f"Hive {hive_id} still has {section_count} section(s)."
            )

        try:
            await run_in_threadpool(self.repository.delete_hive, hive)
        except IntegrityError as e:
            await run_in_threadpool(self.db.rollback)
            raise RequestedResourceHasConflictError("The hive can't be deleted.") from e

        logger.info(f"Deleted hive {hive_id}")

    async def set_status(self, hive_id: int, deleted_status: bool) -> None:
        hive = await self._get_existing_hive(hive_id)
        await run_in_threadpool(self.repository.set_status, hive, deleted_status, self.user_id)
        logger.info(f"Hive {hive_id} deleted status set to {deleted_status}")

    async def _get_existing_hive(self, hive_id: int):
        hive = await run_in_threadpool(self.repository.get_hive, hive_id)
        if hive is None:
            raise RequestedResourceNotFoundError(f"Hive {hive_id} doesn't exist.")
        return hive
