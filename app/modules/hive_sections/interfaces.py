# app/modules/hive_sections/interfaces.py
from abc import ABC, abstractmethod
from typing import List, Optional

from .schemas import HiveSection, HiveSectionListItem, UpdateHiveSectionRequest


class IHiveSectionService(ABC):
    """Contrato del servicio de secciones de colmena"""

    @abstractmethod
    async def get_hive_sections(self, hive_id: Optional[int] = None) -> List[HiveSectionListItem]:
        """Todas las secciones, o solo las de ``hive_id`` (404 si la colmena no existe)"""

    @abstractmethod
    async def get_hive_section(self, hive_section_id: int) -> HiveSection:
        ...

    @abstractmethod
    async def create_hive_section(self, create_request: UpdateHiveSectionRequest) -> HiveSection:
        ...

    @abstractmethod
    async def update_hive_section(self, hive_section_id: int, update_request: UpdateHiveSectionRequest) -> HiveSection:
        ...

    @abstractmethod
    async def delete_hive_section(self, hive_section_id: int) -> None:
        ...

    @abstractmethod
    async def set_status(self, hive_section_id: int, deleted_status: bool) -> None:
        ...
