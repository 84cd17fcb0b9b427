# app/modules/hives/interfaces.py
from abc import ABC, abstractmethod
from typing import List

from .schemas import Hive, HiveListItem, UpdateHiveRequest


class IHiveService(ABC):
    """Contrato del servicio de colmenas.

    Las implementaciones lanzan ``RequestedResourceNotFoundError`` cuando
    el id no existe y ``RequestedResourceHasConflictError`` cuando el
    estado impide la operación.
    """

    @abstractmethod
    async def get_hives(self) -> List[HiveListItem]:
        ...

    @abstractmethod
    async def get_hive(self, hive_id: int) -> Hive:
        ...

    @abstractmethod
    async def create_hive(self, create_request: UpdateHiveRequest) -> Hive:
        ...

    @abstractmethod
    async def update_hive(self, hive_id: int, update_request: UpdateHiveRequest) -> Hive:
        ...

    @abstractmethod
    async def delete_hive(self, hive_id: int) -> None:
        ...

    @abstractmethod
    async def set_status(self, hive_id: int, deleted_status: bool) -> None:
        ...
