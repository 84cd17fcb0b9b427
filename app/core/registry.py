# app/core/registry.py
"""
Registro de dependencias: interfaz de servicio -> implementación.

Cada interfaz (``IHiveService``, ``IHiveSectionService``...) se asocia
a exactamente una fábrica al arrancar la aplicación.  Una vez congelado,
el registro es de solo lectura y se comparte entre todas las peticiones;
cada petición obtiene su propia instancia del servicio construida con
su sesión de base de datos.

Uso::

    registry = ServiceRegistry()
    registry.register(IHiveService, HiveService)
    registry.freeze()

    service = registry.resolve(IHiveService, db)
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Type, TypeVar

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")

ServiceFactory = Callable[[Session], Any]


class RegistryFrozenError(RuntimeError):
    """Se intentó registrar un servicio después del arranque"""


class ServiceRegistry:
    """Asociación fija interfaz -> fábrica de implementación"""

    def __init__(self):
        self._factories: Dict[type, ServiceFactory] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def registrations(self) -> Mapping[type, ServiceFactory]:
        return MappingProxyType(self._factories)

    def register(self, interface: Type[T], factory: ServiceFactory) -> None:
        """Bind ``interface`` to ``factory``; a later binding replaces an earlier one"""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {interface.__name__}: registry is frozen"
            )
        if not callable(factory):
            raise TypeError(f"Factory for {interface.__name__} must be callable")

        if interface in self._factories:
            logger.warning(f"Rebinding {interface.__name__} to {getattr(factory, '__name__', factory)}")
        self._factories[interface] = factory
        logger.debug(f"Registered {interface.__name__} -> {getattr(factory, '__name__', factory)}")

    def freeze(self) -> "ServiceRegistry":
        self._frozen = True
        logger.info(f"Service registry frozen with {len(self._factories)} bindings")
        return self

    def is_registered(self, interface: type) -> bool:
        return interface in self._factories

    def resolve(self, interface: Type[T], db: Session) -> T:
        """Build the implementation bound to ``interface`` for one request"""
        factory = self._factories.get(interface)
        if factory is None:
            raise LookupError(f"No implementation registered for {interface.__name__}")

        service = factory(db)
        if not isinstance(service, interface):
            raise TypeError(
                f"{type(service).__name__} does not implement {interface.__name__}"
            )
        return service
