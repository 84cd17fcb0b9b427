# app/core/dependency_registration.py
from app.core.registry import ServiceRegistry
from app.modules.hives import IHiveService, HiveService
from app.modules.hive_sections import IHiveSectionService, HiveSectionService

def register_services(registry: ServiceRegistry) -> ServiceRegistry:
    """Asocia cada interfaz de servicio con su implementación"""
    registry.register(IHiveService, HiveService)
    registry.register(IHiveSectionService, HiveSectionService)
    return registry
