# app/modules/hive_sections/router.py
from fastapi import APIRouter, Depends, Path, Response, status
from typing import List

from .dependencies import get_hive_section_service
from .interfaces import IHiveSectionService
from .schemas import HiveSection, HiveSectionListItem, UpdateHiveSectionRequest
from app.shared.schemas.common import (
    DELETED_STATUS_PATTERN, ErrorResponse, ValidationErrorResponse, parse_deleted_status
)

router = APIRouter()

SECTIONS_LOCATION = "/api/sections/{}"

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "The requested hive section doesn't exist."}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}
CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}
SERVER_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=List[HiveSectionListItem],
    responses={**SERVER_ERROR}
)
async def get_hive_sections(
    hive_section_service: IHiveSectionService = Depends(get_hive_section_service)
):
    """Listado de todas las secciones de colmena"""
    return await hive_section_service.get_hive_sections()

@router.get(
    "/{hive_section_id}",
    response_model=HiveSection,
    responses={**NOT_FOUND, **SERVER_ERROR}
)
async def get_hive_section(
    hive_section_id: int = Path(..., ge=1, description="ID de la sección"),
    hive_section_service: IHiveSectionService = Depends(get_hive_section_service)
):
    """Obtener una sección por ID"""
    return await hive_section_service.get_hive_section(hive_section_id)

@router.put(
    "/{hive_section_id}/status/{deleted_status}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **SERVER_ERROR}
)
async def set_hive_section_status(
    hive_section_id: int = Path(..., ge=1, description="ID de la sección"),
    deleted_status: str = Path(..., pattern=DELETED_STATUS_PATTERN, description="Nuevo estado de borrado: true o false"),
    hive_section_service: IHiveSectionService = Depends(get_hive_section_service)
):
    """Marcar o desmarcar una sección como borrada"""
    await hive_section_service.set_status(hive_section_id, parse_deleted_status(deleted_status))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post(
    "",
    response_model=HiveSection,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **CONFLICT, **SERVER_ERROR}
)
async def add_hive_section(
    create_request: UpdateHiveSectionRequest,
    response: Response,
    hive_section_service: IHiveSectionService = Depends(get_hive_section_service)
):
    """
    Crear una nueva sección de colmena

    **Validaciones:**
    - Nombre de 4 a 60 caracteres
    - Código de exactamente 5 caracteres, único
    - La colmena `storeHiveId` debe existir (409 si no)
    """
    section = await hive_section_service.create_hive_section(create_request)
    response.headers["Location"] = SECTIONS_LOCATION.format(section.id)
    return section

@router.put(
    "/{hive_section_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND, **CONFLICT, **SERVER_ERROR}
)
async def update_hive_section(
    update_request: UpdateHiveSectionRequest,
    hive_section_id: int = Path(..., ge=1, description="ID de la sección"),
    hive_section_service: IHiveSectionService = Depends(get_hive_section_service)
):
    """Actualizar una sección existente"""
    await hive_section_service.update_hive_section(hive_section_id, update_request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete(
    "/{hive_section_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **CONFLICT, **SERVER_ERROR}
)
async def delete_hive_section(
    hive_section_id: int = Path(..., ge=1, description="ID de la sección"),
    hive_section_service: IHiveSectionService = Depends(get_hive_section_service)
):
    """
    Eliminar una sección de colmena

    **Proceso:**
    1. Se marca la sección como borrada
    2. Se elimina definitivamente

    Los dos pasos no son atómicos: si el segundo falla la sección queda
    marcada como borrada y el cliente debe repetir la eliminación.
    """
    await hive_section_service.set_status(hive_section_id, True)
    await hive_section_service.delete_hive_section(hive_section_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
