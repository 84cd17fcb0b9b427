# app/modules/hives/router.py
from fastapi import APIRouter, Depends, Path, Response, status
from typing import List

from .dependencies import get_hive_service
from .interfaces import IHiveService
from .schemas import Hive, HiveListItem, UpdateHiveRequest
from app.modules.hive_sections.dependencies import get_hive_section_service
from app.modules.hive_sections.interfaces import IHiveSectionService
from app.modules.hive_sections.schemas import HiveSectionListItem
from app.shared.schemas.common import (
    DELETED_STATUS_PATTERN, ErrorResponse, ValidationErrorResponse, parse_deleted_status
)

router = APIRouter()

HIVES_LOCATION = "/api/hives/{}"

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "The requested hive doesn't exist."}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}
CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}
SERVER_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=List[HiveListItem],
    responses={**SERVER_ERROR}
)
async def get_hives(
    hive_service: IHiveService = Depends(get_hive_service)
):
    """
    Listado de colmenas

    **Incluye:**
    - Código, nombre y estado de borrado
    - Número de secciones de cada colmena
    """
    return await hive_service.get_hives()

@router.get(
    "/{hive_id}",
    response_model=Hive,
    responses={**NOT_FOUND, **SERVER_ERROR}
)
async def get_hive(
    hive_id: int = Path(..., ge=1, description="ID de la colmena"),
    hive_service: IHiveService = Depends(get_hive_service)
):
    """Obtener una colmena por ID"""
    return await hive_service.get_hive(hive_id)

@router.get(
    "/{hive_id}/sections",
    response_model=List[HiveSectionListItem],
    responses={**NOT_FOUND, **SERVER_ERROR}
)
async def get_hive_sections(
    hive_id: int = Path(..., ge=1, description="ID de la colmena"),
    hive_section_service: IHiveSectionService = Depends(get_hive_section_service)
):
    """Listado de secciones de la colmena indicada"""
    return await hive_section_service.get_hive_sections(hive_id)

@router.post(
    "",
    response_model=Hive,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **CONFLICT, **SERVER_ERROR}
)
async def add_hive(
    create_request: UpdateHiveRequest,
    response: Response,
    hive_service: IHiveService = Depends(get_hive_service)
):
    """
    Crear una nueva colmena

    **Validaciones:**
    - Nombre de 4 a 60 caracteres
    - Código de exactamente 5 caracteres, único
    - Dirección obligatoria (máximo 300 caracteres)

    **Respuesta:** 201 con header `Location` apuntando a la colmena creada.
    """
    hive = await hive_service.create_hive(create_request)
    response.headers["Location"] = HIVES_LOCATION.format(hive.id)
    return hive

@router.put(
    "/{hive_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND, **CONFLICT, **SERVER_ERROR}
)
async def update_hive(
    update_request: UpdateHiveRequest,
    hive_id: int = Path(..., ge=1, description="ID de la colmena"),
    hive_service: IHiveService = Depends(get_hive_service)
):
    """Actualizar una colmena existente"""
    await hive_service.update_hive(hive_id, update_request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete(
    "/{hive_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **CONFLICT, **SERVER_ERROR}
)
async def delete_hive(
    hive_id: int = Path(..., ge=1, description="ID de la colmena"),
    hive_service: IHiveService = Depends(get_hive_service)
):
    """
    Eliminar una colmena

    La colmena debe estar marcada como borrada y no tener secciones;
    en caso contrario se responde 409.
    """
    await hive_service.delete_hive(hive_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.put(
    "/{hive_id}/status/{deleted_status}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **SERVER_ERROR}
)
async def set_hive_status(
    hive_id: int = Path(..., ge=1, description="ID de la colmena"),
    deleted_status: str = Path(..., pattern=DELETED_STATUS_PATTERN, description="Nuevo estado de borrado: true o false"),
    hive_service: IHiveService = Depends(get_hive_service)
):
    """Marcar o desmarcar una colmena como borrada"""
    await hive_service.set_status(hive_id, parse_deleted_status(deleted_status))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
