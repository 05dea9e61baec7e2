"""
Entity endpoints.

These routes provide list/filter, create, bulk delete and edit
operations over the in‑memory entity collection.  Business rules live
in :class:`EntityService`; the handlers translate its domain errors
into HTTP errors, which the application renders as
``{"error": "<message>"}``.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status
from pydantic import StrictInt

from ..deps import get_entity_service
from ...core.errors import EntityAPIError
from ...schemas.entity import EntityPayload, EntityRead
from ...services.entity_service import EntityService

router = APIRouter()


def _parse_entity_id(raw: str) -> Optional[int]:
    """Path ids that are not integers match no entity."""
    try:
        return int(raw)
    except ValueError:
        return None

_ERROR_RESPONSE = {
    "content": {"application/json": {"example": {"error": "mensaje de error"}}},
}


@router.get(
    "/entities",
    response_model=List[EntityRead],
    responses={status.HTTP_400_BAD_REQUEST: _ERROR_RESPONSE},
)
async def list_entities(
    search: Optional[str] = Query(None, description="Término de búsqueda para filtrar las entidades."),
    service: EntityService = Depends(get_entity_service),
) -> List[EntityRead]:
    """Obtiene todas las entidades filtradas por un término de búsqueda.

    The ``search`` parameter is required but may be empty; an empty
    value returns every entity.
    """
    try:
        return await service.list_entities(search)
    except EntityAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.post(
    "/createEntity",
    response_model=EntityRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: _ERROR_RESPONSE},
)
async def create_entity(
    payload: Optional[EntityPayload] = None,
    service: EntityService = Depends(get_entity_service),
) -> EntityRead:
    """Crea una nueva entidad con el nombre y la descripción proporcionados."""
    payload = payload or EntityPayload()
    try:
        return await service.create_entity(payload.name, payload.description)
    except EntityAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.delete(
    "/deleteEntities",
    response_model=List[EntityRead],
    responses={
        status.HTTP_400_BAD_REQUEST: _ERROR_RESPONSE,
        status.HTTP_404_NOT_FOUND: _ERROR_RESPONSE,
    },
)
async def delete_entities(
    entity_ids: Optional[List[StrictInt]] = Body(None, examples=[[1, 2]]),
    service: EntityService = Depends(get_entity_service),
) -> List[EntityRead]:
    """Elimina las entidades cuyos IDs se envían en el cuerpo de la solicitud.

    Returns the entities that remain after the deletion.
    """
    try:
        return await service.delete_entities(entity_ids)
    except EntityAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.put(
    "/editEntity/{entity_id}",
    response_model=EntityRead,
    responses={
        status.HTTP_400_BAD_REQUEST: _ERROR_RESPONSE,
        status.HTTP_404_NOT_FOUND: _ERROR_RESPONSE,
    },
)
async def edit_entity(
    entity_id: str = Path(..., description="ID de la entidad que se desea editar."),
    payload: Optional[EntityPayload] = None,
    service: EntityService = Depends(get_entity_service),
) -> EntityRead:
    """Edita la entidad con el ID proporcionado."""
    payload = payload or EntityPayload()
    try:
        return await service.edit_entity(_parse_entity_id(entity_id), payload.name, payload.description)
    except EntityAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
