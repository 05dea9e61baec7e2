"""
Business logic for entities.

The ``EntityService`` implements listing, creation, bulk deletion and
editing of entities held in an :class:`EntityStore`.  Every rejected
operation raises a :class:`ValidationError` or :class:`NotFoundError`
carrying the exact message returned to the client.
"""

import logging
from typing import Any, List, Optional, Sequence

from ..core.errors import NotFoundError, ValidationError
from ..core.store import Entity, EntityStore
from ..schemas.entity import EntityRead

logger = logging.getLogger(__name__)

MISSING_SEARCH_MESSAGE = 'No se envió el parámetro "search".'
MISSING_FIELDS_MESSAGE = "Debe proporcionar name y description"
MISSING_IDS_MESSAGE = "Debe proporcionar al menos un ID de entidad para eliminar"
NO_MATCHING_IDS_MESSAGE = "No se encontraron entidades para eliminar con los IDs proporcionados"
ENTITY_NOT_FOUND_MESSAGE = "Entidad no encontrada"


def _to_read(entity: Entity) -> EntityRead:
    return EntityRead.model_validate(entity)


class EntityService:
    """Service for managing entities."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    async def list_entities(self, search: Optional[str]) -> List[EntityRead]:
        """Return entities whose name contains ``search``, ignoring case.

        ``search`` is mandatory but may be empty, in which case the
        whole collection is returned.  ``None`` means the client did not
        send the parameter at all.
        """
        if search is None:
            raise ValidationError(MISSING_SEARCH_MESSAGE)
        if search == "":
            return [_to_read(entity) for entity in self.store]
        term = search.lower()
        return [_to_read(entity) for entity in self.store if term in str(entity.name).lower()]

    async def create_entity(self, name: Any, description: Any) -> EntityRead:
        if not name or not description:
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        entity = self.store.add(Entity(id=self.store.next_id(), name=name, description=description))
        logger.info("Created entity %s '%s'", entity.id, entity.name)
        return _to_read(entity)

    async def delete_entities(self, entity_ids: Optional[Sequence[int]]) -> List[EntityRead]:
        """Remove every entity whose id is in ``entity_ids``.

        The request fails only when none of the ids matches; unknown ids
        are ignored as long as at least one entity was removed.  Returns
        the entities that remain.
        """
        if not entity_ids:
            raise ValidationError(MISSING_IDS_MESSAGE)
        wanted = set(entity_ids)
        remaining = [entity for entity in self.store if entity.id not in wanted]
        if len(remaining) == len(self.store):
            logger.warning("No entities matched ids %s", list(entity_ids))
            raise NotFoundError(NO_MATCHING_IDS_MESSAGE)
        removed = len(self.store) - len(remaining)
        self.store.replace(remaining)
        logger.info("Deleted %d entities", removed)
        return [_to_read(entity) for entity in remaining]

    async def edit_entity(
        self,
        entity_id: Optional[int],
        name: Any,
        description: Any,
    ) -> EntityRead:
        """Replace name and description of an entity, keeping its id.

        Fields are checked before the lookup.  ``entity_id`` is ``None``
        when the client sent an id that is not a number; no entity
        matches it.
        """
        if not name or not description:
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        entity = self.store.find(entity_id)
        if entity is None:
            raise NotFoundError(ENTITY_NOT_FOUND_MESSAGE)
        entity.name = name
        entity.description = description
        logger.info("Updated entity %s", entity_id)
        return _to_read(entity)
