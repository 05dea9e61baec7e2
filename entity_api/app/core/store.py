"""
In‑memory storage for entities and request logs.

An :class:`AppStore` bundles the two ordered collections the service
works with.  It is created by ``create_app`` and attached to
``app.state.store``; route handlers obtain it through the
:func:`get_store` dependency, so each application instance (and each
test) works against its own store.

Nothing here is persisted.  All operations are plain list manipulation
with no await points, so they are atomic with respect to other request
handlers running on the same event loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Iterator, List, Optional

from fastapi import Request


@dataclass
class Entity:
    id: int
    name: Any
    description: Any


@dataclass
class RequestLog:
    id: int
    method: str
    url: str
    status: int
    elapsed: int
    date: datetime


class EntityStore:
    """Ordered collection of :class:`Entity` records."""

    def __init__(self, entities: Optional[Iterable[Entity]] = None) -> None:
        self._entities: List[Entity] = list(entities or [])

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def all(self) -> List[Entity]:
        return list(self._entities)

    def next_id(self) -> int:
        """Id for the next entity: the current count plus one.

        After a deletion the returned id may equal the id of a surviving
        entity.
        """
        return len(self._entities) + 1

    def add(self, entity: Entity) -> Entity:
        self._entities.append(entity)
        return entity

    def find(self, entity_id: Optional[int]) -> Optional[Entity]:
        for entity in self._entities:
            if entity.id == entity_id:
                return entity
        return None

    def replace(self, entities: Iterable[Entity]) -> None:
        """Swap the whole collection for ``entities``."""
        self._entities = list(entities)


class RequestLogStore:
    """Append‑only collection of :class:`RequestLog` records."""

    def __init__(self, logs: Optional[Iterable[RequestLog]] = None) -> None:
        self._logs: List[RequestLog] = list(logs or [])

    def __len__(self) -> int:
        return len(self._logs)

    def __iter__(self) -> Iterator[RequestLog]:
        return iter(self._logs)

    def all(self) -> List[RequestLog]:
        return list(self._logs)

    def next_id(self) -> int:
        return len(self._logs) + 1

    def append(self, log: RequestLog) -> RequestLog:
        self._logs.append(log)
        return log


@dataclass
class AppStore:
    """All mutable state of one application instance."""

    entities: EntityStore = field(default_factory=EntityStore)
    requests: RequestLogStore = field(default_factory=RequestLogStore)


def seed_entities() -> List[Entity]:
    return [Entity(id=n, name=f"Entity {n}", description=f"Description {n}") for n in range(1, 11)]


def seed_request_logs() -> List[RequestLog]:
    samples = [
        ("GET", "/api/entities", 200, 150, datetime(2024, 1, 15, 8, 30)),
        ("POST", "/api/createEntity", 201, 200, datetime(2024, 1, 15, 9, 15)),
        ("PUT", "/api/editEntity/123", 204, 120, datetime(2024, 1, 15, 10, 0)),
        ("DELETE", "/api/deleteEntities", 200, 180, datetime(2024, 1, 15, 10, 45)),
    ]
    return [
        RequestLog(
            id=index,
            method=method,
            url=url,
            status=status,
            elapsed=elapsed,
            date=date.replace(tzinfo=timezone.utc),
        )
        for index, (method, url, status, elapsed, date) in enumerate(samples, start=1)
    ]


def build_store(seed: bool = True) -> AppStore:
    """Create a new store, optionally populated with the sample data."""
    if not seed:
        return AppStore()
    return AppStore(
        entities=EntityStore(seed_entities()),
        requests=RequestLogStore(seed_request_logs()),
    )


def get_store(request: Request) -> AppStore:
    """FastAPI dependency returning the store of the running application."""
    return request.app.state.store
