"""
Pydantic models for entity data.

``EntityPayload`` is the body accepted by the create and edit
endpoints.  Its fields take any JSON value: presence is the only check,
and a missing or falsy field is reported by the service with its own
message rather than by FastAPI's generic validation error.
``EntityRead`` is the representation returned to clients.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class EntityPayload(BaseModel):
    """Schema for creating or editing an entity."""

    name: Optional[Any] = Field(None, examples=["Nueva Entidad"])
    description: Optional[Any] = Field(None, examples=["Descripción de la nueva entidad"])


class EntityRead(BaseModel):
    """Schema for reading an entity from the API.

    Names and descriptions are stored as the client sent them, so they
    are not guaranteed to be strings.
    """

    id: int = Field(..., examples=[1])
    name: Any = Field(..., examples=["Entity 1"])
    description: Any = Field(..., examples=["Description 1"])

    model_config = {
        "from_attributes": True,
    }
