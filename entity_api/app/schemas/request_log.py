"""Pydantic model for request log entries."""

from datetime import datetime

from pydantic import BaseModel, Field


class RequestLogRead(BaseModel):
    id: int
    method: str = Field(..., examples=["GET"])
    url: str = Field(..., examples=["/api/entities?search="])
    status: int = Field(..., examples=[200])
    elapsed: int = Field(..., description="Elapsed time in milliseconds", examples=[12])
    date: datetime

    model_config = {
        "from_attributes": True,
    }
