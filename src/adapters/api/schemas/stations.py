from __future__ import annotations

from pydantic import BaseModel, Field


class StationRequestSchema(BaseModel):
    name: str = Field(..., min_length=1)


class StationSchema(BaseModel):
    id: int
    name: str
