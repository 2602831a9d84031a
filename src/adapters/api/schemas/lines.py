from __future__ import annotations

from pydantic import BaseModel, Field

from .stations import StationSchema


class LineRequestSchema(BaseModel):
    name: str = Field(..., min_length=1)
    color: str
    up_station_id: int
    down_station_id: int
    distance: int = Field(..., gt=0)


class LineUpdateSchema(BaseModel):
    name: str = Field(..., min_length=1)
    color: str


class SectionRequestSchema(BaseModel):
    up_station_id: int
    down_station_id: int
    distance: int = Field(..., gt=0)


class LineSchema(BaseModel):
    id: int
    name: str
    color: str
    stations: list[StationSchema] = []
    total_distance: int = 0
