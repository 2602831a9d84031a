from __future__ import annotations

from pydantic import BaseModel

from .stations import StationSchema


class PathSchema(BaseModel):
    stations: list[StationSchema]
    distance: int
