from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from src.adapters.api.controllers.stations import station_to_schema
from src.adapters.api.dependencies import get_line_service
from src.adapters.api.schemas.lines import (
    LineRequestSchema,
    LineSchema,
    LineUpdateSchema,
    SectionRequestSchema,
)
from src.app.services.line_service import LineService
from src.domain.models import Line

router = APIRouter(prefix="/lines", tags=["lines"])


def _line_to_schema(line: Line) -> LineSchema:
    return LineSchema(
        id=line.id,
        name=line.name,
        color=line.color,
        stations=[station_to_schema(s) for s in line.stations],
        total_distance=line.sections.total_distance,
    )


@router.post("", response_model=LineSchema, status_code=status.HTTP_201_CREATED)
def create_line(
    req: LineRequestSchema,
    service: LineService = Depends(get_line_service),
) -> LineSchema:
    line = service.create_line(
        name=req.name,
        color=req.color,
        up_station_id=req.up_station_id,
        down_station_id=req.down_station_id,
        distance=req.distance,
    )
    return _line_to_schema(line)


@router.get("", response_model=list[LineSchema])
def list_lines(
    service: LineService = Depends(get_line_service),
) -> list[LineSchema]:
    return [_line_to_schema(line) for line in service.list_lines()]


@router.get("/{line_id}", response_model=LineSchema)
def get_line(
    line_id: int,
    service: LineService = Depends(get_line_service),
) -> LineSchema:
    return _line_to_schema(service.get_line(line_id=line_id))


@router.put("/{line_id}", response_model=LineSchema)
def update_line(
    line_id: int,
    req: LineUpdateSchema,
    service: LineService = Depends(get_line_service),
) -> LineSchema:
    line = service.update_line(line_id=line_id, name=req.name, color=req.color)
    return _line_to_schema(line)


@router.delete("/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_line(
    line_id: int,
    service: LineService = Depends(get_line_service),
) -> None:
    service.delete_line(line_id=line_id)


@router.post("/{line_id}/sections", response_model=LineSchema)
def add_section(
    line_id: int,
    req: SectionRequestSchema,
    service: LineService = Depends(get_line_service),
) -> LineSchema:
    line = service.add_section(
        line_id=line_id,
        up_station_id=req.up_station_id,
        down_station_id=req.down_station_id,
        distance=req.distance,
    )
    return _line_to_schema(line)


@router.delete("/{line_id}/sections", response_model=LineSchema)
def remove_station(
    line_id: int,
    station_id: int = Query(...),
    service: LineService = Depends(get_line_service),
) -> LineSchema:
    line = service.remove_station(line_id=line_id, station_id=station_id)
    return _line_to_schema(line)
