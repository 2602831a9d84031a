from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.adapters.api.dependencies import get_station_service
from src.adapters.api.schemas.stations import StationRequestSchema, StationSchema
from src.app.services.station_service import StationService
from src.domain.models import Station

router = APIRouter(prefix="/stations", tags=["stations"])


def station_to_schema(station: Station) -> StationSchema:
    return StationSchema(id=station.id, name=station.name)


@router.post("", response_model=StationSchema, status_code=status.HTTP_201_CREATED)
def create_station(
    req: StationRequestSchema,
    service: StationService = Depends(get_station_service),
) -> StationSchema:
    return station_to_schema(service.create_station(name=req.name))


@router.get("", response_model=list[StationSchema])
def list_stations(
    service: StationService = Depends(get_station_service),
) -> list[StationSchema]:
    return [station_to_schema(s) for s in service.list_stations()]


@router.delete("/{station_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_station(
    station_id: int,
    service: StationService = Depends(get_station_service),
) -> None:
    service.delete_station(station_id=station_id)
