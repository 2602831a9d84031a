from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.controllers.stations import station_to_schema
from src.adapters.api.dependencies import get_path_service
from src.adapters.api.schemas.paths import PathSchema
from src.app.services.path_service import PathService

router = APIRouter(tags=["paths"])


@router.get("/paths", response_model=PathSchema)
def find_path(
    source: int = Query(...),
    target: int = Query(...),
    service: PathService = Depends(get_path_service),
) -> PathSchema:
    result = service.find_path(source_id=source, target_id=target)
    return PathSchema(
        stations=[station_to_schema(s) for s in result.stations],
        distance=result.distance,
    )
