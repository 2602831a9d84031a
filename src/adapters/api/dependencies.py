from __future__ import annotations

from functools import lru_cache

from src.adapters.persistence import (
    InMemoryLineRepository,
    InMemoryStationRepository,
    LocalNetworkLoader,
)
from src.adapters.settings import Settings
from src.app.ports.output import ILineRepository, IStationRepository
from src.app.services.line_service import LineService
from src.app.services.path_service import PathService
from src.app.services.station_service import StationService


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_repositories() -> tuple[IStationRepository, ILineRepository]:
    stations = InMemoryStationRepository()
    lines = InMemoryLineRepository()

    settings = get_settings()
    if settings.network_path:
        LocalNetworkLoader(base_path=settings.network_path).load_into(
            station_repository=stations, line_repository=lines
        )
    return stations, lines


def get_station_service() -> StationService:
    stations, lines = get_repositories()
    return StationService(station_repository=stations, line_repository=lines)


def get_line_service() -> LineService:
    stations, lines = get_repositories()
    return LineService(line_repository=lines, station_repository=stations)


@lru_cache(maxsize=1)
def get_path_service() -> PathService:
    # Shared so the cached network graph survives across requests.
    stations, lines = get_repositories()
    return PathService(
        line_repository=lines,
        station_repository=stations,
        cache_enabled=get_settings().path_graph_cache,
    )
