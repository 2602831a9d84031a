from .line_repository import ILineRepository
from .station_repository import IStationRepository

__all__ = [
    "ILineRepository",
    "IStationRepository",
]
