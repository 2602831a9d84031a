from .in_memory_line_repository import InMemoryLineRepository
from .in_memory_station_repository import InMemoryStationRepository
from .local_network_loader import LocalNetworkLoader

__all__ = [
    "InMemoryLineRepository",
    "InMemoryStationRepository",
    "LocalNetworkLoader",
]
