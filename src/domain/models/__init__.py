from .line import Line
from .path import PathResult
from .section import Section
from .sections import Sections
from .station import Station

__all__ = [
    "Line",
    "PathResult",
    "Section",
    "Sections",
    "Station",
]
