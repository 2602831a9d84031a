from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.exceptions.records import InvalidNameError

from .section import Section
from .sections import Sections
from .station import Station


@dataclass(eq=False, slots=True)
class Line:
    """A named, coloured subway line owning exactly one Sections collection."""

    name: str
    color: str
    sections: Sections = field(default_factory=Sections.empty)
    id: int | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidNameError("Line name must not be blank")

    @property
    def stations(self) -> list[Station]:
        return self.sections.get_stations()

    def add_section(
        self, up_station: Station, down_station: Station, distance: int
    ) -> Section:
        section = Section(self, up_station, down_station, distance)
        self.sections.add_station(section)
        return section

    def remove_station(self, station: Station) -> None:
        self.sections.remove_station(station)

    def update(self, *, name: str, color: str) -> None:
        if not name or not name.strip():
            raise InvalidNameError("Line name must not be blank")
        self.name = name
        self.color = color
