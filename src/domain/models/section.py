from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.domain.exceptions.sections import InvalidSectionError

from .station import Station

if TYPE_CHECKING:
    from .line import Line


@dataclass(eq=False, slots=True)
class Section:
    """A directed, weighted segment of one line (up_station -> down_station).

    Endpoints and distance only change through divide_by/connect_with, which
    the owning Sections collection calls after checking its own invariants.
    """

    line: Line | None = field(repr=False)
    up_station: Station
    down_station: Station
    distance: int

    def __post_init__(self) -> None:
        if isinstance(self.distance, bool) or not isinstance(self.distance, int):
            raise InvalidSectionError(
                f"Section distance must be an integer: {self.distance!r}"
            )
        if self.distance <= 0:
            raise InvalidSectionError(
                f"Section distance must be positive: {self.distance}"
            )
        if self.up_station is self.down_station:
            raise InvalidSectionError(
                f"Section endpoints must differ: {self.up_station.name}"
            )

    @classmethod
    def combine(cls, upstream: Section, downstream: Section) -> Section:
        """New section from upstream.up_station to downstream.down_station."""

        merged = cls(
            upstream.line,
            upstream.up_station,
            upstream.down_station,
            upstream.distance,
        )
        merged.connect_with(downstream)
        return merged

    def has_up_station(self, station: Station) -> bool:
        return self.up_station is station

    def has_down_station(self, station: Station) -> bool:
        return self.down_station is station

    def is_overlapped(self, other: Section) -> bool:
        return (
            self.up_station is other.up_station
            or self.down_station is other.down_station
        )

    def can_be_divided_by(self, other: Section) -> bool:
        return self.is_overlapped(other) and other.distance < self.distance

    def divide_by(self, other: Section) -> None:
        """Shrink this section to make room for `other` inside it."""

        if not self.is_overlapped(other):
            raise InvalidSectionError("Section must be overlapped to divide")
        if other.distance >= self.distance:
            raise InvalidSectionError(
                "Inserted section must be shorter than the section it divides "
                f"({other.distance} >= {self.distance})"
            )

        if self.up_station is other.up_station:
            self.up_station = other.down_station
        if self.down_station is other.down_station:
            self.down_station = other.up_station
        self.distance -= other.distance

    def is_next_section(self, other: Section) -> bool:
        # `other` ends where this one starts.
        return self.up_station is other.down_station

    def connect_with(self, other: Section) -> None:
        """Merge an adjacent section into this one."""

        is_successor = self.is_next_section(other)
        is_predecessor = other.is_next_section(self)
        if not is_successor and not is_predecessor:
            raise InvalidSectionError("Sections are not adjacent")

        if is_successor:
            self.up_station = other.up_station
        if is_predecessor:
            self.down_station = other.down_station
        self.distance += other.distance

    def get_stations(self) -> tuple[Station, Station]:
        return (self.up_station, self.down_station)
