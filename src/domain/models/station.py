from __future__ import annotations

from dataclasses import dataclass

from src.domain.exceptions.records import InvalidNameError


@dataclass(frozen=True, slots=True, eq=False)
class Station:
    """A stop on one or more lines.

    Stations compare by identity: two records with the same name are still
    distinct vertices of the network.
    """

    name: str
    id: int | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidNameError("Station name must not be blank")
