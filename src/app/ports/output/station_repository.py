from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Station


class IStationRepository(ABC):
    """Port for storing station identity records."""

    @abstractmethod
    def next_id(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def save(self, station: Station) -> Station:
        raise NotImplementedError

    @abstractmethod
    def get(self, station_id: int) -> Station | None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Station]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, station_id: int) -> None:
        raise NotImplementedError
