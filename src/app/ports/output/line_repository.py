from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ContextManager

from src.domain.models import Line


class ILineRepository(ABC):
    """Port for storing lines together with their sections.

    `lock()` guards mutations of any line and consistent reads across all
    lines (e.g. while assembling the network graph).
    """

    @abstractmethod
    def lock(self) -> ContextManager[object]:
        raise NotImplementedError

    @abstractmethod
    def next_id(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def save(self, line: Line) -> Line:
        raise NotImplementedError

    @abstractmethod
    def get(self, line_id: int) -> Line | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_name(self, name: str) -> Line | None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Line]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, line_id: int) -> None:
        raise NotImplementedError
