from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from typing import ContextManager

from src.app.ports.output import ILineRepository
from src.domain.models import Line


@dataclass(slots=True)
class InMemoryLineRepository(ILineRepository):
    """Process-local line store.

    Lines are stored by reference, so section edits made through a Line
    returned by `get` are visible immediately; `save` only registers it.
    """

    _lines: dict[int, Line] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1))
    _lock: threading.RLock = field(default_factory=threading.RLock)

    def lock(self) -> ContextManager[object]:
        return self._lock

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def save(self, line: Line) -> Line:
        if line.id is None:
            raise ValueError("Line must have an id before it is saved")
        with self._lock:
            self._lines[line.id] = line
        return line

    def get(self, line_id: int) -> Line | None:
        return self._lines.get(line_id)

    def find_by_name(self, name: str) -> Line | None:
        with self._lock:
            return next((l for l in self._lines.values() if l.name == name), None)

    def list_all(self) -> list[Line]:
        with self._lock:
            return sorted(self._lines.values(), key=lambda l: l.id or 0)

    def delete(self, line_id: int) -> None:
        with self._lock:
            self._lines.pop(line_id, None)
