from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    network_path: str | None
    path_graph_cache: bool
    reveal_errors: bool

    @staticmethod
    def from_env() -> "Settings":
        network_path = os.getenv("NETWORK_PATH")
        if network_path is not None:
            network_path = network_path.strip() or None

        return Settings(
            network_path=network_path,
            path_graph_cache=_env_bool("PATH_GRAPH_CACHE", True),
            reveal_errors=_env_bool("SUBWAY_REVEAL_ERRORS", False),
        )
