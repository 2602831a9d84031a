from __future__ import annotations

import pytest

from src.adapters.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NETWORK_PATH", "PATH_GRAPH_CACHE", "SUBWAY_REVEAL_ERRORS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.network_path is None
    assert settings.path_graph_cache is True
    assert settings.reveal_errors is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NETWORK_PATH", " data/network ")
    monkeypatch.setenv("PATH_GRAPH_CACHE", "0")
    monkeypatch.setenv("SUBWAY_REVEAL_ERRORS", "yes")

    settings = Settings.from_env()

    assert settings.network_path == "data/network"
    assert settings.path_graph_cache is False
    assert settings.reveal_errors is True
