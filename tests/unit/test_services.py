from __future__ import annotations

import threading

import pytest

from src.adapters.persistence import InMemoryLineRepository, InMemoryStationRepository
from src.app.services.line_service import LineService
from src.app.services.path_service import PathService
from src.app.services.station_service import StationService
from src.domain.exceptions.records import (
    DuplicateLineError,
    LineNotFoundError,
    StationInUseError,
    StationRecordNotFoundError,
)
from src.domain.exceptions.routing import NoPathFound, StationNotFoundError
from src.domain.exceptions.sections import InvalidSectionError, LastSectionRemovalError


@pytest.fixture
def repos() -> tuple[InMemoryStationRepository, InMemoryLineRepository]:
    return InMemoryStationRepository(), InMemoryLineRepository()


@pytest.fixture
def station_service(repos) -> StationService:
    stations, lines = repos
    return StationService(station_repository=stations, line_repository=lines)


@pytest.fixture
def line_service(repos) -> LineService:
    stations, lines = repos
    return LineService(line_repository=lines, station_repository=stations)


@pytest.fixture
def path_service(repos) -> PathService:
    stations, lines = repos
    return PathService(line_repository=lines, station_repository=stations)


def _ids(station_service: StationService, *names: str) -> list[int]:
    return [station_service.create_station(name=n).id for n in names]


def _create_line(
    line_service: LineService, name: str, up: int, down: int, distance: int
):
    return line_service.create_line(
        name=name,
        color="black",
        up_station_id=up,
        down_station_id=down,
        distance=distance,
    )


def test_create_and_list_stations(station_service: StationService) -> None:
    gangnam, yangjae = _ids(station_service, "강남역", "양재역")

    assert [s.id for s in station_service.list_stations()] == [gangnam, yangjae]
    assert station_service.get_station(station_id=gangnam).name == "강남역"


def test_delete_station_in_use_is_rejected(
    station_service: StationService, line_service: LineService
) -> None:
    gangnam, yangjae, seoul = _ids(
        station_service, "강남역", "양재역", "서울역"
    )
    _create_line(line_service, "신분당선", gangnam, yangjae, 5)

    with pytest.raises(StationInUseError):
        station_service.delete_station(station_id=gangnam)

    station_service.delete_station(station_id=seoul)
    with pytest.raises(StationRecordNotFoundError):
        station_service.get_station(station_id=seoul)


def test_create_line_rejects_duplicate_name(
    station_service: StationService, line_service: LineService
) -> None:
    a, b = _ids(station_service, "A", "B")
    _create_line(line_service, "1호선", a, b, 3)

    with pytest.raises(DuplicateLineError):
        _create_line(line_service, "1호선", a, b, 3)
    assert len(line_service.list_lines()) == 1


def test_create_line_with_invalid_section_is_not_saved(
    station_service: StationService, line_service: LineService
) -> None:
    (a,) = _ids(station_service, "A")

    with pytest.raises(InvalidSectionError):
        _create_line(line_service, "1호선", a, a, 3)

    assert line_service.list_lines() == []


def test_section_edits_through_service(
    station_service: StationService, line_service: LineService
) -> None:
    gangnam, yangjae, terminal = _ids(
        station_service, "강남역", "양재역", "남부터미널역"
    )
    line = _create_line(line_service, "신분당선", gangnam, yangjae, 5)

    line_service.add_section(
        line_id=line.id, up_station_id=gangnam, down_station_id=terminal, distance=2
    )
    assert [s.name for s in line_service.get_line(line_id=line.id).stations] == [
        "강남역",
        "남부터미널역",
        "양재역",
    ]

    line_service.remove_station(line_id=line.id, station_id=terminal)
    assert [s.name for s in line.stations] == ["강남역", "양재역"]

    with pytest.raises(LastSectionRemovalError):
        line_service.remove_station(line_id=line.id, station_id=gangnam)


def test_update_and_delete_line(
    station_service: StationService, line_service: LineService
) -> None:
    a, b = _ids(station_service, "A", "B")
    line = _create_line(line_service, "1호선", a, b, 3)

    line_service.update_line(line_id=line.id, name="경부선", color="navy")
    assert (line.name, line.color) == ("경부선", "navy")

    line_service.delete_line(line_id=line.id)
    with pytest.raises(LineNotFoundError):
        line_service.get_line(line_id=line.id)


def test_unknown_station_id_is_rejected(line_service: LineService) -> None:
    with pytest.raises(StationRecordNotFoundError):
        _create_line(line_service, "1호선", 1, 2, 3)


def test_path_service_finds_shortest_route_across_lines(
    station_service: StationService,
    line_service: LineService,
    path_service: PathService,
) -> None:
    gangnam, yangjae, gyodae, terminal = _ids(
        station_service, "강남역", "양재역", "교대역", "남부터미널역"
    )
    _create_line(line_service, "이호선", gangnam, gyodae, 7)
    _create_line(line_service, "삼호선", gyodae, terminal, 3)
    _create_line(line_service, "신분당선", gangnam, yangjae, 5)
    _create_line(line_service, "경부선", terminal, yangjae, 4)

    result = path_service.find_path(source_id=gangnam, target_id=terminal)

    assert result.station_names == ["강남역", "양재역", "남부터미널역"]
    assert result.distance == 9
    graph = path_service.network_graph()
    used = {
        data["line"].name
        for u, v in zip(result.stations, result.stations[1:])
        for data in graph.get_edge_data(u, v).values()
    }
    assert used == {"신분당선", "경부선"}


def test_path_service_cache_is_invalidated_by_edits(
    station_service: StationService,
    line_service: LineService,
    path_service: PathService,
) -> None:
    a, b, c = _ids(station_service, "A", "B", "C")
    line = _create_line(line_service, "1호선", a, b, 3)

    first = path_service.network_graph()
    assert path_service.network_graph() is first

    with pytest.raises(StationNotFoundError):
        path_service.find_path(source_id=a, target_id=c)

    line_service.add_section(
        line_id=line.id, up_station_id=b, down_station_id=c, distance=4
    )

    assert path_service.network_graph() is not first
    assert path_service.find_path(source_id=a, target_id=c).distance == 7


def test_path_service_reports_no_route(
    station_service: StationService,
    line_service: LineService,
    path_service: PathService,
) -> None:
    a, b, c, d = _ids(station_service, "A", "B", "C", "D")
    _create_line(line_service, "1호선", a, b, 3)
    _create_line(line_service, "2호선", c, d, 3)

    with pytest.raises(NoPathFound):
        path_service.find_path(source_id=a, target_id=d)


def test_path_service_cache_state_is_not_a_constructor_argument(repos) -> None:
    stations, lines = repos

    with pytest.raises(TypeError):
        PathService(line_repository=lines, station_repository=stations, _graph=None)

    assert "_graph" not in repr(
        PathService(line_repository=lines, station_repository=stations)
    )


class _DeletingStationRepository(InMemoryStationRepository):
    """Hands out a station, then tries to delete it from another thread."""

    def __init__(self, line_repository: InMemoryLineRepository) -> None:
        super().__init__()
        self.line_repository = line_repository
        self.target_id: int | None = None
        self.deleter: threading.Thread | None = None
        self.delete_errors: list[Exception] = []

    def get(self, station_id: int):
        station = super().get(station_id)
        if station_id == self.target_id and self.deleter is None:
            self.deleter = threading.Thread(target=self._delete, args=(station_id,))
            self.deleter.start()
            # Give the deleter a chance to run before the edit continues.
            self.deleter.join(timeout=0.2)
        return station

    def _delete(self, station_id: int) -> None:
        service = StationService(
            station_repository=self, line_repository=self.line_repository
        )
        try:
            service.delete_station(station_id=station_id)
        except StationInUseError as exc:
            self.delete_errors.append(exc)


def test_station_deleted_while_section_is_added_stays_consistent() -> None:
    lines = InMemoryLineRepository()
    stations = _DeletingStationRepository(lines)
    station_service = StationService(station_repository=stations, line_repository=lines)
    line_service = LineService(line_repository=lines, station_repository=stations)
    path_service = PathService(line_repository=lines, station_repository=stations)
    a, b, c = _ids(station_service, "A", "B", "C")
    line = _create_line(line_service, "1호선", a, b, 3)

    stations.target_id = c
    line_service.add_section(
        line_id=line.id, up_station_id=b, down_station_id=c, distance=4
    )
    assert stations.deleter is not None
    stations.deleter.join()

    assert [s.name for s in line.stations] == ["A", "B", "C"]
    assert [s.name for s in stations.list_all()] == ["A", "B", "C"]
    assert len(stations.delete_errors) == 1
    assert path_service.find_path(source_id=a, target_id=c).distance == 7
