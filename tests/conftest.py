from pathlib import Path

import pytest

from roadtrip.adapters.graph import DijkstraRouteSolver, FileCountryGraphRepository
from roadtrip.config import GraphConfig
from roadtrip.graph import CountryGraph
from roadtrip.services import RoadTripService

from .graph_data import (
    BORDERS_TXT,
    CAPDIST_CSV,
    STATE_NAME_TSV,
    StaticGraphRepository,
    make_abcd_graph,
)


@pytest.fixture
def abcd_graph() -> CountryGraph:
    return make_abcd_graph()


@pytest.fixture
def abcd_service(abcd_graph) -> RoadTripService:
    return RoadTripService(
        graph_repository=StaticGraphRepository(abcd_graph),
        route_solver=DijkstraRouteSolver(),
    )


@pytest.fixture
def artifacts(tmp_path: Path) -> GraphConfig:
    """Write the sample artifacts and return a config pointing at them."""
    (tmp_path / "borders.txt").write_text(BORDERS_TXT, encoding="utf-8")
    (tmp_path / "capdist.csv").write_text(CAPDIST_CSV, encoding="utf-8")
    (tmp_path / "state_name.tsv").write_text(STATE_NAME_TSV, encoding="utf-8")
    return GraphConfig(data_dir=tmp_path)


@pytest.fixture
def file_service(artifacts) -> RoadTripService:
    return RoadTripService(
        graph_repository=FileCountryGraphRepository(artifacts),
        route_solver=DijkstraRouteSolver(),
    )
