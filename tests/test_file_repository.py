import logging

import pytest

from roadtrip.adapters.graph import DijkstraRouteSolver, FileCountryGraphRepository
from roadtrip.config import GraphConfig
from roadtrip.domain.errors import GraphError, GraphLoadError, MalformedLineError
from roadtrip.domain.models import Hop


def test_load_reconciles_all_three_files(artifacts):
    graph = FileCountryGraphRepository(artifacts).load()

    assert graph.codes() == ("ALP", "BET", "DEL", "GAM", "ISL")
    assert graph.resolve_name("Gammaland") == "GAM"
    assert graph.names() == ("Alphaland", "Betaland", "Deltaland", "Gammaland", "Islandia")
    assert graph.node("DEL").neighbors == frozenset({"ALP", "GAM"})
    assert graph.node("ISL").is_island
    assert graph.weight("ALP", "BET") == 500
    assert graph.weight("ALP", "ISL") == 900


def test_load_warns_about_unknown_neighbor(artifacts, caplog):
    with caplog.at_level(logging.WARNING):
        FileCountryGraphRepository(artifacts).load()
    assert "Atlantis" in caplog.text


def test_load_is_cached(artifacts):
    repository = FileCountryGraphRepository(artifacts)
    graph = repository.load()
    assert repository.load() is graph
    repository.clear_cache()
    assert repository.load() is not graph


def test_loaded_graph_routes(artifacts):
    graph = FileCountryGraphRepository(artifacts).load()
    route = DijkstraRouteSolver().solve(graph, "Alphaland", "Deltaland")
    assert route.hops == (
        Hop("Alphaland", "Betaland", 500),
        Hop("Betaland", "Gammaland", 300),
        Hop("Gammaland", "Deltaland", 200),
    )
    assert route.total_km == 1000


def test_missing_file_names_the_path(artifacts):
    (artifacts.data_dir / "capdist.csv").unlink()
    with pytest.raises(GraphLoadError) as info:
        FileCountryGraphRepository(artifacts).load()
    assert info.value.file_path == str(artifacts.distances_path)
    assert "capdist.csv" in str(info.value)
    assert isinstance(info.value.cause, FileNotFoundError)


def test_malformed_distance_row_is_fatal(artifacts):
    with artifacts.distances_path.open("a", encoding="utf-8") as f:
        f.write("9,ALP,3,GAM,lots,1\n")
    with pytest.raises(MalformedLineError) as info:
        FileCountryGraphRepository(artifacts).load()
    assert info.value.file_path == str(artifacts.distances_path)
    assert "lots" in info.value.line
    assert isinstance(info.value, GraphError)


def test_absolute_file_names_override_data_dir(artifacts, tmp_path):
    elsewhere = tmp_path / "other"
    elsewhere.mkdir()
    config = artifacts.model_copy(
        update={"data_dir": elsewhere, "borders_file": str(artifacts.borders_path)}
    )
    assert config.borders_path == artifacts.borders_path
    with pytest.raises(GraphLoadError):
        FileCountryGraphRepository(config).load()


def test_byte_order_mark_is_dropped(artifacts):
    data = artifacts.borders_path.read_bytes()
    artifacts.borders_path.write_bytes(b"\xef\xbb\xbf" + data)
    graph = FileCountryGraphRepository(artifacts).load()
    assert graph.node("ALP").neighbors == frozenset({"BET", "DEL"})


def test_renamed_country_routes_under_current_name(tmp_path):
    (tmp_path / "borders.txt").write_text(
        "France = Germany 418 km\nGermany = France 418 km\n", encoding="utf-8"
    )
    (tmp_path / "capdist.csv").write_text(
        "numa,ida,numb,idb,kmdist,midist\n"
        "220,FRN,255,GMY,878,546\n"
        "255,GMY,220,FRN,878,546\n",
        encoding="utf-8",
    )
    (tmp_path / "state_name.tsv").write_text(
        "statenum\tstateabb\tcountryname\tstart\tend\n"
        "255\tGMY\tGermany (Prussia)\t1816-01-01\t1918-11-11\n"
        "220\tFRN\tFrance\t1816-01-01\t2020-12-31\n"
        "255\tGMY\tGermany\t1990-10-03\t2020-12-31\n",
        encoding="utf-8",
    )
    graph = FileCountryGraphRepository(GraphConfig(data_dir=tmp_path)).load()

    assert graph.resolve_name("Germany") == "GMY"
    assert graph.resolve_name("Germany (Prussia)") == "GMY"
    assert graph.name_of("GMY") == "Germany"

    solver = DijkstraRouteSolver()
    route = solver.solve(graph, "France", "Germany")
    assert route.hops == (Hop("France", "Germany", 878),)

    route = solver.solve(graph, "France", "Germany (Prussia)")
    assert route.hops == (Hop("France", "Germany (Prussia)", 878),)
