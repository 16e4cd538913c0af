import logging
from types import MappingProxyType

import pytest

from roadtrip.domain.errors import CountryNotFoundError, GraphError
from roadtrip.domain.models import CountryNode
from roadtrip.graph import CountryGraph

from .graph_data import ABCD_NAMES, make_graph


def test_border_relation_is_symmetric(abcd_graph):
    for code, node in abcd_graph.by_code.items():
        for other in node.neighbors:
            assert code in abcd_graph.by_code[other].neighbors


def test_one_sided_border_becomes_symmetric():
    graph = make_graph({"AAA": "A", "BBB": "B"}, {"A": ["B"]}, {("AAA", "BBB"): 5})
    assert graph.node("BBB").neighbors == frozenset({"AAA"})


def test_weight_is_symmetric_and_undefined_on_self(abcd_graph):
    codes = abcd_graph.codes()
    for a in codes:
        assert abcd_graph.weight(a, a) is None
        for b in codes:
            assert abcd_graph.weight(a, b) == abcd_graph.weight(b, a)
    assert abcd_graph.weight("AAA", "BBB") == 100
    assert abcd_graph.weight("AAA", "DDD") == 1000


def test_weight_is_a_pure_lookup():
    # Distance recorded between non-neighbors is still returned.
    graph = make_graph({"AAA": "A", "BBB": "B"}, {}, {("AAA", "BBB"): 7})
    assert graph.weight("AAA", "BBB") == 7
    assert graph.weight("AAA", "ZZZ") is None


def test_resolve_name(abcd_graph):
    assert abcd_graph.resolve_name("A") == "AAA"
    assert abcd_graph.resolve_name("  C ") == "CCC"
    assert abcd_graph.resolve_name("a") is None
    assert abcd_graph.resolve_name("Atlantis") is None


def test_resolve_name_or_raise(abcd_graph):
    with pytest.raises(CountryNotFoundError) as info:
        abcd_graph.resolve_name_or_raise("Atlantis")
    assert info.value.country_name == "Atlantis"
    assert "Invalid country name" in str(info.value)


def test_node_and_name_of(abcd_graph):
    node = abcd_graph.node("BBB")
    assert node == CountryNode("BBB", "B", frozenset({"AAA", "CCC"}))
    assert abcd_graph.node("ZZZ") is None
    assert abcd_graph.name_of("DDD") == "D"
    assert abcd_graph.name_of("ZZZ") is None


def test_codes_without_borders_are_kept_as_islands():
    names = dict(ABCD_NAMES, III="Island")
    graph = make_graph(names, {"A": ["B"]}, {("AAA", "BBB"): 1})
    assert "III" in graph
    assert graph.node("III").is_island
    assert list(graph.usable_neighbors("III")) == []
    assert len(graph) == 5


def test_unknown_names_are_dropped_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        graph = make_graph(
            {"AAA": "A", "BBB": "B"},
            {"A": ["B", "Atlantis"], "Lemuria": ["A"]},
            {("AAA", "BBB"): 1},
        )
    assert graph.node("AAA").neighbors == frozenset({"BBB"})
    assert "Atlantis" in caplog.text
    assert "Lemuria" in caplog.text


def test_border_without_distance_is_not_usable():
    graph = make_graph(
        {"AAA": "A", "BBB": "B", "CCC": "C"},
        {"A": ["B", "C"]},
        {("AAA", "BBB"): 4},
    )
    assert graph.node("AAA").neighbors == frozenset({"BBB", "CCC"})
    assert list(graph.usable_neighbors("AAA")) == [("BBB", 4)]
    assert graph.border_count() == 2
    assert graph.usable_edge_count() == 1


def test_usable_adjacency_covers_every_code(abcd_graph):
    adjacency = abcd_graph.usable_adjacency()
    assert set(adjacency) == set(ABCD_NAMES)
    assert sorted(adjacency["AAA"]) == [("BBB", 100), ("DDD", 1000)]


def test_usable_adjacency_is_built_once(abcd_graph):
    adjacency = abcd_graph.usable_adjacency()
    assert abcd_graph.usable_adjacency() is adjacency
    assert isinstance(adjacency, MappingProxyType)
    assert adjacency["BBB"] == (("AAA", 100), ("CCC", 100))
    assert list(abcd_graph.usable_neighbors("BBB")) == list(adjacency["BBB"])
    assert list(abcd_graph.usable_neighbors("ZZZ")) == []


def test_graph_is_read_only(abcd_graph):
    assert isinstance(abcd_graph.by_code, MappingProxyType)
    with pytest.raises(TypeError):
        abcd_graph.by_name["E"] = "EEE"
    with pytest.raises(AttributeError):
        abcd_graph.distance = {}


def test_asymmetric_nodes_are_rejected():
    with pytest.raises(GraphError):
        CountryGraph(
            by_code={
                "AAA": CountryNode("AAA", "A", frozenset({"BBB"})),
                "BBB": CountryNode("BBB", "B"),
            },
            by_name={"A": "AAA", "B": "BBB"},
            distance={},
        )
