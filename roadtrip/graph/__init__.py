"""Graph-related utilities for representing the country border network.

This subpackage contains modules to parse the input artifacts, build an
immutable in-memory graph from them and run shortest-path queries on it.
"""

from .builder import build_country_graph
from .country_graph import CountryGraph, Graph
from .dijkstra import dijkstra
from .parsers import neighbor_name, parse_borders, parse_distances, parse_state_names

__all__ = [
    "CountryGraph",
    "Graph",
    "build_country_graph",
    "dijkstra",
    "neighbor_name",
    "parse_borders",
    "parse_distances",
    "parse_state_names",
]
