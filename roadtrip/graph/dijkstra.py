"""Shortest-path computation using Dijkstra's algorithm.

Runs on the adjacency-list view of the usable subgraph produced by
``CountryGraph.usable_adjacency``.
"""

import heapq
from typing import Dict, List, Set, Tuple

from .country_graph import Graph


def dijkstra(graph: Graph, start: str, end: str) -> Tuple[List[str], float]:
    """Compute the shortest path between two countries using Dijkstra.

    Parameters
    ----------
    graph:
        Usable subgraph as produced by ``CountryGraph.usable_adjacency``.
    start:
        Code of the source country.
    end:
        Code of the destination country.

    Returns
    -------
    list[str], float
        The sequence of country codes from ``start`` to ``end``
        (inclusive) and the total distance. ``start == end`` yields
        ``([start], 0)``. If no path exists, returns ``([], float("inf"))``.
    """
    if start not in graph or end not in graph:
        return [], float("inf")

    distances: Dict[str, float] = {code: float("inf") for code in graph}
    previous: Dict[str, str] = {}
    distances[start] = 0

    heap: List[Tuple[float, str]] = [(0, start)]
    settled: Set[str] = set()

    while heap:
        current_distance, current = heapq.heappop(heap)

        # Stale entry left behind by a later improvement.
        if current in settled:
            continue

        if current == end:
            break

        settled.add(current)

        for neighbor, weight in graph.get(current, []):
            if neighbor in settled:
                continue
            alt = current_distance + weight
            if alt < distances.get(neighbor, float("inf")):
                distances[neighbor] = alt
                previous[neighbor] = current
                heapq.heappush(heap, (alt, neighbor))

    if distances[end] == float("inf"):
        return [], float("inf")

    path: List[str] = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])

    path.reverse()
    return path, distances[end]
