"""Dijkstra route solver adapter.

This adapter wraps the Dijkstra implementation and adds:
- Name resolution through the graph's name index
- Domain model output (Route with one Hop per border crossing)
- Typed errors
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ...domain.errors import NoRouteFoundError
from ...domain.models import Hop, Route
from ...graph.country_graph import CountryGraph
from ...graph.dijkstra import dijkstra


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    Routes only over the usable subgraph: a border counts as an edge
    when a capital distance is recorded for it. This adapter implements
    RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: CountryGraph,
        source: str,
        destination: str,
    ) -> Route:
        """Find the shortest land route between two countries.

        Args:
            graph: The country graph.
            source: Source country name.
            destination: Destination country name.

        Returns:
            Route whose hops chain from ``source`` to ``destination``.
            A country routed to itself yields a found route with no hops.

        Raises:
            CountryNotFoundError: If either name is unknown.
            NoRouteFoundError: If no usable path exists.
        """
        source = source.strip()
        destination = destination.strip()
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        start = graph.resolve_name_or_raise(source)
        end = graph.resolve_name_or_raise(destination)

        path, distance = dijkstra(graph.usable_adjacency(), start, end)

        if not path:
            self._logger.info(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path between {source} and {destination}",
                source=source,
                destination=destination,
            )

        route = Route(
            source=source,
            destination=destination,
            hops=self._hops(graph, path, source, destination),
        )

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "hops": route.num_hops,
                "distance_km": distance,
            },
        )
        return route

    def _hops(
        self,
        graph: CountryGraph,
        path: Sequence[str],
        source: str,
        destination: str,
    ) -> tuple[Hop, ...]:
        """Turn a path of codes into hop records.

        Intermediate countries carry their canonical name; the endpoints
        keep the names they were queried by, which may be former names.
        """
        names = [graph.by_code[code].name for code in path]
        names[0] = source
        names[-1] = destination

        hops: List[Hop] = []
        for i, (here, there) in enumerate(zip(path, path[1:])):
            km = graph.weight(here, there)
            if km is None:
                raise RuntimeError(f"Path uses {here}-{there} which has no distance")
            hops.append(Hop(from_name=names[i], to_name=names[i + 1], km=km))
        return tuple(hops)
