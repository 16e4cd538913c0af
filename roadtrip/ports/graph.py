"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations: building the
country graph from its input artifacts and computing shortest routes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Route
    from ..graph.country_graph import CountryGraph


class CountryGraphRepositoryPort(Protocol):
    """Port for loading the country graph.

    Implementation: adapters/graph/file_repository.py
    """

    def load(self) -> CountryGraph:
        """Load the country graph.

        Returns:
            The reconciled, immutable country graph.

        Raises:
            GraphError: If an artifact is missing, unreadable or malformed.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

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
            Route with one hop per border crossing.

        Raises:
            CountryNotFoundError: If either name is unknown.
            NoRouteFoundError: If no usable path exists.
        """
        ...
