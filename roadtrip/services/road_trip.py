"""Road-trip service - Main orchestrator.

This service ties graph loading and route solving together and turns
query failures into user-facing diagnostics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.errors import CountryNotFoundError, NoRouteFoundError
from ..domain.models import Hop, Route
from ..graph.country_graph import CountryGraph
from ..ports.graph import CountryGraphRepositoryPort, RouteSolverPort


@dataclass
class RoadTripService:
    """Main service for answering land-route queries between countries.

    Attributes:
        graph_repository: Loads the country graph
        route_solver: Computes shortest routes
    """

    graph_repository: CountryGraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> CountryGraph:
        """The country graph, loaded on first access."""
        return self.graph_repository.load()

    def is_known_country(self, name: str) -> bool:
        """Check if a name resolves to a country code."""
        return self.graph.resolve_name(name) is not None

    def find_route(self, source: str, destination: str) -> Route:
        """Find the shortest land route between two countries.

        Raises:
            CountryNotFoundError: If either name is unknown.
            NoRouteFoundError: If no usable path exists.
        """
        route = self.route_solver.solve(self.graph, source, destination)
        self._logger.debug(
            "Route computed",
            extra={"hops": route.num_hops, "distance_km": route.total_km},
        )
        return route

    def find_route_safe(
        self, source: str, destination: str
    ) -> tuple[Route, Optional[str]]:
        """Find a route, returning a diagnostic instead of raising.

        Returns:
            Tuple of (route, diagnostic). The route is empty and not found
            whenever the diagnostic is set.
        """
        try:
            return self.find_route(source, destination), None
        except CountryNotFoundError as e:
            return Route.not_found(source.strip(), destination.strip()), e.message
        except NoRouteFoundError as e:
            return Route.not_found(e.source, e.destination), e.message

    def format_route(self, route: Route) -> List[str]:
        """Format a route as the lines printed to the user.

        A country routed to itself renders as a single zero-length hop.
        """
        if not route.found:
            return [f"No path found between {route.source} and {route.destination}"]

        hops = route.hops or (Hop(route.source, route.destination, 0),)
        lines = [f"Route from {route.source} to {route.destination}:"]
        lines.extend(f"* {hop}" for hop in hops)
        return lines
