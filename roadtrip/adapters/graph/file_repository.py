"""File-backed country graph repository.

Reads the three input artifacts named by a GraphConfig, reconciles them
and caches the resulting CountryGraph on the instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, TextIO, TypeVar

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...graph.builder import build_country_graph
from ...graph.country_graph import CountryGraph
from ...graph.parsers import parse_borders, parse_distances, parse_state_names

T = TypeVar("T")


@dataclass
class FileCountryGraphRepository:
    """Graph repository that loads from the borders, distance and name files.

    This adapter implements CountryGraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, encoding)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[CountryGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> CountryGraph:
        """Load the country graph from the configured files.

        Returns:
            The reconciled country graph.

        Raises:
            GraphLoadError: If a file is missing or unreadable.
            MalformedLineError: If a line cannot be interpreted.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "borders_path": str(self.config.borders_path),
                "distances_path": str(self.config.distances_path),
                "state_names_path": str(self.config.state_names_path),
            },
        )

        borders = self._read(
            self.config.borders_path,
            lambda f: parse_borders(f, source=str(self.config.borders_path)),
        )
        distances = self._read(
            self.config.distances_path,
            lambda f: parse_distances(f, source=str(self.config.distances_path)),
        )
        by_code, by_name = self._read(
            self.config.state_names_path,
            lambda f: parse_state_names(f, source=str(self.config.state_names_path)),
        )

        graph = build_country_graph(borders, distances, by_code, by_name)
        self._graph = graph
        self._logger.info("Graph loaded", extra={"nodes": len(graph)})
        return graph

    def _read(self, path: Path, parse: Callable[[TextIO], T]) -> T:
        """Open one artifact, hand it to its parser and release it."""
        try:
            with path.open(encoding=self.config.encoding, newline="") as f:
                return parse(f)
        except (OSError, UnicodeDecodeError) as e:
            raise GraphLoadError(
                f"Cannot read {path}",
                file_path=str(path),
                cause=e,
            )

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
