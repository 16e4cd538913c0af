"""Reconciliation of the parsed artifacts into a CountryGraph.

The borders artifact is keyed by country name, the distance artifact by
country code; the state-name artifact bridges the two. Names that do not
resolve to a code are dropped with a warning.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Sequence, Set

from ..domain.models import CountryNode
from .country_graph import CountryGraph
from .parsers import Distances

logger = logging.getLogger(__name__)


def build_country_graph(
    borders: Mapping[str, Sequence[str]],
    distances: Distances,
    by_code: Mapping[str, str],
    by_name: Mapping[str, str],
) -> CountryGraph:
    """Build the frozen country graph.

    Args:
        borders: Country name -> neighbor names, from the borders artifact.
        distances: Unordered code pair -> km, from the distance artifact.
        by_code: Code -> canonical name.
        by_name: Name -> code.

    Returns:
        A CountryGraph holding every code from ``by_code``, with a
        symmetric border relation.
    """
    neighbors: Dict[str, Set[str]] = {code: set() for code in by_code}

    for country, listed in borders.items():
        code = by_name.get(country)
        if code is None:
            logger.warning(
                "Unknown country %r in borders file, dropped",
                country,
                extra={"country": country},
            )
            continue

        for neighbor in listed:
            other = by_name.get(neighbor)
            if other is None:
                logger.warning(
                    "Unknown neighbor %r of %r in borders file, dropped",
                    neighbor,
                    country,
                    extra={"country": country, "neighbor": neighbor},
                )
                continue
            if other == code:
                logger.debug("Ignoring self border for %s", code)
                continue

            neighbors[code].add(other)
            neighbors[other].add(code)

    for code, adjacent in neighbors.items():
        for other in adjacent:
            if frozenset((code, other)) not in distances and code < other:
                logger.info(
                    "No capital distance for border %s-%s, border unusable",
                    code,
                    other,
                )

    # Distances between codes that are not countries cannot be reached.
    known = {
        pair: km
        for pair, km in distances.items()
        if all(code in by_code for code in pair)
    }

    graph = CountryGraph(
        by_code={
            code: CountryNode(code=code, name=name, neighbors=frozenset(neighbors[code]))
            for code, name in by_code.items()
        },
        by_name={name: code for name, code in by_name.items() if code in by_code},
        distance=known,
    )

    logger.info(
        "Country graph built",
        extra={
            "nodes": len(graph),
            "borders": graph.border_count(),
            "usable_edges": graph.usable_edge_count(),
        },
    )
    return graph
