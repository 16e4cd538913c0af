"""Command-line entry point.

    roadtrip borders.txt capdist.csv state_name.tsv

Loads the country graph from the three files, then answers route queries
interactively until EXIT or end of input.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .config import AppConfig, GraphConfig, configure_logging
from .container import Container
from .domain.errors import GraphError
from .io import RoadTripRepl
from .services import RoadTripService

USAGE = "Usage: roadtrip borders.txt capdist.csv state_name.tsv"

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print(USAGE, file=sys.stderr)
        return 1

    config = AppConfig(graph=GraphConfig.from_paths(*args))
    configure_logging(config.observability)

    container = Container.create_default(config)
    service: RoadTripService = container.resolve(RoadTripService)

    try:
        graph = service.graph
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(
        "Ready",
        extra={"countries": len(graph), "usable_edges": graph.usable_edge_count()},
    )

    repl: RoadTripRepl = container.resolve(RoadTripRepl)
    return repl.run()


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())
