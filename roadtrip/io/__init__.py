"""Input/output for the road-trip router.

This subpackage holds the interactive prompt loop that reads country
names from standard input and prints routes.
"""

from .repl import RoadTripRepl

__all__ = ["RoadTripRepl"]
