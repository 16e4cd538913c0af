"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CountryNotFoundError,
    GraphError,
    GraphLoadError,
    MalformedLineError,
    NoRouteFoundError,
    RoadTripError,
)
from .models import CountryNode, Hop, Route

__all__ = [
    # Models
    "CountryNode",
    "Hop",
    "Route",
    # Errors
    "RoadTripError",
    "GraphError",
    "GraphLoadError",
    "MalformedLineError",
    "CountryNotFoundError",
    "NoRouteFoundError",
]
