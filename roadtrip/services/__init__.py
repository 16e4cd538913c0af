"""Services layer - Application orchestration.

Available services:
- RoadTripService: Resolves country names, solves and formats routes
"""

from .road_trip import RoadTripService

__all__ = ["RoadTripService"]
