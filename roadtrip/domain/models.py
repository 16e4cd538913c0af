"""Immutable domain models for the road-trip router.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the application.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CountryNode:
    """A sovereign country in the border graph.

    Attributes:
        code: Unique country code (e.g., 'FRN')
        name: Canonical name bound to the code
        neighbors: Codes of countries sharing a land border
    """

    code: str
    name: str
    neighbors: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_island(self) -> bool:
        """Check if the country has no land borders."""
        return not self.neighbors


@dataclass(frozen=True, slots=True)
class Hop:
    """A single border crossing between two neighboring countries.

    Attributes:
        from_name: Name of the country being left
        to_name: Name of the country being entered
        km: Capital-to-capital distance in kilometers
    """

    from_name: str
    to_name: str
    km: int

    def __post_init__(self) -> None:
        if self.km < 0:
            raise ValueError(f"Hop distance must be non-negative, got {self.km}")

    def __str__(self) -> str:
        return f"{self.from_name} --> {self.to_name} ({self.km} km.)"


@dataclass(frozen=True, slots=True)
class Route:
    """Result of a route query between two countries.

    A route from a country to itself is found but has no hops.

    Attributes:
        source: Name of the source country
        destination: Name of the destination country
        hops: Ordered border crossings from source to destination
        found: Whether a route exists
    """

    source: str
    destination: str
    hops: tuple[Hop, ...] = field(default_factory=tuple)
    found: bool = True

    @classmethod
    def not_found(cls, source: str, destination: str) -> Route:
        """Build the empty result returned when no route exists."""
        return cls(source=source, destination=destination, hops=(), found=False)

    @property
    def total_km(self) -> int:
        """Return the total distance of the route in kilometers."""
        return sum(hop.km for hop in self.hops)

    @property
    def is_empty(self) -> bool:
        """Check if the route has no hops."""
        return len(self.hops) == 0

    @property
    def num_hops(self) -> int:
        """Return the number of border crossings."""
        return len(self.hops)

    @property
    def path(self) -> tuple[str, ...]:
        """Return the country names visited, endpoints included."""
        if not self.found:
            return ()
        if not self.hops:
            return (self.source,)
        return (self.hops[0].from_name,) + tuple(hop.to_name for hop in self.hops)
