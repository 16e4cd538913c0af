"""Typed domain errors for the road-trip router.

All errors inherit from RoadTripError and can optionally wrap a root
cause exception for debugging.

Two families matter to callers:
- GraphError and its subclasses are fatal: the input artifacts could
  not be read or interpreted, so no graph exists to query.
- CountryNotFoundError and NoRouteFoundError are query-level failures.
  They are reported to the user and never abort the program.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadTripError(Exception):
    """Base error for the road-trip domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(RoadTripError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the input artifact if relevant
    """

    file_path: Optional[str] = None


@dataclass
class GraphLoadError(GraphError):
    """An input artifact is missing or unreadable."""


@dataclass
class MalformedLineError(GraphError):
    """A line in an input artifact has a shape the loader cannot interpret.

    Attributes:
        line: The offending line, as read
        line_number: 1-based line number within the artifact
    """

    line: str = ""
    line_number: int = 0

    def __str__(self) -> str:
        where = self.file_path or "<input>"
        text = f"{self.message} ({where}:{self.line_number}): {self.line!r}"
        if self.cause:
            return f"{text}: {self.cause}"
        return text


@dataclass
class CountryNotFoundError(RoadTripError):
    """Country name does not resolve to a known country code.

    Attributes:
        country_name: The name that could not be resolved
    """

    country_name: str = ""


@dataclass
class NoRouteFoundError(RoadTripError):
    """No usable land route exists between the requested countries.

    Attributes:
        source: Source country name
        destination: Destination country name
    """

    source: str = ""
    destination: str = ""
