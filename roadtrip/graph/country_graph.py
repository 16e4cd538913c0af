"""In-memory country graph.

Nodes are keyed by country code, with a name index and a weighted
border relation. The graph is frozen once built: mappings are exposed
as read-only views and neighbor sets are frozensets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterator, Mapping, Optional, Sequence, Tuple

from ..domain.errors import CountryNotFoundError, GraphError
from ..domain.models import CountryNode

# Adjacency-list view of the usable subgraph, as consumed by ``dijkstra``.
Graph = Mapping[str, Sequence[Tuple[str, int]]]


@dataclass(frozen=True, slots=True)
class CountryGraph:
    """Weighted undirected graph of countries sharing land borders.

    Attributes:
        by_code: Country code -> node
        by_name: Country name -> code
        distance: Unordered code pair -> capital distance in km. A border
            without an entry here cannot be used for routing.
    """

    by_code: Mapping[str, CountryNode]
    by_name: Mapping[str, str]
    distance: Mapping[FrozenSet[str], int]
    _adjacency: Graph = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_code", MappingProxyType(dict(self.by_code)))
        object.__setattr__(self, "by_name", MappingProxyType(dict(self.by_name)))
        object.__setattr__(self, "distance", MappingProxyType(dict(self.distance)))
        self._check_integrity()
        object.__setattr__(self, "_adjacency", self._build_adjacency())

    def _check_integrity(self) -> None:
        for code, node in self.by_code.items():
            if node.code != code:
                raise GraphError(f"Node {node.code} stored under code {code}")
            for other in node.neighbors:
                peer = self.by_code.get(other)
                if peer is None:
                    raise GraphError(f"Border {code}-{other} references an unknown code")
                if code not in peer.neighbors:
                    raise GraphError(f"Border {code}-{other} is not symmetric")
        for name, code in self.by_name.items():
            if code not in self.by_code:
                raise GraphError(f"Name {name!r} bound to unknown code {code}")
        for pair in self.distance:
            if len(pair) != 2:
                raise GraphError(f"Distance key {sorted(pair)} is not a pair of codes")

    def __len__(self) -> int:
        return len(self.by_code)

    def __contains__(self, code: object) -> bool:
        return code in self.by_code

    def codes(self) -> Tuple[str, ...]:
        """Return all country codes, sorted."""
        return tuple(sorted(self.by_code))

    def names(self) -> Tuple[str, ...]:
        """Return all resolvable country names, sorted."""
        return tuple(sorted(self.by_name))

    def resolve_name(self, name: str) -> Optional[str]:
        """Resolve a country name to its code.

        Args:
            name: Country name; surrounding whitespace is ignored.

        Returns:
            The country code, or None if the name is unknown.
        """
        return self.by_name.get(name.strip())

    def resolve_name_or_raise(self, name: str) -> str:
        """Resolve a country name to its code, raising if unknown.

        Raises:
            CountryNotFoundError: If the name is unknown.
        """
        code = self.resolve_name(name)
        if code is None:
            raise CountryNotFoundError(
                f"Invalid country name: {name.strip()}",
                country_name=name.strip(),
            )
        return code

    def node(self, code: str) -> Optional[CountryNode]:
        """Return the node for a code, or None if the code is unknown."""
        return self.by_code.get(code)

    def name_of(self, code: str) -> Optional[str]:
        """Return the canonical name for a code, or None if unknown."""
        node = self.by_code.get(code)
        return node.name if node else None

    def weight(self, code_a: str, code_b: str) -> Optional[int]:
        """Return the capital distance between two countries.

        This is a lookup only: it does not check that the countries
        share a border.

        Returns:
            Distance in km, or None when either code is unknown, the codes
            are equal, or no distance was recorded.
        """
        if code_a == code_b:
            return None
        if code_a not in self.by_code or code_b not in self.by_code:
            return None
        return self.distance.get(frozenset((code_a, code_b)))

    def usable_neighbors(self, code: str) -> Iterator[Tuple[str, int]]:
        """Yield ``(neighbor_code, km)`` for borders with a recorded distance."""
        return iter(self._adjacency.get(code, ()))

    def usable_adjacency(self) -> Graph:
        """Return the usable subgraph as an adjacency list.

        Every code is a key, islands and nodes whose borders all lack a
        distance map to an empty tuple. The view is built once, with the
        graph.
        """
        return self._adjacency

    def _build_adjacency(self) -> Graph:
        adjacency = {}
        for code, node in self.by_code.items():
            edges = []
            for other in sorted(node.neighbors):
                km = self.weight(code, other)
                if km is not None:
                    edges.append((other, km))
            adjacency[code] = tuple(edges)
        return MappingProxyType(adjacency)

    def border_count(self) -> int:
        """Return the number of undirected borders."""
        return sum(len(node.neighbors) for node in self.by_code.values()) // 2

    def usable_edge_count(self) -> int:
        """Return the number of undirected borders usable for routing."""
        return sum(len(edges) for edges in self._adjacency.values()) // 2
