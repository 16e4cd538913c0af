"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- FileCountryGraphRepository: Loads the country graph from its input files
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .file_repository import FileCountryGraphRepository

__all__ = ["FileCountryGraphRepository", "DijkstraRouteSolver"]
