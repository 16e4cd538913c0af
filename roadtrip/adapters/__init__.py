"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to its data sources and algorithms:
- Graph storage (borders, capital-distance and state-name files)
- Route solving (Dijkstra)
"""
