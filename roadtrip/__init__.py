"""Top-level package for the road-trip router.

This package loads a graph of sovereign countries sharing land borders,
weighted by the distance between their capitals, and answers
shortest-land-route queries between two countries from an interactive
prompt.
"""

__version__ = "1.0.0"
