"""Combinatorics, graph search, boolean lattices, GTSP tasks, markers and polygon editing."""

__version__ = "0.1.0"

__all__ = [
    "boolean_lattice",
    "combinatorics",
    "graph_base",
    "gtsp_task",
    "markers",
    "polygon_editor",
]