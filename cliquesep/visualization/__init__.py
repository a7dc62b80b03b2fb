"""Visualization helpers for decompositions and triangulations."""

from cliquesep.visualization.graphs import draw_atoms, draw_triangulation

__all__ = [
    "draw_atoms",
    "draw_triangulation",
]
