"""Evaluation checks and summary exports."""

from cliquesep.evaluation.metrics import (
    atoms_cover_graph,
    is_minimal_triangulation,
    separators_are_cliques,
    summarize_decomposition,
    treewidth_upper_bound,
)

__all__ = [
    "atoms_cover_graph",
    "is_minimal_triangulation",
    "separators_are_cliques",
    "summarize_decomposition",
    "treewidth_upper_bound",
]
