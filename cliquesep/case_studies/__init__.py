"""Case-study graph builders used by demos and tests."""

from cliquesep.case_studies.random_graphs import build_random_clique_glued_graph, build_random_graph
from cliquesep.case_studies.small_graphs import (
    build_cycle_graph,
    build_disjoint_triangles,
    build_glued_cycles,
    build_shared_edge_triangles,
)

__all__ = [
    "build_cycle_graph",
    "build_disjoint_triangles",
    "build_glued_cycles",
    "build_random_clique_glued_graph",
    "build_random_graph",
    "build_shared_edge_triangles",
]
