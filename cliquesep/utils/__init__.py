"""Graph utility exports used across cliquesep."""

from cliquesep.utils.graph import (
    VertexIndex,
    as_simple_graph,
    is_clique,
    require_undirected,
    to_networkx,
)

__all__ = [
    "VertexIndex",
    "as_simple_graph",
    "is_clique",
    "require_undirected",
    "to_networkx",
]
