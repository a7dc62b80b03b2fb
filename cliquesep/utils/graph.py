"""Graph normalization, clique tests and the vertex index arena."""

from __future__ import annotations

import itertools
from typing import Hashable, Iterable, List, Optional, Sequence, Set

import networkx as nx
import numpy as np
import scipy.sparse as sp

from cliquesep.exceptions import InvalidGraphError

GraphLike = nx.Graph | np.ndarray | sp.spmatrix | sp.sparray


def require_undirected(G):
    """Return ``G`` unchanged, or raise if it is a directed graph."""
    if not isinstance(G, nx.Graph):
        raise InvalidGraphError(f"Expected a networkx graph, got {type(G).__name__}.")
    if G.is_directed():
        raise InvalidGraphError("Graph must be undirected.")
    return G


def _require_symmetric_pattern(pattern) -> None:
    if pattern.ndim != 2 or pattern.shape[0] != pattern.shape[1]:
        raise InvalidGraphError(f"Adjacency matrix must be square, got shape {pattern.shape}.")
    if sp.issparse(pattern):
        asymmetric = (pattern != pattern.T).nnz > 0
    else:
        asymmetric = not np.array_equal(pattern, pattern.T)
    if asymmetric:
        raise InvalidGraphError("Adjacency matrix is not symmetric; graph cannot be treated as undirected.")


def to_networkx(graph: GraphLike) -> nx.Graph:
    """Build an undirected networkx graph from a graph or an adjacency matrix.

    Accepts networkx graphs (multigraphs included), dense numpy adjacency
    arrays and scipy sparse adjacency matrices. Matrices must be square with a
    symmetric nonzero pattern. Networkx inputs are returned as-is.
    """
    if isinstance(graph, nx.Graph):
        return require_undirected(graph)
    if sp.issparse(graph):
        A = sp.csr_matrix(graph)
        _require_symmetric_pattern(A != 0)
        return nx.from_scipy_sparse_array(A)
    if isinstance(graph, np.ndarray):
        _require_symmetric_pattern(np.asarray(graph) != 0)
        return nx.from_numpy_array(graph)
    raise InvalidGraphError(f"Unsupported graph type: {type(graph).__name__}.")


def as_simple_graph(G: nx.Graph) -> nx.Graph:
    """Return a simple undirected copy of ``G``.

    Self-loops are dropped and parallel edges collapsed, keeping the first
    occurrence and its attributes. Node order and node attributes are
    preserved. ``G`` is never mutated.
    """
    require_undirected(G)
    simple = nx.Graph()
    simple.graph.update(G.graph)
    simple.add_nodes_from(G.nodes(data=True))
    for u, v, data in G.edges(data=True):
        if u == v or simple.has_edge(u, v):
            continue
        simple.add_edge(u, v, **data)
    return simple


def is_clique(G: nx.Graph, vertices: Iterable[Hashable]) -> bool:
    """Check whether every distinct pair of ``vertices`` is adjacent in ``G``."""
    return all(G.has_edge(u, v) for u, v in itertools.combinations(set(vertices), 2))


class VertexIndex:
    """Dense integer labelling of a graph's vertices.

    Position ``i`` holds the i-th vertex of ``order`` (the graph's node order
    by default), so lower indices win ties in max-label selection.
    """

    def __init__(self, G: nx.Graph, order: Optional[Sequence[Hashable]] = None) -> None:
        vertices = list(G.nodes()) if order is None else list(order)
        if order is not None and (len(vertices) != G.number_of_nodes() or set(vertices) != set(G.nodes())):
            raise InvalidGraphError("vertex_order must list every vertex of the graph exactly once.")
        self.vertices: List[Hashable] = vertices
        self.position = {v: i for i, v in enumerate(vertices)}
        if len(self.position) != len(vertices):
            raise InvalidGraphError("vertex_order contains repeated vertices.")

    def __len__(self) -> int:
        return len(self.vertices)

    def adjacency(self, G: nx.Graph) -> List[Set[int]]:
        """Index adjacency sets of ``G``; ``G`` must be simple."""
        pos = self.position
        return [{pos[u] for u in G.adj[v]} for v in self.vertices]

    def to_vertices(self, indices: Iterable[int]) -> frozenset:
        return frozenset(self.vertices[i] for i in indices)
