"""Random graph builders for benchmarks and property tests."""

from __future__ import annotations

import networkx as nx
import numpy as np


def build_random_graph(n, p, seed=None, shuffle=False):
    """Erdos-Renyi graph ``G(n, p)``; optionally with nodes inserted in random order.

    Node insertion order drives the default tie-break of the triangulation,
    so ``shuffle`` gives a different elimination ordering for the same graph.
    """
    rng = np.random.default_rng(seed)
    base = nx.gnp_random_graph(n, p, seed=int(rng.integers(0, 2**31 - 1)))
    if not shuffle:
        return base
    G = nx.Graph()
    G.add_nodes_from(rng.permutation(n).tolist())
    edges = list(base.edges())
    G.add_edges_from(edges[i] for i in rng.permutation(len(edges)))
    return G


def build_random_clique_glued_graph(num_pieces=4, piece_size=6, p=0.5, max_clique=3, seed=None):
    """Random pieces glued along cliques, so the graph has clique separators.

    Each new piece is a ``G(piece_size, p)`` graph that shares a random clique
    of at most ``max_clique`` vertices with a piece already placed.
    """
    rng = np.random.default_rng(seed)
    G = nx.Graph()
    next_node = 0
    for _ in range(num_pieces):
        glue = []
        if G.number_of_nodes() > 0:
            anchor = int(rng.choice(list(G.nodes())))
            glue = [anchor]
            for u in rng.permutation(list(G.adj[anchor])).tolist():
                if len(glue) >= max_clique:
                    break
                if all(G.has_edge(u, w) for w in glue):
                    glue.append(u)
        fresh = list(range(next_node, next_node + piece_size - len(glue)))
        next_node += len(fresh)
        nodes = glue + fresh
        piece = nx.gnp_random_graph(len(nodes), p, seed=int(rng.integers(0, 2**31 - 1)))
        G.add_nodes_from(fresh)
        for a, b in piece.edges():
            # keep the glue clique as it is
            if a < len(glue) and b < len(glue):
                continue
            G.add_edge(nodes[a], nodes[b])
    return G
