"""Small reference graphs with known decompositions."""

import networkx as nx


def build_cycle_graph(n=4):
    """Chordless cycle on ``n`` vertices; a single atom, ``n - 3`` fill edges."""
    return nx.cycle_graph(n)


def build_shared_edge_triangles():
    """Two triangles ``u, v, x`` and ``u, v, y`` glued along the edge ``u-v``.

    Returns:
        Tuple of ``(graph, separator, atoms)`` with the expected decomposition.
    """
    G = nx.Graph()
    G.add_edges_from([("u", "v"), ("u", "x"), ("v", "x"), ("u", "y"), ("v", "y")])
    separator = frozenset({"u", "v"})
    atoms = {frozenset({"u", "v", "x"}), frozenset({"u", "v", "y"})}
    return G, separator, atoms


def build_disjoint_triangles():
    """Two vertex-disjoint triangles; each is an atom and there are no separators."""
    G = nx.Graph()
    G.add_edges_from([(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5)])
    return G, {frozenset({0, 1, 2}), frozenset({3, 4, 5})}


def build_glued_cycles(num_cycles=3, cycle_length=5):
    """Chordless cycles chained through shared vertices.

    Consecutive cycles share one vertex, a clique separator of size one. Every
    cycle is an atom and each shared vertex separates exactly two full
    components.
    """
    G = nx.Graph()
    atoms = set()
    start = 0
    for _ in range(num_cycles):
        nodes = list(range(start, start + cycle_length))
        nx.add_cycle(G, nodes)
        atoms.add(frozenset(nodes))
        start = nodes[-1]
    return G, atoms
