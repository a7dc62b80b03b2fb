"""Checks and summary metrics for triangulations and atom decompositions."""
from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable

import networkx as nx

from cliquesep.utils.graph import as_simple_graph, is_clique


def treewidth_upper_bound(H: nx.Graph) -> int:
    """Width of the tree decomposition induced by a chordal graph ``H``.

    This is the largest maximal clique size minus one, an upper bound on the
    treewidth of every graph ``H`` triangulates.
    """
    if H.number_of_nodes() == 0:
        return -1
    # chordal_graph_cliques rejects self-loops, so work on a simple copy
    return max(len(clique) for clique in nx.chordal_graph_cliques(as_simple_graph(H))) - 1


def is_minimal_triangulation(G: nx.Graph, H: nx.Graph, fill_edges: Iterable[Iterable[Hashable]]) -> bool:
    """Brute-force check that ``H`` is a minimal triangulation of ``G``.

    ``H`` must be chordal, contain every edge of ``G``, add exactly
    ``fill_edges``, and lose chordality when any single fill edge is removed.
    Intended for small graphs: one chordality test per fill edge.
    """
    G = as_simple_graph(G)
    if set(G.nodes()) != set(H.nodes()):
        return False
    if not all(H.has_edge(u, v) for u, v in G.edges()):
        return False
    if not nx.is_chordal(H):
        return False

    fill = [tuple(edge) for edge in fill_edges]
    if H.number_of_edges() != G.number_of_edges() + len(fill):
        return False

    work = nx.Graph(H)
    for u, v in fill:
        if G.has_edge(u, v) or not work.has_edge(u, v):
            return False
        work.remove_edge(u, v)
        still_chordal = nx.is_chordal(work)
        work.add_edge(u, v)
        if still_chordal:
            return False
    return True


def atoms_cover_graph(G: nx.Graph, atoms: Iterable[Iterable[Hashable]]) -> bool:
    """Check that the union of the atoms is exactly the vertex set of ``G``."""
    covered = set()
    for atom in atoms:
        covered.update(atom)
    return covered == set(G.nodes())


def separators_are_cliques(G: nx.Graph, separators: Iterable[Iterable[Hashable]]) -> bool:
    """Check that every separator is a non-empty clique of ``G``."""
    separators = list(separators)
    return all(len(set(s)) > 0 and is_clique(G, s) for s in separators)


def summarize_decomposition(decomposition) -> Dict[str, Any]:
    """Collect summary figures from a :class:`~cliquesep.CliqueMinimalSeparatorDecomposition`."""
    atoms = decomposition.get_atoms()
    H = decomposition.get_minimal_triangulation()
    return {
        "n_atoms": len(atoms),
        "n_separators": len(decomposition.get_separators()),
        "n_fill_edges": len(decomposition.get_fill_edges()),
        "max_atom_size": max((len(atom) for atom in atoms), default=0),
        "max_separator_size": max((len(s) for s in decomposition.get_separators()), default=0),
        "is_chordal": decomposition.is_chordal(),
        "treewidth_upper_bound": treewidth_upper_bound(H),
    }
