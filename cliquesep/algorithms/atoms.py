"""Atom extraction along a minimal elimination ordering.

Implements algorithm Atoms from Berry, Pogorelcnik and Simonet (2010),
DOI:10.3390/a3020197. Generators are visited in reverse elimination order;
each one whose current neighbourhood in the triangulation is a clique of the
input graph yields a clique minimal separator and peels one atom.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Hashable, Set

import networkx as nx
from tqdm.auto import tqdm

from cliquesep.exceptions import SeparatorInvariantError
from cliquesep.types import AtomDecomposition, ComponentsFn, Triangulation
from cliquesep.utils.graph import VertexIndex, is_clique

logger = logging.getLogger(__name__)


def compute_atoms(
    G: nx.Graph,
    triangulation: Triangulation,
    components_fn: ComponentsFn = nx.connected_components,
    verbose: bool = False,
) -> AtomDecomposition:
    """Decompose ``G`` into atoms using a precomputed MCS-M+ triangulation.

    Args:
        G: Simple undirected graph the triangulation was computed from.
        triangulation: Output of :func:`cliquesep.algorithms.minimal_triangulation`.
        components_fn: Connectivity utility returning the connected vertex
            sets of a graph.
        verbose: Show a progress bar over the reverse elimination walk.

    Returns:
        :class:`~cliquesep.types.AtomDecomposition` with the atoms, the
        distinct clique minimal separators and the number of full components
        of each separator.

    Raises:
        SeparatorInvariantError: a clique separator did not disconnect the
            remaining graph.
    """
    H = triangulation.chordal_graph
    index = VertexIndex(H)
    h_adjacency = index.adjacency(H)
    generators = set(triangulation.generators)

    # vertices of G'' not yet peeled into an atom
    remaining: Set[Hashable] = set(G.nodes())
    separators: Set[FrozenSet[Hashable]] = set()
    full_component_count: Dict[FrozenSet[Hashable], int] = {}
    atoms: Set[FrozenSet[Hashable]] = set()

    for v in tqdm(reversed(triangulation.meo), total=len(triangulation.meo), disable=not verbose, desc="Atoms"):
        i = index.position[v]
        if v in generators:
            separator = index.to_vertices(h_adjacency[i])
            if is_clique(G, separator):
                if separator:
                    if separator in separators:
                        full_component_count[separator] += 1
                    else:
                        full_component_count[separator] = 2
                        separators.add(separator)
                        logger.debug("Clique minimal separator %r generated by %r", set(separator), v)

                components = list(components_fn(G.subgraph(remaining - separator)))
                if len(components) < 2:
                    raise SeparatorInvariantError(
                        f"Separator {set(separator)!r} generated by {v!r} did not separate the graph."
                    )
                component = next(c for c in components if v in c)
                remaining -= component
                atoms.add(frozenset(component) | separator)

        for j in h_adjacency[i]:
            h_adjacency[j].discard(i)
        h_adjacency[i] = set()

    if remaining:
        atoms.add(frozenset(remaining))

    logger.debug("Atoms finished: %d atoms, %d separators", len(atoms), len(separators))
    return AtomDecomposition(
        atoms=frozenset(atoms),
        separators=frozenset(separators),
        full_component_count=full_component_count,
    )
