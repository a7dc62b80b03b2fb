"""Minimal triangulation by MCS-M+.

Implements algorithm MCS-M+ from Berry, Pogorelcnik and Simonet, "An
introduction to clique minimal separator decomposition", Algorithms 3(2),
2010, DOI:10.3390/a3020197. Besides the minimal elimination ordering it
reports the generators, i.e. the vertices whose neighbourhood in the
triangulation is a minimal separator.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Hashable, Optional, Sequence

import networkx as nx
import numpy as np
from tqdm.auto import tqdm

from cliquesep.types import Triangulation
from cliquesep.utils.graph import VertexIndex, as_simple_graph

logger = logging.getLogger(__name__)

_ELIMINATED = -1


def _reach_search(Y, labels, adjacency, reached):
    """Find the live vertices reachable from the eliminated vertex through lower labels.

    ``reached`` must already contain the eliminated vertex and ``Y``. Buckets are processed in
    increasing label order; a vertex ``z`` found from bucket ``j`` joins ``Y``
    iff ``labels[z] > j``. Returns the vertices added to ``Y``.
    """
    labels = labels.tolist()
    reach = defaultdict(list)
    for y in Y:
        reach[labels[y]].append(y)

    added = []
    j = 0
    top = max(reach) if reach else -1
    while j <= top:
        bucket = reach.get(j)
        while bucket:
            y = bucket.pop()
            for z in adjacency[y]:
                if z in reached:
                    continue
                reached.add(z)
                if labels[z] > j:
                    added.append(z)
                    reach[labels[z]].append(z)
                    top = max(top, labels[z])
                else:
                    bucket.append(z)
        j += 1
    return added


def minimal_triangulation(
    G: nx.Graph,
    vertex_order: Optional[Sequence[Hashable]] = None,
    verbose: bool = False,
) -> Triangulation:
    """Compute a minimal triangulation of ``G`` with MCS-M+.

    Args:
        G: Undirected graph. Self-loops and parallel edges are ignored.
        vertex_order: Tie-break priority for max-label selection; the live
            vertex of maximum label that comes first here is eliminated next.
            Defaults to ``G``'s node order.
        verbose: Show a progress bar over the elimination loop.

    Returns:
        :class:`~cliquesep.types.Triangulation` with the chordal graph, the
        elimination ordering, the generators and the distinct fill edges.
    """
    simple = as_simple_graph(G)
    index = VertexIndex(simple, vertex_order)
    n = len(index)
    adjacency = index.adjacency(simple)

    chordal = nx.Graph()
    chordal.add_nodes_from(index.vertices)

    labels = np.zeros(n, dtype=np.int64)
    s = -1
    meo = []
    generators = []
    fill = set()

    for _ in tqdm(range(n), disable=not verbose, desc="MCS-M+"):
        # argmax returns the first maximum, i.e. the lowest index
        v = int(np.argmax(labels))
        label_v = int(labels[v])

        if label_v <= s:
            generators.append(v)
            logger.debug("Generator %r at label %d", index.vertices[v], label_v)
        s = label_v

        Y = list(adjacency[v])
        reached = {v, *Y}
        added = _reach_search(Y, labels, adjacency, reached)
        for z in added:
            fill.add(frozenset((index.vertices[v], index.vertices[z])))
        Y.extend(added)

        for y in Y:
            chordal.add_edge(index.vertices[v], index.vertices[y])
            labels[y] += 1

        meo.append(v)
        labels[v] = _ELIMINATED
        for y in adjacency[v]:
            adjacency[y].discard(v)
        adjacency[v] = set()

    logger.debug(
        "MCS-M+ finished: %d vertices, %d generators, %d fill edges",
        n,
        len(generators),
        len(fill),
    )
    return Triangulation(
        chordal_graph=chordal,
        meo=tuple(index.vertices[i] for i in meo),
        generators=tuple(index.vertices[i] for i in generators),
        fill_edges=frozenset(fill),
    )
