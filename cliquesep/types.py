"""Core types and protocols for cliquesep."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Hashable, Iterable, Mapping, Protocol, Set, Tuple

import networkx as nx

VertexSet = FrozenSet[Hashable]


class ComponentsFn(Protocol):
    """Protocol for connectivity utilities used during atom extraction.

    Given an undirected graph, yield its connected components as vertex sets.
    :func:`networkx.connected_components` satisfies it.
    """

    def __call__(self, G: nx.Graph) -> Iterable[Set[Hashable]]: ...


@dataclass(frozen=True)
class Triangulation:
    """Output of MCS-M+.

    Attributes:
        chordal_graph: Minimal triangulation H of the normalized graph.
        meo: Minimal elimination ordering, first-eliminated first.
        generators: Vertices whose H-neighbourhood is a minimal separator,
            in elimination order.
        fill_edges: Distinct vertex pairs present in H but not in G.
    """

    chordal_graph: nx.Graph
    meo: Tuple[Hashable, ...]
    generators: Tuple[Hashable, ...]
    fill_edges: FrozenSet[VertexSet]


@dataclass(frozen=True)
class AtomDecomposition:
    """Output of the Atoms procedure."""

    atoms: FrozenSet[VertexSet]
    separators: FrozenSet[VertexSet]
    full_component_count: Mapping[VertexSet, int]


@dataclass
class DecompositionResult:
    """Container for the full decomposition output and summary metadata."""

    triangulation: Triangulation
    atoms: FrozenSet[VertexSet]
    separators: FrozenSet[VertexSet]
    full_component_count: Mapping[VertexSet, int]
    is_chordal: bool
    metadata: Dict[str, Any] = field(default_factory=dict)
