"""High-level decomposition orchestrator."""

from __future__ import annotations

import logging
import threading
from dataclasses import asdict
from types import MappingProxyType
from typing import Any, Callable, FrozenSet, Generic, Hashable, Mapping, Tuple, TypeVar

import networkx as nx

from cliquesep.algorithms.atoms import compute_atoms
from cliquesep.algorithms.triangulation import minimal_triangulation
from cliquesep.config import CMSDecompositionConfig
from cliquesep.types import AtomDecomposition, ComponentsFn, DecompositionResult, Triangulation, VertexSet
from cliquesep.utils.graph import GraphLike, VertexIndex, as_simple_graph, to_networkx

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _OnceCell(Generic[T]):
    """Value computed on first access, at most once across threads.

    If the computation raises, the cell stays empty and the next access
    retries it.
    """

    def __init__(self, compute: Callable[[], T]) -> None:
        self._compute = compute
        self._lock = threading.Lock()
        self._done = False
        self._value: T | None = None

    @property
    def done(self) -> bool:
        return self._done

    def get(self) -> T:
        if not self._done:
            with self._lock:
                if not self._done:
                    self._value = self._compute()
                    self._done = True
        return self._value


class CliqueMinimalSeparatorDecomposition:
    """Clique minimal separator decomposition of an undirected graph.

    Self-loops and parallel edges are removed from a private working copy;
    the graph passed in is kept by reference and never modified. Mutating it
    after construction is a precondition violation and leads to undefined
    results.

    The minimal triangulation (MCS-M+) and the atom extraction each run at
    most once, on the first accessor that needs them. Accessors are safe to
    call from several threads.
    """

    def __init__(
        self,
        graph: GraphLike,
        config: CMSDecompositionConfig | None = None,
        components_fn: ComponentsFn = nx.connected_components,
    ) -> None:
        self.config = config or CMSDecompositionConfig()
        self.components_fn = components_fn
        self._graph = graph
        self._simple = as_simple_graph(to_networkx(graph))
        # fail on a bad tie-break order now rather than on first access
        VertexIndex(self._simple, self.config.vertex_order)
        self._triangulation: _OnceCell[Triangulation] = _OnceCell(self._compute_minimal_triangulation)
        self._atoms: _OnceCell[AtomDecomposition] = _OnceCell(self._compute_atoms)

    @property
    def _verbose(self) -> bool:
        return self.config.verbosity > 0

    def _compute_minimal_triangulation(self) -> Triangulation:
        triangulation = minimal_triangulation(
            self._simple, vertex_order=self.config.vertex_order, verbose=self._verbose
        )
        nx.freeze(triangulation.chordal_graph)
        if self._verbose:
            logger.info(
                "Minimal triangulation: %d fill edges, %d generators",
                len(triangulation.fill_edges),
                len(triangulation.generators),
            )
        return triangulation

    def _compute_atoms(self) -> AtomDecomposition:
        raw = compute_atoms(
            self._simple,
            self._triangulation.get(),
            components_fn=self.components_fn,
            verbose=self._verbose,
        )
        if self._verbose:
            logger.info("Decomposition: %d atoms, %d clique minimal separators", len(raw.atoms), len(raw.separators))
        return AtomDecomposition(
            atoms=raw.atoms,
            separators=raw.separators,
            full_component_count=MappingProxyType(dict(raw.full_component_count)),
        )

    def is_chordal(self) -> bool:
        """Return True if the input graph is already chordal."""
        H = self._triangulation.get().chordal_graph
        return H.number_of_edges() == self._simple.number_of_edges()

    def get_fill_edges(self) -> FrozenSet[VertexSet]:
        """Edges added by the triangulation, each as a two-vertex frozenset."""
        return self._triangulation.get().fill_edges

    def get_minimal_triangulation(self) -> nx.Graph:
        """Return the (frozen) minimal triangulation of the input graph."""
        return self._triangulation.get().chordal_graph

    def get_generators(self) -> Tuple[Hashable, ...]:
        """Vertices generating a minimal separator of the triangulation, in elimination order."""
        return self._triangulation.get().generators

    def get_meo(self) -> Tuple[Hashable, ...]:
        """Minimal elimination ordering, first-eliminated vertex first."""
        return self._triangulation.get().meo

    def get_full_component_count(self) -> Mapping[VertexSet, int]:
        """Map each separator to the number of full components it produces."""
        return self._atoms.get().full_component_count

    def get_atoms(self) -> FrozenSet[VertexSet]:
        """Atoms of the decomposition, each as a frozenset of vertices."""
        return self._atoms.get().atoms

    def get_separators(self) -> FrozenSet[VertexSet]:
        """Distinct clique minimal separators, each as a frozenset of vertices."""
        return self._atoms.get().separators

    def get_graph(self) -> GraphLike:
        """Return the original input graph (not a copy; do not mutate it)."""
        return self._graph

    def run(self) -> DecompositionResult:
        """Compute every artifact and return them in one result object."""
        atoms = self._atoms.get()
        triangulation = self._triangulation.get()
        return DecompositionResult(
            triangulation=triangulation,
            atoms=atoms.atoms,
            separators=atoms.separators,
            full_component_count=atoms.full_component_count,
            is_chordal=self.is_chordal(),
            metadata={
                "n_vertices": self._simple.number_of_nodes(),
                "n_edges": self._simple.number_of_edges(),
                "n_fill_edges": len(triangulation.fill_edges),
                "n_atoms": len(atoms.atoms),
                "n_separators": len(atoms.separators),
            },
        )


def run_cms_decomposition(
    graph: GraphLike,
    config: CMSDecompositionConfig | None = None,
    components_fn: ComponentsFn = nx.connected_components,
    **overrides: Any,
) -> DecompositionResult:
    """Convenience wrapper for one-shot decomposition runs.

    Keyword ``overrides`` replace fields of ``config``.
    """
    cfg = asdict(config or CMSDecompositionConfig())
    cfg.update(overrides)
    decomposition = CliqueMinimalSeparatorDecomposition(
        graph, config=CMSDecompositionConfig(**cfg), components_fn=components_fn
    )
    return decomposition.run()
