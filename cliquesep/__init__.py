"""cliquesep: clique minimal separator decomposition of undirected graphs."""

from cliquesep.algorithms.atoms import compute_atoms
from cliquesep.algorithms.triangulation import minimal_triangulation
from cliquesep.config import CMSDecompositionConfig
from cliquesep.exceptions import CliqueSepError, InvalidGraphError, SeparatorInvariantError
from cliquesep.orchestrator import CliqueMinimalSeparatorDecomposition, run_cms_decomposition
from cliquesep.types import AtomDecomposition, DecompositionResult, Triangulation


def summarize_decomposition(*args, **kwargs):
    """Summarize a decomposition using :mod:`cliquesep.evaluation.metrics`.

    This lazy import keeps the evaluation helpers out of import-time paths for
    users who only need decomposition APIs.
    """
    from cliquesep.evaluation.metrics import summarize_decomposition as _summarize_decomposition

    return _summarize_decomposition(*args, **kwargs)


__all__ = [
    "AtomDecomposition",
    "CMSDecompositionConfig",
    "CliqueMinimalSeparatorDecomposition",
    "CliqueSepError",
    "DecompositionResult",
    "InvalidGraphError",
    "SeparatorInvariantError",
    "Triangulation",
    "compute_atoms",
    "minimal_triangulation",
    "run_cms_decomposition",
    "summarize_decomposition",
]
