"""Public algorithm exports for minimal triangulation and atom extraction."""

from cliquesep.algorithms.atoms import compute_atoms
from cliquesep.algorithms.triangulation import minimal_triangulation

__all__ = [
    "compute_atoms",
    "minimal_triangulation",
]
