"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional, Sequence


@dataclass
class CMSDecompositionConfig:
    """Configuration container for :class:`cliquesep.orchestrator.CliqueMinimalSeparatorDecomposition`.

    ``vertex_order`` fixes the tie-break priority used when several vertices
    share the maximum label during triangulation: earlier vertices win. When
    omitted, the graph's own node order is used. The atom set does not depend
    on this choice; the elimination ordering and fill edges may.
    """

    vertex_order: Optional[Sequence[Hashable]] = None
    verbosity: int = 0
