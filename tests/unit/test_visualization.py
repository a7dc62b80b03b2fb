import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from cliquesep import CliqueMinimalSeparatorDecomposition  # noqa: E402
from cliquesep.case_studies import build_glued_cycles  # noqa: E402
from cliquesep.visualization import draw_atoms, draw_triangulation  # noqa: E402


@pytest.fixture
def no_show(monkeypatch):
    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))
    yield shown
    plt.close("all")


def test_draw_atoms(no_show):
    G, _ = build_glued_cycles(num_cycles=3)
    dec = CliqueMinimalSeparatorDecomposition(G)
    draw_atoms(G, dec.get_atoms(), dec.get_separators(), figsize=(4, 4))
    assert no_show == [True]


def test_draw_triangulation(no_show):
    G, _ = build_glued_cycles(num_cycles=2)
    dec = CliqueMinimalSeparatorDecomposition(G)
    draw_triangulation(G, dec.get_fill_edges())
    assert no_show == [True]
