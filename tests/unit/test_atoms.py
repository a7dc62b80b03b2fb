import networkx as nx
import pytest

from cliquesep.algorithms.atoms import compute_atoms
from cliquesep.algorithms.triangulation import minimal_triangulation
from cliquesep.exceptions import SeparatorInvariantError


def _atoms(G, **kwargs):
    return compute_atoms(G, minimal_triangulation(G), **kwargs)


def test_path_splits_at_inner_vertices():
    G = nx.path_graph(4)
    result = _atoms(G)
    assert result.atoms == {frozenset({0, 1}), frozenset({1, 2}), frozenset({2, 3})}
    assert result.separators == {frozenset({1}), frozenset({2})}
    assert dict(result.full_component_count) == {frozenset({1}): 2, frozenset({2}): 2}


def test_separator_shared_by_three_triangles_counts_three_components():
    G = nx.Graph()
    for w in ["x", "y", "z"]:
        G.add_edges_from([("u", "v"), ("u", w), ("v", w)])
    result = _atoms(G)
    uv = frozenset({"u", "v"})
    assert result.separators == {uv}
    assert result.full_component_count[uv] == 3
    assert result.atoms == {uv | {w} for w in ["x", "y", "z"]}


def test_non_clique_minimal_separator_does_not_split():
    G = nx.cycle_graph(6)
    result = _atoms(G)
    assert result.atoms == {frozenset(range(6))}
    assert result.separators == frozenset()
    assert dict(result.full_component_count) == {}


def test_isolated_vertices_form_their_own_atoms():
    G = nx.empty_graph(3)
    G.add_edge(3, 4)
    result = _atoms(G)
    assert result.atoms == {frozenset({0}), frozenset({1}), frozenset({2}), frozenset({3, 4})}
    assert result.separators == frozenset()


def test_empty_graph_has_no_atoms():
    result = _atoms(nx.Graph())
    assert result.atoms == frozenset()


def test_separator_that_does_not_disconnect_is_fatal():
    G = nx.path_graph(3)

    def one_component(graph):
        return [set(graph.nodes())]

    with pytest.raises(SeparatorInvariantError):
        _atoms(G, components_fn=one_component)


def test_custom_components_fn_is_used():
    G = nx.path_graph(3)
    calls = []

    def tracking(graph):
        calls.append(set(graph.nodes()))
        return nx.connected_components(graph)

    result = _atoms(G, components_fn=tracking)
    assert calls
    assert result.atoms == {frozenset({0, 1}), frozenset({1, 2})}
