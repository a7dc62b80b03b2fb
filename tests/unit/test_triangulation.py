import networkx as nx
import pytest

from cliquesep.algorithms.triangulation import minimal_triangulation
from cliquesep.evaluation.metrics import is_minimal_triangulation


def test_four_cycle_gets_one_diagonal():
    G = nx.cycle_graph(4)
    tri = minimal_triangulation(G)
    assert tri.meo == (0, 1, 3, 2)
    assert tri.generators == (2,)
    assert tri.fill_edges == frozenset({frozenset({1, 3})})
    assert tri.chordal_graph.has_edge(1, 3)
    assert tri.chordal_graph.number_of_edges() == 5


def test_shared_edge_triangles_generator():
    G = nx.Graph([("u", "v"), ("u", "x"), ("v", "x"), ("u", "y"), ("v", "y")])
    tri = minimal_triangulation(G)
    assert tri.meo == ("u", "v", "x", "y")
    assert tri.generators == ("y",)
    assert tri.fill_edges == frozenset()
    assert set(map(frozenset, tri.chordal_graph.edges())) == set(map(frozenset, G.edges()))


def test_vertex_order_breaks_ties():
    G = nx.path_graph(["a", "b", "c"])
    tri = minimal_triangulation(G, vertex_order=["b", "a", "c"])
    assert tri.meo == ("b", "a", "c")
    assert tri.generators == ("c",)


def test_chordal_input_needs_no_fill():
    G = nx.complete_graph(5)
    G.add_edges_from([(4, 5), (5, 6), (4, 6)])
    tri = minimal_triangulation(G)
    assert tri.fill_edges == frozenset()
    assert tri.chordal_graph.number_of_edges() == G.number_of_edges()


def test_isolated_vertices_are_generators_after_the_first():
    G = nx.empty_graph(3)
    tri = minimal_triangulation(G)
    assert tri.meo == (0, 1, 2)
    assert tri.generators == (1, 2)
    assert tri.chordal_graph.number_of_nodes() == 3
    assert tri.chordal_graph.number_of_edges() == 0


def test_empty_graph():
    tri = minimal_triangulation(nx.Graph())
    assert tri.meo == ()
    assert tri.generators == ()
    assert tri.fill_edges == frozenset()


def test_self_loops_and_parallel_edges_are_ignored():
    M = nx.MultiGraph([(0, 1), (0, 1), (1, 2), (2, 3), (3, 0), (2, 2)])
    tri = minimal_triangulation(M)
    assert len(tri.fill_edges) == 1
    assert nx.number_of_selfloops(tri.chordal_graph) == 0


@pytest.mark.parametrize("n", [5, 6, 8])
def test_long_cycle_is_minimally_triangulated(n):
    G = nx.cycle_graph(n)
    tri = minimal_triangulation(G)
    assert len(tri.fill_edges) == n - 3
    assert is_minimal_triangulation(G, tri.chordal_graph, tri.fill_edges)


def test_meo_is_a_permutation():
    G = nx.petersen_graph()
    tri = minimal_triangulation(G)
    assert len(tri.meo) == G.number_of_nodes()
    assert set(tri.meo) == set(G.nodes())
    assert set(tri.generators) <= set(tri.meo)
    positions = [tri.meo.index(v) for v in tri.generators]
    assert positions == sorted(positions)


def test_fill_edges_are_new_edges_of_the_triangulation():
    G = nx.grid_2d_graph(3, 3)
    tri = minimal_triangulation(G)
    H = tri.chordal_graph
    assert nx.is_chordal(H)
    for u, v in G.edges():
        assert H.has_edge(u, v)
    for edge in tri.fill_edges:
        u, v = tuple(edge)
        assert H.has_edge(u, v)
        assert not G.has_edge(u, v)
    assert H.number_of_edges() == G.number_of_edges() + len(tri.fill_edges)
