"""Tests for griso.isomorphism.automorphisms and classify."""
import math

from griso.external import vf2_automorphism_count
from griso.graph import Graph
from griso.isomorphism import (
    automorphism_count,
    automorphisms,
    isomorphism_classes,
    orbit_size,
    signature,
    vertex_permutation,
)


def _star(n_children):
    g = Graph()
    g.add_vertex("r", "root")
    for i in range(n_children):
        g.add_vertex(i, "leaf")
        g.add_directed_edge("r", i, "e")
    return g


def _directed_triangle(ids=(1, 2, 3)):
    g = Graph()
    for vid in ids:
        g.add_vertex(vid, "v")
    a, b, c = ids
    for u, v in [(a, b), (b, c), (c, a)]:
        g.add_directed_edge(u, v, "e")
    return g


# --- automorphisms ---

def test_aut_empty_graph():
    assert list(automorphisms(Graph())) == [{}]
    assert automorphism_count(Graph()) == 1


def test_aut_uniquely_named():
    g = Graph()
    g.add_vertex("a", "A")
    g.add_vertex("b", "B")
    g.add_directed_edge("a", "b", "E")
    assert automorphism_count(g) == 1


def test_aut_star():
    assert automorphism_count(_star(2)) == 2
    assert automorphism_count(_star(3)) == 6


def test_aut_directed_triangle():
    # rotations only
    assert automorphism_count(_directed_triangle()) == 3


def test_aut_first_is_identity():
    g = _star(3)
    first = next(automorphisms(g))
    assert all(src is dst for src, dst in first.items())


def test_aut_vertex_permutations_preserve_structure():
    g = _directed_triangle()
    perms = [vertex_permutation(aut) for aut in automorphisms(g)]
    assert {tuple(sorted(p.items())) for p in perms} == {
        ((1, 1), (2, 2), (3, 3)),
        ((1, 2), (2, 3), (3, 1)),
        ((1, 3), (2, 1), (3, 2)),
    }


def test_aut_parallel_named_edges():
    g = Graph()
    g.add_vertex("a", "A")
    g.add_vertex("b", "B")
    g.add_directed_edge("a", "b", "E")
    g.add_directed_edge("a", "b", "E")
    # the two edge nodes can be swapped while every vertex stays put
    assert automorphism_count(g) == 2
    perms = [vertex_permutation(aut) for aut in automorphisms(g)]
    assert all(p == {"a": "a", "b": "b"} for p in perms)


def test_aut_matches_vf2():
    for g in (_star(2), _star(3), _directed_triangle()):
        assert automorphism_count(g) == vf2_automorphism_count(g)


def test_orbit_size_star():
    g = _star(2)
    assert orbit_size(g) == math.factorial(5) // 2


# --- classification ---

def test_signature_equal_for_isomorphic():
    assert signature(_directed_triangle()) == signature(_directed_triangle(("x", "y", "z")))


def test_isomorphism_classes():
    graphs = [
        _star(2),
        _directed_triangle(),
        _star(3),
        _directed_triangle(("x", "y", "z")),
        _star(2),
    ]
    classes, reps = isomorphism_classes(graphs)
    assert classes == {0: [0, 4], 1: [1, 3], 2: [2]}
    assert reps[0] is graphs[0]
    assert reps[1] is graphs[1]
    assert reps[2] is graphs[2]


def test_isomorphism_classes_same_signature_different_class():
    # reversing a 3-cycle keeps degrees and names but the cycle is still
    # isomorphic; a path with a back-edge is not
    g1 = _directed_triangle()
    g2 = Graph()
    for vid in (1, 2, 3):
        g2.add_vertex(vid, "v")
    g2.add_directed_edge(1, 2, "e")
    g2.add_directed_edge(2, 1, "e")
    g2.add_directed_edge(3, 3, "e")
    assert signature(g1) == signature(g2)
    classes, _ = isomorphism_classes([g1, g2])
    assert classes == {0: [0], 1: [1]}


def test_isomorphism_classes_empty():
    classes, reps = isomorphism_classes([])
    assert classes == {}
    assert reps == []


def test_automorphisms_yield_node_mappings():
    g = _star(2)
    for aut in automorphisms(g):
        assert set(aut) == set(g.nodes)
        assert set(aut.values()) == set(g.nodes)
    perms = [vertex_permutation(a) for a in automorphisms(g)]
    assert {p[0] for p in perms} == {0, 1}
    assert all(p["r"] == "r" for p in perms)
