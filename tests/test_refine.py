"""Tests for colour refinement (griso.labelling.refine)."""
from griso.graph import Graph
from griso.labelling.refine import (
    ABSENT_NAME_HASH,
    ambiguous_nodes,
    initial_partition,
    is_discrete,
    label_map,
    name_hash,
    refine_partition,
)


def _star(child_name, edge_names):
    """Helper: root "r" with one child per edge name, all children named child_name."""
    g = Graph()
    g.add_vertex("r", "root")
    for i, edge_name in enumerate(edge_names):
        g.add_vertex(i, child_name)
        g.add_directed_edge("r", i, edge_name)
    return g


def test_name_hash_absent():
    assert name_hash(None) == ABSENT_NAME_HASH
    assert name_hash("L1") == hash("L1")


def test_initial_partition_groups_by_name():
    g = _star("leaf", ["e", "e"])
    groups = initial_partition(g.nodes)
    sizes = sorted(len(members) for members in groups.values())
    assert sizes == [1, 2, 2]
    assert not is_discrete(groups)
    assert len(ambiguous_nodes(groups)) == 4


def test_initial_partition_shares_bucket_for_unnamed_nodes():
    g = Graph()
    g.add_vertex("a")
    g.add_vertex("b")
    groups = initial_partition(g.nodes)
    assert len(groups) == 1


def test_refinement_resolves_distinct_edge_names():
    g = _star("leaf", ["e1", "e2"])
    groups = initial_partition(g.nodes)
    rounds = refine_partition(groups, g.number_of_nodes())
    assert rounds >= 1
    assert is_discrete(groups)
    assert len(label_map(groups)) == g.number_of_nodes()


def test_refinement_cannot_resolve_symmetry():
    g = _star("leaf", ["e", "e", "e"])
    groups = initial_partition(g.nodes)
    refine_partition(groups, g.number_of_nodes())
    assert not is_discrete(groups)
    # three leaves and three edge nodes stay tied
    assert sorted(len(m) for m in groups.values()) == [1, 3, 3]


def test_refinement_distinguishes_direction():
    g = Graph()
    g.add_vertex("a", "x")
    g.add_vertex("b", "x")
    g.add_directed_edge("a", "b")
    groups = initial_partition(g.nodes)
    refine_partition(groups, g.number_of_nodes())
    assert is_discrete(groups)


def test_refinement_respects_round_bound():
    g = _star("leaf", ["e1", "e2"])
    groups = initial_partition(g.nodes)
    assert refine_partition(groups, 0) == 0
    assert not is_discrete(groups)


def test_refinement_propagates_along_path():
    # a -> b -> c -> d with identical names: only the ends differ at first
    g = Graph()
    for vid in "abcd":
        g.add_vertex(vid, "x")
    for u, v in ["ab", "bc", "cd"]:
        g.add_directed_edge(u, v)
    groups = initial_partition(g.nodes)
    refine_partition(groups, g.number_of_nodes())
    assert is_discrete(groups)


def test_singletons_keep_their_label():
    g = _star("leaf", ["e", "e"])
    groups = initial_partition(g.nodes)
    root = g.vertex("r")
    before = label_map(groups)[root]
    refine_partition(groups, g.number_of_nodes())
    assert label_map(groups)[root] == before


def test_label_map_is_exported_and_inverts_partition():
    from griso.labelling import label_map as exported

    g = _star("leaf", ["e", "e"])
    groups = initial_partition(g.nodes)
    labels = exported(groups)
    assert set(labels) == set(g.nodes)
    for label, members in groups.items():
        assert all(labels[node] == label for node in members)
