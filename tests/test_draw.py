"""Smoke test for griso.viz."""
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from griso.graph import Graph  # noqa: E402
from griso.viz import draw_graph_pair  # noqa: E402


def _pair(reverse):
    a, b = Graph(), Graph()
    for g in (a, b):
        g.add_vertex("r", "root")
        g.add_vertex("x", "leaf")
        g.add_vertex("y", "leaf")
    a.add_directed_edge("r", "x", "e")
    a.add_directed_edge("r", "y", "e")
    if reverse:
        b.add_directed_edge("x", "r", "e")
    else:
        b.add_directed_edge("r", "x", "e")
    b.add_directed_edge("r", "y", "e")
    return a, b


def test_draw_isomorphic_pair(tmp_path):
    a, b = _pair(reverse=False)
    out = tmp_path / "pair.png"
    pair = draw_graph_pair(a, b, save_path=str(out))
    assert pair is not None
    assert out.exists()


def test_draw_non_isomorphic_pair(tmp_path):
    a, b = _pair(reverse=True)
    out = tmp_path / "pair.png"
    assert draw_graph_pair(a, b, save_path=str(out)) is None
    assert out.exists()
