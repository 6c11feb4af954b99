import math
import random

import pytest

from edge import Edge
from graph import Graph, SAMPLE_VERTICES, SAMPLE_EDGES
from vertex import VERTEX_RADIUS


def labels(g, refs):
    return [g.getLabel(r) for r in refs]


def edge_refs(g):
    return [g.edgeAt(i) for i in range(g.edgeCount())]


# --------------------------
# Mutation
# --------------------------
def test_add_vertex_starts_unlabelled():
    g = Graph()
    v = g.addVertex(0.3, 0.4)
    assert g.vertexCount() == 1
    assert g.vertexAt(0) == v
    assert g.getVertex(v).getPosition() == (0.3, 0.4)
    assert g.getLabel(v) == ""


def test_add_vertex_rejects_non_finite():
    g = Graph()
    with pytest.raises(ValueError):
        g.addVertex(math.nan, 0.5)
    with pytest.raises(ValueError):
        g.addVertex(0.5, math.inf)
    assert g.vertexCount() == 0


def test_coincident_vertices_are_distinct():
    g = Graph()
    a = g.addVertex(0.5, 0.5)
    b = g.addVertex(0.5, 0.5)
    assert a != b
    assert g.vertexCount() == 2


def test_parallel_edges_and_loops_are_kept():
    g = Graph()
    a = g.addVertex(0.1, 0.1)
    b = g.addVertex(0.9, 0.9)
    g.addEdge(a, b)
    g.addEdge(b, a)
    g.addEdge(a, a)
    assert g.edgeCount() == 3
    assert edge_refs(g) == [(a, b), (b, a), (a, a)]


def test_add_edge_with_unknown_vertex_raises():
    g = Graph()
    a = g.addVertex(0.1, 0.1)
    b = g.addVertex(0.2, 0.2)
    g.remove(b)
    with pytest.raises(ValueError):
        g.addEdge(a, b)
    assert g.edgeCount() == 0


def test_remove_cascades_to_edges():
    # Scenario B
    g = Graph()
    v1 = g.addVertex(0.1, 0.1)
    v2 = g.addVertex(0.5, 0.5)
    v3 = g.addVertex(0.9, 0.9)
    g.addEdge(v1, v2)
    g.addEdge(v2, v3)
    g.remove(v2)
    assert g.vertexCount() == 2
    assert g.edgeCount() == 0
    assert g.getVertices() == (v1, v3)


def test_remove_keeps_order_of_the_rest():
    g = Graph()
    v = [g.addVertex(0.1 * i, 0.1) for i in range(5)]
    g.addEdge(v[0], v[1])
    g.addEdge(v[2], v[3])
    g.addEdge(v[1], v[4])
    g.addEdge(v[3], v[4])
    g.remove(v[1])
    assert g.getVertices() == (v[0], v[2], v[3], v[4])
    assert edge_refs(g) == [(v[2], v[3]), (v[3], v[4])]
    assert g.vertexAt(1) == v[2]


def test_remove_is_idempotent():
    g = Graph()
    a = g.addVertex(0.1, 0.1)
    b = g.addVertex(0.2, 0.2)
    g.addEdge(a, b)
    g.remove(a)
    state = (g.getVertices(), g.getEdges())
    g.remove(a)
    assert (g.getVertices(), g.getEdges()) == state


def test_stale_handle_does_not_alias_reused_slot():
    g = Graph()
    old = g.addVertex(0.1, 0.1)
    g.remove(old)
    new = g.addVertex(0.7, 0.7)
    assert new.slot == old.slot
    assert not g.contains(old)
    g.remove(old)
    assert g.vertexCount() == 1
    with pytest.raises(KeyError):
        g.getVertex(old)
    with pytest.raises(ValueError):
        g.bfs(old)


def test_labels_survive_compaction():
    g = Graph()
    a = g.addVertex(0.1, 0.1)
    b = g.addVertex(0.2, 0.2)
    c = g.addVertex(0.3, 0.3)
    g.addEdge(b, c)
    g.bfs(b)
    g.remove(a)
    assert g.vertexAt(0) == b
    assert labels(g, [b, c]) == ["1", "2"]


def test_move_vertex_and_absent_move_is_noop():
    g = Graph()
    a = g.addVertex(0.1, 0.1)
    g.moveVertex(a, 0.6, 0.7)
    assert g.getVertex(a).getPosition() == (0.6, 0.7)
    g.remove(a)
    g.moveVertex(a, 0.2, 0.2)
    assert g.vertexCount() == 0


def test_clear_empties_graph():
    g = Graph.sampleGraph()
    g.clear()
    assert g.vertexCount() == 0
    assert g.edgeCount() == 0


def test_index_out_of_range():
    g = Graph()
    with pytest.raises(IndexError):
        g.vertexAt(0)
    with pytest.raises(IndexError):
        g.edgeAt(0)


def test_random_edits_keep_invariants():
    rng = random.Random(1234)
    g = Graph()
    live = []
    added = removed = 0
    for _ in range(400):
        op = rng.random()
        if op < 0.4 or not live:
            live.append(g.addVertex(rng.random(), rng.random()))
            added += 1
        elif op < 0.75:
            g.addEdge(rng.choice(live), rng.choice(live))
        else:
            v = rng.choice(live)
            live.remove(v)
            g.remove(v)
            removed += 1
            assert all(v not in e for e in g.getEdges())
        assert g.validateInvariants(verbose=True)
        assert g.vertexCount() == added - removed >= 0
        assert set(g.getVertices()) == set(live)


# --------------------------
# Spatial lookup
# --------------------------
def test_vertex_at_point_hit_and_miss():
    # Scenario C
    g = Graph()
    v = g.addVertex(0.1, 0.1)
    assert g.vertexAtPoint(0.1, 0.1, 1.0, 1.0) == v
    assert g.vertexAtPoint(0.1 + 2 * VERTEX_RADIUS, 0.1, 1.0, 1.0) is None


def test_vertex_at_point_first_inserted_wins():
    # Scenario D
    g = Graph()
    first = g.addVertex(0.4, 0.4)
    g.addVertex(0.4, 0.4)
    assert g.vertexAtPoint(0.4, 0.4, 1.0, 1.0) == first


def test_vertex_at_point_respects_aspect():
    g = Graph()
    v = g.addVertex(0.5, 0.5)
    off = 0.8 * VERTEX_RADIUS
    assert g.vertexAtPoint(0.5 + off, 0.5, 1.0, 1.0) == v
    # Wide canvas: a normalized x offset counts double on screen
    assert g.vertexAtPoint(0.5 + off * 0.5, 0.5, 0.5, 1.0) == v
    assert g.vertexAtPoint(0.5 + off, 0.5, 0.5, 1.0) is None
    assert g.vertexAtPoint(0.5, 0.5 + off, 1.0, 0.5) is None


def test_vertex_at_point_empty_graph():
    assert Graph().vertexAtPoint(0.5, 0.5, 1.0, 1.0) is None


# --------------------------
# Traversal
# --------------------------
def test_bfs_two_vertices():
    # Scenario A
    g = Graph()
    v1 = g.addVertex(0.1, 0.1)
    v2 = g.addVertex(0.5, 0.5)
    g.addEdge(v1, v2)
    g.bfs(v1)
    assert labels(g, [v1, v2]) == ["1", "2"]
    assert g.getVertex(v2).order == 2


def test_dfs_leaves_other_component_empty():
    # Scenario E
    g = Graph()
    v1 = g.addVertex(0.1, 0.1)
    v2 = g.addVertex(0.2, 0.2)
    v3 = g.addVertex(0.9, 0.9)
    g.addEdge(v1, v2)
    g.dfs(v1)
    assert labels(g, [v1, v2, v3]) == ["1", "2", ""]


def test_sample_graph_bfs_order():
    g = Graph.sampleGraph()
    refs = g.getVertices()
    g.bfs(refs[0])
    assert labels(g, refs) == ["1", "2", "3", "4", "5", "6", "7"]


def test_sample_graph_dfs_order():
    g = Graph.sampleGraph()
    refs = g.getVertices()
    g.dfs(refs[0])
    assert labels(g, refs) == ["1", "2", "6", "3", "4", "5", "7"]


def test_dfs_explores_deep_before_siblings():
    g = Graph()
    a, b, c, d = (g.addVertex(0.1 * i, 0.5) for i in range(1, 5))
    g.addEdge(a, b)
    g.addEdge(a, c)
    g.addEdge(b, d)
    g.dfs(a)
    assert labels(g, [a, b, c, d]) == ["1", "2", "4", "3"]
    g.clearLabels()
    g.bfs(a)
    assert labels(g, [a, b, c, d]) == ["1", "2", "3", "4"]


def test_neighbors_follow_edge_order_both_directions():
    g = Graph()
    a, b, c = (g.addVertex(0.1 * i, 0.5) for i in range(1, 4))
    g.addEdge(c, a)
    g.addEdge(a, b)
    g.addEdge(a, a)
    assert list(g.neighbors(a)) == [c, b, a]


def test_loops_and_parallel_edges_do_not_revisit():
    g = Graph()
    a = g.addVertex(0.1, 0.1)
    b = g.addVertex(0.2, 0.2)
    g.addEdge(a, a)
    g.addEdge(a, b)
    g.addEdge(b, a)
    g.bfs(a)
    assert labels(g, [a, b]) == ["1", "2"]
    g.clearLabels()
    g.dfs(b)
    assert labels(g, [a, b]) == ["2", "1"]


def test_traversal_does_not_clear_labels_itself():
    g = Graph()
    a = g.addVertex(0.1, 0.1)
    b = g.addVertex(0.9, 0.9)
    g.bfs(b)
    g.bfs(a)
    assert labels(g, [a, b]) == ["1", "1"]
    g.clearLabels()
    assert labels(g, [a, b]) == ["", ""]
    assert g.getVertex(a).order is None


@pytest.mark.parametrize("method", ["bfs", "dfs"])
def test_traversal_visits_reachable_closure(method):
    rng = random.Random(99)
    g = Graph()
    refs = [g.addVertex(rng.random(), rng.random()) for _ in range(30)]
    for _ in range(25):
        g.addEdge(rng.choice(refs), rng.choice(refs))
    start = refs[0]
    getattr(g, method)(start)
    closure = g.reachable(start)
    assert {r for r in refs if g.getLabel(r)} == closure
    numbers = sorted(int(g.getLabel(r)) for r in closure)
    assert numbers == list(range(1, len(closure) + 1))
    assert g.getLabel(start) == "1"


@pytest.mark.parametrize("method", ["bfs", "dfs"])
def test_traversal_from_absent_vertex_raises(method):
    g = Graph()
    v = g.addVertex(0.5, 0.5)
    g.remove(v)
    with pytest.raises(ValueError):
        getattr(g, method)(v)


def test_traversal_logs_summary(caplog):
    g = Graph.sampleGraph()
    with caplog.at_level("INFO", logger="graph"):
        g.bfs(g.vertexAt(0))
    assert "BFS" in caplog.text
    assert "7 vertex" in caplog.text


# --------------------------
# Names, fixture, stats
# --------------------------
def test_name_is_kept_apart_from_traversal_label():
    g = Graph()
    a = g.addVertex(0.5, 0.5)
    g.setName(a, "home")
    assert g.getVertex(a).displayText() == "home"
    g.bfs(a)
    assert g.getVertex(a).getName() == "home"
    assert g.getVertex(a).displayText() == "1"


def test_sample_graph_shape():
    g = Graph.sampleGraph()
    assert g.vertexCount() == len(SAMPLE_VERTICES) == 7
    assert g.edgeCount() == len(SAMPLE_EDGES) == 8
    for ref, (x, y) in zip(g.getVertices(), SAMPLE_VERTICES):
        assert g.getVertex(ref).getPosition() == (x, y)
        assert 0.0 <= x <= 1.0 and 0.0 <= y <= 1.0
    assert g.reachable(g.vertexAt(0)) == set(g.getVertices())
    assert g.validateInvariants()


def test_sample_graphs_are_independent():
    g1 = Graph.sampleGraph()
    g2 = Graph.sampleGraph()
    g1.remove(g1.vertexAt(0))
    assert g2.vertexCount() == 7


def test_stats():
    g = Graph.sampleGraph()
    g.dfs(g.vertexAt(3))
    assert g.get_stats() == {"vertices": 7, "edges": 8, "labelled": 7}


def test_handles_from_before_clear_stay_stale():
    g = Graph()
    old = g.addVertex(0.1, 0.1)
    g.clear()
    new = g.addVertex(0.9, 0.9)
    assert not g.contains(old)
    with pytest.raises(KeyError):
        g.getVertex(old)
    g.remove(old)
    assert g.getVertices() == (new,)
    with pytest.raises(ValueError):
        g.addEdge(old, new)
    with pytest.raises(ValueError):
        g.bfs(old)


def test_edge_other_endpoint():
    g = Graph()
    a = g.addVertex(0.1, 0.1)
    b = g.addVertex(0.2, 0.2)
    c = g.addVertex(0.3, 0.3)
    e = Edge(a, b)
    assert e.other(a) == b
    assert e.other(b) == a
    assert e.other(c) is None
    assert Edge(c, c).other(c) == c
