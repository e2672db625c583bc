import io

import pytest

from algocollection.graphs import (
    EXAMPLE_GRAPH,
    UNREACHABLE,
    bfs,
    build_adjacency,
    dijkstra,
    format_distances,
    has_cycle,
    main,
)


def test_build_adjacency_is_symmetric():
    adj = build_adjacency(3, [(0, 1), (1, 2)])
    for u, neighbours in enumerate(adj):
        for v in neighbours:
            assert u in adj[v]


def test_build_adjacency_rejects_out_of_range():
    with pytest.raises(ValueError):
        build_adjacency(2, [(0, 2)])


def test_bfs_visits_every_vertex_once():
    size = 6
    order = bfs(size, build_adjacency(size, [(0, 3), (3, 4), (1, 5)]))
    assert sorted(order) == list(range(size))
    assert order[0] == 0


def test_bfs_path_graph_order():
    assert bfs(3, build_adjacency(3, [(0, 1), (1, 2)])) == [0, 1, 2]


def test_bfs_neighbours_before_their_children():
    adj = build_adjacency(5, [(0, 4), (0, 1), (4, 2), (1, 3)])
    order = bfs(5, adj)
    assert order.index(4) < order.index(2)
    assert order.index(1) < order.index(2)
    assert order.index(1) < order.index(3)


def test_bfs_empty_graph():
    assert bfs(0, []) == []


def test_dijkstra_example_graph():
    assert dijkstra(EXAMPLE_GRAPH, 0) == [0, 4, 12, 19, 21, 11, 9, 8, 14]


def test_dijkstra_respects_triangle_inequality():
    dist = dijkstra(EXAMPLE_GRAPH, 3)
    assert dist[3] == 0
    for u, row in enumerate(EXAMPLE_GRAPH):
        for v, weight in enumerate(row):
            if weight:
                assert dist[v] <= dist[u] + weight


def test_dijkstra_symmetric_graph_distances_agree():
    assert dijkstra(EXAMPLE_GRAPH, 0)[4] == dijkstra(EXAMPLE_GRAPH, 4)[0]


def test_dijkstra_unreachable_vertex():
    graph = [[0, 5, 0], [5, 0, 0], [0, 0, 0]]
    dist = dijkstra(graph, 0)
    assert dist[2] == UNREACHABLE
    assert dist[1] == 5


def test_dijkstra_bad_source():
    with pytest.raises(ValueError):
        dijkstra(EXAMPLE_GRAPH, 9)


def test_format_distances():
    dist = dijkstra(EXAMPLE_GRAPH, 0)
    lines = format_distances(dist).splitlines()
    assert lines[0] == "Vertex \t Distance from Source"
    assert len(lines) == len(dist) + 1
    assert lines[2] == f"1 \t\t\t\t{dist[1]}"


def test_has_cycle_triangle():
    assert has_cycle(3, build_adjacency(3, [(0, 1), (1, 2), (2, 0)]))


def test_has_cycle_tree():
    assert not has_cycle(4, build_adjacency(4, [(0, 1), (1, 2), (1, 3)]))


def test_has_cycle_in_second_component():
    adj = build_adjacency(6, [(0, 1), (2, 3), (3, 4), (4, 5), (5, 3)])
    assert has_cycle(6, adj)


def test_has_cycle_self_loop():
    assert has_cycle(2, [[0], []])


def test_has_cycle_no_edges():
    assert not has_cycle(3, build_adjacency(3, []))


def test_main_dijkstra(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == format_distances(dijkstra(EXAMPLE_GRAPH, 0))


def test_main_bfs_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n1 2\n"))
    assert main(["bfs"]) == 0
    out = capsys.readouterr().out.split()
    assert out == [str(v) for v in bfs(3, build_adjacency(3, [(0, 1), (1, 2)]))]


def test_main_bfs_bad_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n"))
    assert main(["bfs"]) == 1