"""Breadth-first traversal, Dijkstra's shortest paths and cycle detection."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Sequence

UNREACHABLE = 2**31 - 1

EXAMPLE_GRAPH = (
    (0, 4, 0, 0, 0, 0, 0, 8, 0),
    (4, 0, 8, 0, 0, 0, 0, 11, 0),
    (0, 8, 0, 7, 0, 4, 0, 0, 2),
    (0, 0, 7, 0, 9, 14, 0, 0, 0),
    (0, 0, 0, 9, 0, 10, 0, 0, 0),
    (0, 0, 4, 14, 10, 0, 2, 0, 0),
    (0, 0, 0, 0, 0, 2, 0, 1, 6),
    (8, 11, 0, 0, 0, 0, 1, 0, 7),
    (0, 0, 2, 0, 0, 0, 6, 7, 0),
)


def build_adjacency(size: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build undirected adjacency lists for vertices ``0 .. size-1``."""
    adj: list[list[int]] = [[] for _ in range(size)]
    for x, y in edges:
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"edge ({x}, {y}) has a vertex outside 0..{size - 1}")
        adj[x].append(y)
        adj[y].append(x)
    return adj


def bfs(size: int, adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the breadth-first visiting order of every component."""
    visited = [False] * size
    order: list[int] = []
    for start in range(size):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in adj[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
    return order


def dijkstra(graph: Sequence[Sequence[int]], src: int) -> list[int]:
    """Shortest distances from ``src`` over an adjacency matrix.

    A zero entry means no edge. Unreachable vertices get ``UNREACHABLE``.
    """
    n = len(graph)
    if not 0 <= src < n:
        raise ValueError(f"source vertex {src} outside 0..{n - 1}")
    dist = [UNREACHABLE] * n
    done = [False] * n
    dist[src] = 0
    for _ in range(n - 1):
        # Ties go to the highest-numbered vertex.
        u = min((v for v in range(n) if not done[v]), key=lambda v: (dist[v], -v))
        done[u] = True
        if dist[u] == UNREACHABLE:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def format_distances(dist: Sequence[int]) -> str:
    """Render a distance table with one line per vertex."""
    lines = ["Vertex \t Distance from Source"]
    lines.extend(f"{vertex} \t\t\t\t{d}" for vertex, d in enumerate(dist))
    return "\n".join(lines) + "\n"


def has_cycle(vertex_count: int, adj: Sequence[Sequence[int]]) -> bool:
    """Tell whether an undirected graph holds a cycle."""
    visited = [False] * (vertex_count + 1)
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adj[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def _read_bfs_input(text: str) -> tuple[int, list[tuple[int, int]]]:
    try:
        numbers = [int(token) for token in text.split()]
        size, edge_count = numbers[0], numbers[1]
    except (ValueError, IndexError) as exc:
        raise ValueError("expected vertex count, edge count and edges") from exc
    flat = numbers[2 : 2 + 2 * edge_count]
    if len(flat) < 2 * edge_count:
        raise ValueError("fewer edges than announced")
    return size, list(zip(flat[::2], flat[1::2]))


def main(argv: list[str] | None = None) -> int:
    """Run a breadth-first traversal read from stdin, or the Dijkstra example."""
    parser = argparse.ArgumentParser(description="Graph algorithms.")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("bfs", "dijkstra"),
        default="dijkstra",
        help="bfs reads 'size edges x y ...' from stdin",
    )
    args = parser.parse_args(argv)
    if args.command == "bfs":
        try:
            size, edges = _read_bfs_input(sys.stdin.read())
            order = bfs(size, build_adjacency(size, edges))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
        print("".join(f"{vertex} " for vertex in order))
    else:
        sys.stdout.write(format_distances(dijkstra(EXAMPLE_GRAPH, 0)))
    return 0