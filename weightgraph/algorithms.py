"""Traversals, shortest paths and spanning trees over :class:`Graph`.

Every function returns a new graph on the same vertices.  Tree results keep
their edges one-way, held by the parent and leading to the child, except
:func:`prim`, whose tree edges go both ways.
"""

from __future__ import annotations

import heapq
from collections.abc import Callable, Sequence
from operator import itemgetter

from .graph import Graph
from .structures import PriorityQueue, UnionFind

INF = 1_000_000_000
"""Distance used for vertices not yet reached."""


def _require_vertices(graph: Graph) -> int:
    count = graph.num_vertices
    if count == 0:
        raise ValueError("Graph has no vertices.")
    return count


def _require_start(graph: Graph, start: int) -> int:
    count = _require_vertices(graph)
    if not 0 <= start < count:
        raise IndexError("Invalid start vertex.")
    return count


def _weight(graph: Graph, source: int, target: int) -> int:
    weight = graph.edge_weight(source, target)
    if weight is None:
        raise LookupError(f"no edge from {source} to {target}")
    return weight


def _tree(
    count: int,
    parents: Sequence[int | None],
    weight_of: Callable[[int, int], int],
) -> Graph:
    tree = Graph(count)
    for child, parent in enumerate(parents):
        if parent is not None:
            tree.add_one_edge(child, parent, weight_of(child, parent))
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the shortest path tree rooted at ``start``.

    Each tree edge carries the weight of the graph edge it was reached by.
    """
    count = _require_start(graph, start)
    dist = [INF] * count
    visited = [False] * count
    parents: list[int | None] = [None] * count
    dist[start] = 0
    heap = [(0, start)]

    while heap:
        _, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        for v in graph.adjacent_vertices(u):
            candidate = dist[u] + _weight(graph, u, v)
            if not visited[v] and candidate < dist[v]:
                dist[v] = candidate
                parents[v] = u
                heapq.heappush(heap, (candidate, v))

    return _tree(count, parents, lambda child, parent: dist[child] - dist[parent])


def bfs(graph: Graph, start: int) -> Graph:
    """Return the search tree found from ``start``; every tree edge weighs 1.

    Vertices wait in a priority queue with equal priorities, so the order in
    which they are expanded is the heap's order for ties.
    """
    count = _require_start(graph, start)
    visited = [False] * count
    parents: list[int | None] = [None] * count
    queue = PriorityQueue(count)
    queue.enqueue(start, 0)
    visited[start] = True

    while not queue.is_empty():
        current = queue.dequeue()
        for neighbour in graph.adjacent_vertices(current):
            if not visited[neighbour]:
                visited[neighbour] = True
                parents[neighbour] = current
                queue.enqueue(neighbour, 0)

    return _tree(count, parents, lambda child, parent: 1)


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first search tree from ``start``; every tree edge weighs 1."""
    count = _require_start(graph, start)
    visited = [False] * count
    parents: list[int | None] = [None] * count
    stack = [start]
    visited[start] = True

    while stack:
        current = stack.pop()
        for neighbour in graph.adjacent_vertices(current):
            if not visited[neighbour]:
                visited[neighbour] = True
                parents[neighbour] = current
                stack.append(neighbour)

    return _tree(count, parents, lambda child, parent: 1)


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest built by Kruskal's algorithm.

    Each chosen edge ``(u, v)`` appears once, held by ``v`` and leading to ``u``.
    """
    count = _require_vertices(graph)
    edges = [
        (u, v, _weight(graph, u, v))
        for u in range(count)
        for v in graph.adjacent_vertices(u)
    ]
    # Ties keep the reverse of the order in which the edges were collected.
    ordered = sorted(reversed(edges), key=itemgetter(2))

    sets = UnionFind(count)
    mst = Graph(count)
    for u, v, weight in ordered:
        if sets.find(u) != sets.find(v):
            mst.add_one_edge(u, v, weight)
            sets.union(u, v)
    return mst


def prim(graph: Graph) -> Graph:
    """Return the minimum spanning tree grown from vertex 0 by Prim's algorithm.

    The tree's edges are undirected.
    """
    count = _require_vertices(graph)
    in_tree = [False] * count
    key = [INF] * count
    parents: list[int | None] = [None] * count
    queue = PriorityQueue(count)
    key[0] = 0
    queue.enqueue(0, 0)

    while not queue.is_empty():
        u = queue.dequeue()
        in_tree[u] = True
        for v in graph.adjacent_vertices(u):
            weight = _weight(graph, u, v)
            if not in_tree[v] and weight < key[v]:
                key[v] = weight
                parents[v] = u
                if v in queue:
                    queue.decrease_key(v, weight)
                else:
                    queue.enqueue(v, weight)

    mst = Graph(count)
    for child in range(1, count):
        parent = parents[child]
        if parent is not None:
            mst.add_edge(child, parent, _weight(graph, child, parent))
    return mst