"""A weighted graph stored as adjacency lists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An edge to ``destination`` with ``weight``, optionally from ``source``."""

    destination: int
    weight: int
    source: int | None = None


class Graph:
    """A graph on vertices ``0..num_vertices-1``.

    Each vertex keeps its outgoing edges with the most recently added first.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"number of vertices must not be negative, got {num_vertices}")
        self._adjacency: list[list[Edge]] = [[] for _ in range(num_vertices)]

    @property
    def num_vertices(self) -> int:
        """The number of vertices in the graph."""
        return len(self._adjacency)

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._adjacency):
                raise IndexError("Invalid vertex index.")

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Add an undirected edge between ``source`` and ``target``."""
        self._check(source, target)
        self._adjacency[source].insert(0, Edge(target, weight))
        self._adjacency[target].insert(0, Edge(source, weight))

    def add_one_edge(self, source: int, target: int, weight: int) -> None:
        """Add a one-way edge held by ``target`` and leading to ``source``."""
        self._check(source, target)
        self._adjacency[target].insert(0, Edge(source, weight))

    def remove_edge(self, source: int, target: int) -> None:
        """Remove one edge each way between ``source`` and ``target``, if present."""
        self._check(source, target)
        self._remove_one(source, target)
        self._remove_one(target, source)

    def _remove_one(self, source: int, target: int) -> None:
        edges = self._adjacency[source]
        for index, edge in enumerate(edges):
            if edge.destination == target:
                del edges[index]
                return

    def has_edge(self, source: int, target: int) -> bool:
        """Return True if ``source`` has an edge leading to ``target``."""
        self._check(source)
        return any(edge.destination == target for edge in self._adjacency[source])

    def adjacent_vertices(self, vertex: int) -> list[int]:
        """Return the destinations of ``vertex``'s edges, newest first."""
        self._check(vertex)
        return [edge.destination for edge in self._adjacency[vertex]]

    def edge_weight(self, source: int, target: int) -> int | None:
        """Return the weight of the first edge from ``source`` to ``target``, or None."""
        self._check(source)
        return next(
            (edge.weight for edge in self._adjacency[source] if edge.destination == target),
            None,
        )

    def __str__(self) -> str:
        lines = []
        for vertex, edges in enumerate(self._adjacency):
            links = "".join(
                f"-> ({vertex}, {edge.destination}, {edge.weight})" for edge in edges
            )
            lines.append(f"Vertex {vertex}: {links}")
        return "\n".join(lines)