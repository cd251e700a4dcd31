"""Run every graph algorithm on a small demonstration graph."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import algorithms
from .graph import Graph

_VERTICES = 5
_PROMPT = f"choose starting vertex from 0-{_VERTICES - 1}"


def build_demo_graph() -> Graph:
    """Return the five-vertex weighted graph the demonstration runs on."""
    g = Graph(_VERTICES)
    g.add_edge(0, 1, 10)
    g.add_edge(0, 2, 15)
    g.add_edge(1, 3, 20)
    g.add_edge(2, 4, 25)
    g.add_edge(3, 4, 30)
    return g


def _ask_start() -> int:
    while True:
        print(_PROMPT)
        try:
            answer = input()
        except EOFError:
            raise
        try:
            start = int(answer.strip())
        except ValueError:
            continue
        if 0 <= start < _VERTICES:
            return start


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration; the start vertex is asked for when not given."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "start",
        nargs="?",
        type=int,
        choices=range(_VERTICES),
        help="starting vertex for BFS, DFS and Dijkstra",
    )
    args = parser.parse_args(argv)

    start = args.start
    if start is None:
        try:
            start = _ask_start()
        except EOFError:
            print("no starting vertex given", file=sys.stderr)
            return 1

    g = build_demo_graph()
    print("Graph adjacency list:")
    print(g)

    print(f"\nRunning BFS from vertex {start}:")
    print(algorithms.bfs(g, start))

    print(f"\nRunning DFS from vertex {start}:")
    print(algorithms.dfs(g, start))

    print(f"\nRunning Dijkstra's algorithm from vertex {start}:")
    print(algorithms.dijkstra(g, start))

    print("\nRunning Kruskal's algorithm for MST:")
    print(algorithms.kruskal(g))

    print("\nRunning Prim's algorithm for MST:")
    print(algorithms.prim(g))

    g.remove_edge(2, 4)
    print("\nAfter removing edge (2, 4):")
    print(g)
    return 0


if __name__ == "__main__":
    sys.exit(main())