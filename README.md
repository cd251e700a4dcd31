# weightgraph

A small library for weighted graphs on a fixed number of integer-numbered
vertices, with breadth-first and depth-first search, Dijkstra's shortest
paths, and Kruskal's and Prim's minimum spanning trees.

Every algorithm takes a `Graph` and returns a new `Graph` holding the
resulting tree. The input graph is not changed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building a graph

```python
from weightgraph.graph import Graph

g = Graph(5)              # vertices 0..4
g.add_edge(0, 1, 10)      # undirected: stored in both directions
g.add_edge(0, 2, 15)
g.add_edge(1, 3, 20)
g.add_edge(2, 4, 25)
g.add_edge(3, 4, 30)

g.num_vertices            # 5
g.has_edge(1, 0)          # True
g.edge_weight(0, 2)       # 15
g.edge_weight(0, 4)       # None: no such edge
g.adjacent_vertices(0)    # [2, 1]: newest edge first

g.remove_edge(2, 4)       # removes one edge each way, if present
print(g)                  # "Vertex 0: -> (0, 2, 15)-> (0, 1, 10)" and so on
```

- `Graph(n)` with a negative `n` raises `ValueError`.
- A vertex outside `0 .. n-1` raises `IndexError` from `add_edge`,
  `add_one_edge`, `remove_edge`, `has_edge`, `adjacent_vertices` and
  `edge_weight`.
- `add_one_edge(source, target, weight)` stores a single edge, held by
  `target` and leading to `source`. The algorithms build their trees
  with it.
- `Edge` is the frozen record the adjacency lists hold: `destination`,
  `weight` and an optional `source`.

## Algorithms

```python
from weightgraph.algorithms import bfs, dfs, dijkstra, kruskal, prim

bfs_tree = bfs(g, 0)        # search tree from vertex 0
dfs_tree = dfs(g, 0)        # depth-first tree from vertex 0
spt = dijkstra(g, 0)        # shortest-path tree from vertex 0
mst_k = kruskal(g)          # minimum spanning forest, Kruskal
mst_p = prim(g)             # minimum spanning tree grown from vertex 0, Prim
```

What the result trees hold:

- `bfs`, `dfs` and `dijkstra`: one edge from each parent to its child,
  so `tree.has_edge(parent, child)` is true and `tree.has_edge(child,
  parent)` is not. `bfs` and `dfs` give every edge weight 1; `dijkstra`
  gives each edge the weight of the graph edge the child was reached by.
  `bfs` keeps its waiting vertices in a `PriorityQueue` with equal
  priorities, so vertices are expanded in the heap's order for ties.
- `kruskal`: each chosen edge `(u, v)` once, held by `v` and leading to
  `u`, with its weight. On a disconnected graph it gives a forest.
- `prim`: undirected edges with their weights. Vertices not reachable
  from vertex 0 are left out.

All algorithms raise `ValueError` for a graph with no vertices; those
that take a start vertex raise `IndexError` for one outside the graph.
`algorithms.INF` (1 000 000 000) is the distance used for vertices not
yet reached.

## Data structures

`weightgraph.structures` holds the building blocks:

- `PriorityQueue(capacity)`: a bounded binary min-heap of `(value,
  priority)` pairs with `enqueue`, `dequeue`, `decrease_key`,
  `is_empty`, `in` and `len`. Enqueuing into a full queue raises
  `QueueOverflowError`; dequeuing from an empty one raises
  `QueueUnderflowError`. `decrease_key` raises `ValueError` when the
  value is absent or the new priority is not lower.
- `Stack(capacity)`: a bounded stack with `push`, `pop`, `peek`,
  `is_empty` and `len`. Pushing onto a full stack raises
  `StackOverflowError` and leaves it unchanged; `pop` and `peek` on an
  empty stack raise `StackUnderflowError`.
- `UnionFind(size)`: disjoint sets over `0 .. size-1` with path
  compression and union by rank, through `find`, `union` and `len`.
  An element out of range raises `IndexError`.
- `Node(value, next=None)`: a singly linked list node; iterating over it
  yields the values from that node onwards.

A negative capacity or size raises `ValueError`.

```python
from weightgraph.structures import PriorityQueue, UnionFind

pq = PriorityQueue(5)
pq.enqueue(10, 2)
pq.enqueue(20, 1)
pq.dequeue()              # 20

uf = UnionFind(6)
uf.union(0, 1)
uf.find(0) == uf.find(1)  # True
```

## Demo

```
weightgraph-demo 2
```

builds a five-vertex sample graph (also available as
`weightgraph.cli.build_demo_graph()`) and prints it, then the BFS, DFS
and Dijkstra trees from the given start vertex (0 to 4), the Kruskal and
Prim trees, and finally the graph after the edge (2, 4) is removed.
Without a start vertex it asks for one on standard input until it gets a
number from 0 to 4; if input ends first it exits with status 1.

## What it does not do

Graphs live in memory only: there is no reading or writing of graphs
from files, and the demo always runs on its built-in sample graph.