"""Weighted graphs with adjacency lists and classic traversals over them."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Callable, Iterator
from typing import TextIO

from algokit.priority_queue import PriorityQueue


class Graph:
    """A graph on nodes numbered 1..dim; each arc carries a weight."""

    def __init__(self, dim: int) -> None:
        if dim < 0:
            raise ValueError(f"node count must be non-negative, got {dim}")
        self.dim = dim
        self._adjacency: list[list[tuple[int, float]]] = [[] for _ in range(dim)]

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.dim:
            raise IndexError(f"node {node} outside 1..{self.dim}")

    def add_arc(self, src: int, dest: int, weight: float = 1.0) -> None:
        """Add a directed arc from ``src`` to ``dest``."""
        self._check(src)
        self._check(dest)
        self._adjacency[src - 1].append((dest, weight))

    def add_edge(self, src: int, dest: int, weight: float = 1.0) -> None:
        """Add an undirected edge as a pair of opposite arcs."""
        self.add_arc(src, dest, weight)
        self.add_arc(dest, src, weight)

    def neighbors(self, node: int) -> Iterator[tuple[int, float]]:
        """Yield ``(node, weight)`` pairs, the most recently added arc first."""
        self._check(node)
        return reversed(self._adjacency[node - 1])


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def build_graph(stream: TextIO, directed: bool, weighted: bool) -> Graph:
    """Read a node count, then ``src dest [weight]`` groups until the input ends
    or stops parsing. Unweighted arcs weigh 1."""
    tokens = _tokens(stream)
    try:
        dim = int(next(tokens))
    except (StopIteration, ValueError) as error:
        raise ValueError("the input does not start with a node count") from error
    graph = Graph(dim)
    connect = graph.add_arc if directed else graph.add_edge
    while True:
        try:
            src = int(next(tokens))
            dest = int(next(tokens))
            weight = float(next(tokens)) if weighted else 1.0
        except (StopIteration, ValueError):
            break
        connect(src, dest, weight)
    return graph


def _bfs(graph: Graph, src: int) -> dict[int, int | None]:
    parents: dict[int, int | None] = {src: None}
    pending = deque([src])
    while pending:
        node = pending.popleft()
        for neighbor, _ in graph.neighbors(node):
            if neighbor not in parents:
                parents[neighbor] = node
                pending.append(neighbor)
    return parents


def reachable(graph: Graph, src: int) -> set[int]:
    """The nodes reached by a breadth-first visit from ``src``."""
    return set(_bfs(graph, src))


def is_connected(graph: Graph) -> bool:
    """True when every node is reached from node 1."""
    return graph.dim == 0 or len(reachable(graph, 1)) == graph.dim


def connected_components(graph: Graph) -> list[list[int]]:
    """Components of an undirected graph, each sorted, in order of their smallest node."""
    seen: set[int] = set()
    components: list[list[int]] = []
    for node in range(1, graph.dim + 1):
        if node in seen:
            continue
        component = sorted(reachable(graph, node))
        components.append(component)
        seen.update(component)
    return components


def spanning_tree(graph: Graph, src: int) -> dict[int, int]:
    """Breadth-first spanning tree rooted in ``src`` as ``{node: parent}``.

    Raises ValueError when some node is not reached from ``src``.
    """
    parents = _bfs(graph, src)
    if len(parents) != graph.dim:
        raise ValueError(f"not every node is reachable from {src}")
    return {node: parent for node, parent in sorted(parents.items()) if parent is not None}


_Relax = Callable[[int, int, float, dict[int, float], dict[int, int]], None]


def _dijkstra_relax(
    u: int, v: int, weight: float, dist: dict[int, float], parents: dict[int, int]
) -> None:
    if dist[v] > dist[u] + weight:
        dist[v] = dist[u] + weight
        parents[v] = u


def _prim_relax(
    u: int, v: int, weight: float, cost: dict[int, float], parents: dict[int, int]
) -> None:
    if cost[v] > weight:
        cost[v] = weight
        parents[v] = u


def _grow_tree(graph: Graph, src: int, relax: _Relax) -> dict[int, int]:
    graph._check(src)
    dist = {node: math.inf for node in range(1, graph.dim + 1)}
    dist[src] = 0.0
    parents: dict[int, int] = {}
    in_tree = {src}

    queue = PriorityQueue()
    for node, distance in dist.items():
        queue.enqueue(node, distance)

    while queue:
        u = queue.dequeue()
        in_tree.add(u)
        for v, weight in graph.neighbors(u):
            if v not in in_tree:
                relax(u, v, weight, dist, parents)
                queue.decrease_priority(v, dist[v])
    return dict(sorted(parents.items()))


def dijkstra(graph: Graph, src: int) -> dict[int, int]:
    """Shortest-path tree rooted in ``src`` as ``{node: parent}``."""
    return _grow_tree(graph, src, _dijkstra_relax)


def prim(graph: Graph, src: int) -> dict[int, int]:
    """Minimum spanning tree rooted in ``src`` as ``{node: parent}``."""
    return _grow_tree(graph, src, _prim_relax)


def format_adjacency(graph: Graph) -> str:
    """One line per node: ``n: (m, w) -> ... NULL``."""
    return "".join(
        f"{node}: "
        + "".join(f"({dest}, {weight:g}) -> " for dest, weight in graph.neighbors(node))
        + "NULL\n"
        for node in range(1, graph.dim + 1)
    )


def format_parents(parents: dict[int, int]) -> str:
    """One line per node that has a parent, in node order."""
    return "".join(
        f"Il padre del nodo {node} e' il nodo {parent}\n"
        for node, parent in sorted(parents.items())
    )