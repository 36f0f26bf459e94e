"""Minimum spanning tree and shortest path exercises."""

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable

Edge = tuple[int, int, int]


def _check_vertex(vertex: int, low: int, high: int) -> None:
    if not low <= vertex <= high:
        raise ValueError(f"vertex {vertex} outside {low}..{high}")


def prim_mst_cost(node_count: int, edges: Iterable[Edge], start: int) -> int:
    """Return the weight of the minimum spanning tree grown from start.

    Nodes are numbered 0..node_count-1 and edges are undirected.
    """
    _check_vertex(start, 0, node_count - 1)
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, weight in edges:
        _check_vertex(u, 0, node_count - 1)
        _check_vertex(v, 0, node_count - 1)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    visited: set[int] = set()
    total = 0
    heap = [(0, start)]
    while heap:
        cost, node = heapq.heappop(heap)
        if node in visited:
            continue
        visited.add(node)
        total += cost
        if len(visited) == node_count:
            break
        for neighbour, weight in adjacency[node]:
            if neighbour not in visited:
                heapq.heappush(heap, (weight, neighbour))
    return total


def max_savings(node_count: int, edges: Iterable[Edge]) -> int:
    """Return how much of the total edge weight a spanning tree from node 0 saves."""
    edge_list = list(edges)
    total = sum(weight for _, _, weight in edge_list)
    return total - prim_mst_cost(node_count, edge_list, 0)


def dijkstra(
    vertex_count: int, edges: Iterable[Edge], start: int
) -> dict[int, float]:
    """Return shortest distances from start to vertices 1..vertex_count.

    Edges are directed; unreachable vertices map to math.inf.
    """
    _check_vertex(start, 1, vertex_count)
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, weight in edges:
        _check_vertex(u, 1, vertex_count)
        _check_vertex(v, 1, vertex_count)
        adjacency[u].append((v, weight))

    distance: dict[int, float] = dict.fromkeys(range(1, vertex_count + 1), math.inf)
    distance[start] = 0
    heap = [(0, start)]
    while heap:
        cost, node = heapq.heappop(heap)
        if distance[node] < cost:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = cost + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance