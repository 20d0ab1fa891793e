from collections.abc import Callable, Hashable, Iterable
import heapq
import itertools
import math
import random


def dijkstra(
    source: Hashable,
    neighbors: Callable[[Hashable], Iterable[tuple[Hashable, float]]],
) -> dict[Hashable, float]:
    """Exact distances from ``source`` to everything reachable."""
    dist = {source: 0.0}
    tie = itertools.count()
    heap = [(0.0, next(tie), source)]
    while heap:
        d, _, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, c in neighbors(u):
            nd = d + c
            if nd < dist.get(v, math.inf):
                dist[v] = nd
                heapq.heappush(heap, (nd, next(tie), v))
    return dist


def random_graph(n: int, edges: int, seed: int) -> dict[int, list[tuple[int, float]]]:
    rng = random.Random(seed)
    graph: dict[int, list[tuple[int, float]]] = {i: [] for i in range(n)}
    for _ in range(edges):
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            graph[u].append((v, float(rng.randint(1, 10))))
    return graph


def reverse(graph: dict[int, list[tuple[int, float]]]) -> dict[int, list[tuple[int, float]]]:
    rev: dict[int, list[tuple[int, float]]] = {u: [] for u in graph}
    for u, edges in graph.items():
        for v, c in edges:
            rev[v].append((u, c))
    return rev


def scaled_true_heuristic(
    graph: dict[int, list[tuple[int, float]]], goal: int, scale: float = 0.5
) -> dict[int, float]:
    """Admissible estimates that are zero only at ``goal``."""
    rev = reverse(graph)
    to_goal = dijkstra(goal, lambda s: rev[s])
    return {s: (to_goal[s] * scale if s in to_goal else 1.0) for s in graph}
