from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
import heapq
import logging
import time
from typing import Generic, TypeVar

from .core.path_node import PathNode
from .core.types import PathfindingQuery, VisitCallback
from .logging import get_logger as _get_logger

State = TypeVar("State", bound=Hashable)


class OpenList:
    """Binary heap over arena indices with lazy decrease-key.

    Keys are ``(estimated_total_cost, index)`` so that equal totals resolve to
    the node discovered first. A lowered key pushes a fresh entry; the stale one
    is dropped when it surfaces.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int]] = []
        self._best_key: dict[int, float] = {}

    def push(self, index: int, f: float) -> None:
        best = self._best_key.get(index)
        if best is None or f < best:
            self._best_key[index] = f
            heapq.heappush(self._heap, (f, index))

    def pop(self) -> int | None:
        while self._heap:
            f, index = heapq.heappop(self._heap)
            if self._best_key.get(index) == f:
                del self._best_key[index]
                return index
        return None

    def empty(self) -> bool:
        return not self._best_key

    def clear(self) -> None:
        self._heap.clear()
        self._best_key.clear()

    def __contains__(self, index: int) -> bool:
        return index in self._best_key

    def __len__(self) -> int:
        return len(self._best_key)


@dataclass
class SearchStats:
    expansions: int = 0
    generated: int = 0
    visited: int = 0
    relaxations: int = 0
    nodes: int = 0
    path_cost: float | None = None
    runtime_ms: float = 0.0


@dataclass
class PathfinderParams:
    log_every: int | None = None
    on_visit: VisitCallback | None = None


class Pathfinder(Generic[State]):
    """A* over a lazily expanded graph described by a :class:`PathfindingQuery`.

    The destination is whichever state the query estimates at exactly ``0``.
    Closed nodes are never reopened, so the path is optimal as long as the
    query's estimate never overestimates.

    One instance can serve any number of sequential searches; its node arena
    and open list are emptied after each one. Overlapping calls on the same
    instance are not supported.
    """

    def __init__(
        self,
        *,
        params: PathfinderParams | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        cfg = params or PathfinderParams()
        self.log_every = cfg.log_every
        self.on_visit = cfg.on_visit
        self.logger = logger or _get_logger(__name__)
        self.last_stats = SearchStats()
        self._arena: list[PathNode[State]] = []
        self._index: dict[State, int] = {}
        self._open = OpenList()

    def find(self, query: PathfindingQuery[State]) -> list[State]:
        """Return the states from source to destination, or ``[]`` if unreachable."""
        path: list[State] = []
        self.find_into(query, path)
        return path

    def find_into(self, query: PathfindingQuery[State], path: list[State]) -> bool:
        """Append the path to ``path``; return whether one was found."""
        self.last_stats = stats = SearchStats()
        t0 = time.perf_counter()
        try:
            goal = self._search(query)
            if goal is None:
                self.logger.info(
                    "no path found after %(exp)d expansions", {"exp": stats.expansions}
                )
                return False
            start = len(path)
            path.extend(self._reconstruct(goal))
            stats.path_cost = goal.cost_from_source
            self.logger.info(
                "path found: cost=%(cost)s, length=%(len)d, expansions=%(exp)d",
                {"cost": goal.cost_from_source, "len": len(path) - start, "exp": stats.expansions},
            )
            return True
        finally:
            stats.nodes = len(self._arena)
            stats.runtime_ms = (time.perf_counter() - t0) * 1000.0
            self._clear()

    def node(self, index: int) -> PathNode[State]:
        """Node at ``index`` of the running search's arena (e.g. a ``previous_index``)."""
        return self._arena[index]

    def path_cost(self, query: PathfindingQuery[State], path: list[State]) -> float:
        """Sum the movement costs along ``path`` as reported by ``query``."""
        total = 0.0
        for i in range(1, len(path)):
            node = PathNode(path[i - 1], i - 1, None, total, 0.0)
            costs = [c for s, c in query.adjacent_states(node) if s == path[i]]
            if not costs:
                raise ValueError(f"{path[i]!r} is not adjacent to {path[i - 1]!r}")
            total += float(min(costs))
        return total

    def _search(self, query: PathfindingQuery[State]) -> PathNode[State] | None:
        source = query.source()
        h0 = float(query.estimate_cost_to_destination(source))
        if h0 == 0:
            node = self._allocate(source, None, 0.0, h0)
            self._visit(node)
            return node

        source_node = self._allocate(source, None, 0.0, h0)
        source_node.close()
        self._expand(query, source_node)

        while True:
            index = self._open.pop()
            if index is None:
                return None
            node = self._arena[index]
            self._visit(node)
            if node.estimated_cost_to_destination == 0:
                return node
            node.close()
            self._expand(query, node)

    def _visit(self, node: PathNode[State]) -> None:
        self.last_stats.visited += 1
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "visiting %r (g=%s, f=%s)",
                node.state,
                node.cost_from_source,
                node.estimated_total_cost,
            )
        if self.on_visit is not None:
            self.on_visit(node)

    def _expand(self, query: PathfindingQuery[State], node: PathNode[State]) -> None:
        stats = self.last_stats
        stats.expansions += 1
        if self.log_every and (stats.expansions % self.log_every == 0):
            self.logger.info(
                "expansions=%(exp)d, generated=%(gen)d, open=%(open)d",
                {"exp": stats.expansions, "gen": stats.generated, "open": len(self._open)},
            )
        g = node.cost_from_source
        for state, cost in query.adjacent_states(node):
            stats.generated += 1
            cost = float(cost)
            if cost < 0:
                raise ValueError(f"negative movement cost {cost} to {state!r}")
            new_g = g + cost
            index = self._index.get(state)
            if index is None:
                h = float(query.estimate_cost_to_destination(state))
                adjacent = self._allocate(state, node.index, new_g, h)
                self._open.push(adjacent.index, adjacent.estimated_total_cost)
                continue
            adjacent = self._arena[index]
            if adjacent.is_open and new_g < adjacent.cost_from_source:
                adjacent.update_previous_node(node.index, new_g)
                self._open.push(index, adjacent.estimated_total_cost)
                stats.relaxations += 1

    def _allocate(
        self, state: State, previous_index: int | None, g: float, h: float
    ) -> PathNode[State]:
        node = PathNode(state, len(self._arena), previous_index, g, h)
        self._arena.append(node)
        self._index[state] = node.index
        return node

    def _reconstruct(self, goal: PathNode[State]) -> list[State]:
        path = []
        cur: int | None = goal.index
        while cur is not None:
            node = self._arena[cur]
            path.append(node.state)
            cur = node.previous_index
        path.reverse()
        return path

    def _clear(self) -> None:
        self._open.clear()
        self._arena.clear()
        self._index.clear()
