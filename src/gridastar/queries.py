"""Ready-made :class:`~gridastar.core.types.PathfindingQuery` implementations."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, field
import math
from typing import Generic, TypeVar

from .core.path_node import PathNode
from .core.types import HeuristicFn, NeighborFn

State = TypeVar("State", bound=Hashable)
Point = tuple[int, int]


class FunctionQuery(Generic[State]):
    """Build a query out of a source state and two plain functions."""

    def __init__(
        self, source: State, neighbors: NeighborFn[State], heuristic: HeuristicFn[State]
    ) -> None:
        self._source = source
        self.neighbors = neighbors
        self.heuristic = heuristic

    def source(self) -> State:
        return self._source

    def adjacent_states(self, node: PathNode[State]) -> Iterable[tuple[State, float]]:
        return self.neighbors(node.state)

    def estimate_cost_to_destination(self, state: State) -> float:
        return float(self.heuristic(state))


class GraphQuery(Generic[State]):
    """Query over an explicit adjacency mapping ``state -> [(state, cost), ...]``.

    ``heuristic`` is either a function or a mapping of estimates. A mapping has
    to cover every state reachable from ``source``.
    """

    def __init__(
        self,
        graph: Mapping[State, Iterable[tuple[State, float]]],
        source: State,
        heuristic: HeuristicFn[State] | Mapping[State, float],
    ) -> None:
        self.graph = graph
        self._source = source
        if isinstance(heuristic, Mapping):
            self._heuristic: Callable[[State], float] = heuristic.__getitem__
        else:
            self._heuristic = heuristic

    def source(self) -> State:
        return self._source

    def adjacent_states(self, node: PathNode[State]) -> Iterable[tuple[State, float]]:
        return self.graph.get(node.state, ())

    def estimate_cost_to_destination(self, state: State) -> float:
        return float(self._heuristic(state))


@dataclass
class Grid:
    width: int
    height: int
    walls: set[Point] = field(default_factory=set)
    step: float = 1.0

    def in_bounds(self, p: Point) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def passable(self, p: Point) -> bool:
        return p not in self.walls

    def neighbors4(self, p: Point) -> Iterable[tuple[Point, float]]:
        x, y = p
        for dx, dy in [(1, 0), (-1, 0), (0, 1), (0, -1)]:
            q = (x + dx, y + dy)
            if self.in_bounds(q) and self.passable(q):
                yield q, self.step

    def neighbors8(self, p: Point) -> Iterable[tuple[Point, float]]:
        x, y = p
        for dx, dy in [(1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (1, -1), (-1, 1), (-1, -1)]:
            q = (x + dx, y + dy)
            if self.in_bounds(q) and self.passable(q):
                yield q, (self.step if dx == 0 or dy == 0 else math.sqrt(2) * self.step)

    def manhattan(self, goal: Point) -> HeuristicFn[Point]:
        def h(p: Point) -> float:
            return (abs(p[0] - goal[0]) + abs(p[1] - goal[1])) * self.step

        return h

    def octile(self, goal: Point) -> HeuristicFn[Point]:
        def h(p: Point) -> float:
            dx = abs(p[0] - goal[0])
            dy = abs(p[1] - goal[1])
            dmin, dmax = (dx if dx < dy else dy), (dx if dx >= dy else dy)
            return ((dmax - dmin) + math.sqrt(2) * dmin) * self.step

        return h


class GridQuery:
    """Shortest route between two cells of a :class:`Grid`.

    With ``diagonal`` set, moves go to all 8 neighbours and the octile distance
    is used as the estimate; otherwise 4 neighbours and the manhattan distance.
    """

    def __init__(self, grid: Grid, source: Point, destination: Point, diagonal: bool = False):
        if not grid.in_bounds(source) or not grid.in_bounds(destination):
            raise ValueError("source and destination must lie inside the grid")
        self.grid = grid
        self._source = source
        self.destination = destination
        self.diagonal = diagonal
        self._h = grid.octile(destination) if diagonal else grid.manhattan(destination)

    def source(self) -> Point:
        return self._source

    def adjacent_states(self, node: PathNode[Point]) -> Iterable[tuple[Point, float]]:
        if self.diagonal:
            return self.grid.neighbors8(node.state)
        return self.grid.neighbors4(node.state)

    def estimate_cost_to_destination(self, state: Point) -> float:
        return self._h(state)
