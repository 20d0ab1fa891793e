from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import math
import random
from typing import Any

from .core.types import PathfindingQuery
from .queries import FunctionQuery, Grid, GridQuery, Point


@dataclass
class Scenario:
    name: str
    query: PathfindingQuery[Any]
    meta: dict[str, Any]


def make_grid_obstacles(width: int, height: int, density: float, seed: int = 0) -> Grid:
    rng = random.Random(seed)
    walls = set()
    for x in range(width):
        for y in range(height):
            if rng.random() < density:
                walls.add((x, y))
    for p in [(0, 0), (width - 1, height - 1)]:
        walls.discard(p)
    return Grid(width, height, walls=walls)


def generate_maze(width: int, height: int, seed: int = 0) -> Grid:
    """Carve a perfect maze by randomized depth-first search from ``(0, 0)``."""
    rng = random.Random(seed)
    walls = {(x, y) for x in range(width) for y in range(height)}
    start = (0, 0)
    stack = [start]
    visited = {start}
    walls.remove(start)

    def cells_two_away(x: int, y: int) -> Iterable[tuple[Point, Point]]:
        dirs = [(2, 0), (-2, 0), (0, 2), (0, -2)]
        rng.shuffle(dirs)
        for dx, dy in dirs:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                yield (nx, ny), (x + dx // 2, y + dy // 2)

    while stack:
        cx, cy = stack[-1]
        for cell, between in cells_two_away(cx, cy):
            if cell not in visited:
                visited.add(cell)
                stack.append(cell)
                walls.discard(between)
                walls.discard(cell)
                break
        else:
            stack.pop()
    walls.discard((width - 1, height - 1))
    return Grid(width, height, walls=walls)


def scenario_grid_4(width: int, height: int, density: float, seed: int = 0) -> Scenario:
    grid = make_grid_obstacles(width, height, density, seed)
    return Scenario(
        name=f"grid4_{width}x{height}_d{density}_s{seed}",
        query=GridQuery(grid, (0, 0), (width - 1, height - 1)),
        meta={"kind": "grid4", "density": density, "seed": seed},
    )


def scenario_grid_8(width: int, height: int, density: float, seed: int = 0) -> Scenario:
    grid = make_grid_obstacles(width, height, density, seed)
    return Scenario(
        name=f"grid8_{width}x{height}_d{density}_s{seed}",
        query=GridQuery(grid, (0, 0), (width - 1, height - 1), diagonal=True),
        meta={"kind": "grid8", "density": density, "seed": seed},
    )


def scenario_maze4(width: int, height: int, seed: int = 0) -> Scenario:
    grid = generate_maze(width, height, seed=seed)
    return Scenario(
        name=f"maze4_{width}x{height}_s{seed}",
        query=GridQuery(grid, (0, 0), (width - 1, height - 1)),
        meta={"kind": "maze4", "seed": seed},
    )


def scenario_geometric(n: int, k: int, seed: int = 0) -> Scenario:
    """Random points in the unit square joined to their ``k`` nearest neighbours."""
    rng = random.Random(seed)
    pts = [(rng.random(), rng.random()) for _ in range(n)]

    def dist(i: int, j: int) -> float:
        (x1, y1), (x2, y2) = pts[i], pts[j]
        return math.hypot(x1 - x2, y1 - y2)

    nbrs: dict[int, list[tuple[int, float]]] = {i: [] for i in range(n)}
    for i in range(n):
        for d, j in sorted((dist(i, j), j) for j in range(n) if j != i)[:k]:
            nbrs[i].append((j, d))
            nbrs[j].append((i, d))
    goal = n - 1

    def neighbors(i: int) -> Iterable[tuple[int, float]]:
        yield from nbrs[i]

    def h(i: int) -> float:
        return 0.0 if i == goal else dist(i, goal)

    return Scenario(
        name=f"geom_n{n}_k{k}_s{seed}",
        query=FunctionQuery(0, neighbors, h),
        meta={"kind": "geom", "n": n, "k": k, "seed": seed},
    )


# 8-puzzle
GOAL_8: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)
MOVES_8 = {
    0: [1, 3],
    1: [0, 2, 4],
    2: [1, 5],
    3: [0, 4, 6],
    4: [1, 3, 5, 7],
    5: [2, 4, 8],
    6: [3, 7],
    7: [4, 6, 8],
    8: [5, 7],
}


def puzzle_neighbors(state: tuple[int, ...]) -> Iterable[tuple[tuple[int, ...], float]]:
    z = state.index(0)
    for nz in MOVES_8[z]:
        lst = list(state)
        lst[z], lst[nz] = lst[nz], lst[z]
        yield tuple(lst), 1.0


def puzzle_h_manhattan(state: tuple[int, ...]) -> float:
    dist = 0
    for idx, val in enumerate(state):
        if val == 0:
            continue
        goal_idx = val - 1
        x, y = idx % 3, idx // 3
        gx, gy = goal_idx % 3, goal_idx // 3
        dist += abs(x - gx) + abs(y - gy)
    return float(dist)


def scramble_puzzle(steps: int, seed: int = 0) -> tuple[int, ...]:
    rng = random.Random(seed)
    s: tuple[int, ...] = GOAL_8
    for _ in range(steps):
        z = s.index(0)
        nz = rng.choice(MOVES_8[z])
        lst = list(s)
        lst[z], lst[nz] = lst[nz], lst[z]
        s = tuple(lst)
    return s


def scenario_puzzle(steps: int, seed: int = 0) -> Scenario:
    return Scenario(
        name=f"8p_{steps}_s{seed}",
        query=FunctionQuery(scramble_puzzle(steps, seed), puzzle_neighbors, puzzle_h_manhattan),
        meta={"kind": "8p", "steps": steps, "seed": seed},
    )


def default_scenarios(seed: int = 0) -> list[Scenario]:
    return [
        scenario_grid_4(50, 50, density=0.15, seed=seed),
        scenario_grid_8(60, 60, density=0.20, seed=seed),
        scenario_maze4(51, 51, seed=seed),
        scenario_geometric(150, k=8, seed=seed),
        scenario_puzzle(steps=25, seed=seed),
    ]
