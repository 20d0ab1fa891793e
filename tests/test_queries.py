import contextlib
import io
import json
import logging
import math
import unittest

from helpers import dijkstra

from gridastar.core.path_node import PathNode
from gridastar.logging import get_logger
from gridastar.pathfinder import Pathfinder
from gridastar.queries import FunctionQuery, Grid, GraphQuery, GridQuery
from gridastar.scenarios import (
    GOAL_8,
    generate_maze,
    puzzle_neighbors,
    scenario_geometric,
    scenario_grid_4,
    scenario_maze4,
    scenario_puzzle,
)

QUIET = logging.getLogger("gridastar.tests.quiet")
QUIET.addHandler(logging.NullHandler())
QUIET.propagate = False


class TestGridQuery(unittest.TestCase):
    def setUp(self):
        self.grid = Grid(10, 10, walls={(3, y) for y in range(10) if y != 5})
        self.finder = Pathfinder(logger=QUIET)

    def test_wall_with_gap(self):
        path = self.finder.find(GridQuery(self.grid, (0, 0), (9, 9)))
        self.assertEqual(self.finder.last_stats.path_cost, 18.0)
        self.assertEqual(len(path), 19)
        self.assertIn((3, 5), path)
        self.assertTrue(all(p not in self.grid.walls for p in path))

    def test_blocked_wall(self):
        grid = Grid(10, 10, walls={(3, y) for y in range(10)})
        self.assertEqual(self.finder.find(GridQuery(grid, (0, 0), (9, 9))), [])

    def test_diagonal_octile(self):
        grid = Grid(20, 20)
        self.finder.find(GridQuery(grid, (0, 0), (19, 19), diagonal=True))
        self.assertAlmostEqual(self.finder.last_stats.path_cost, math.sqrt(2) * 19, places=6)

    def test_scaled_step(self):
        grid = Grid(5, 5, step=2.5)
        path = self.finder.find(GridQuery(grid, (0, 0), (4, 0)))
        self.assertEqual(path, [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)])
        self.assertEqual(self.finder.last_stats.path_cost, 10.0)

    def test_endpoints_must_be_on_grid(self):
        with self.assertRaises(ValueError):
            GridQuery(self.grid, (0, 0), (10, 0))

    def test_same_cell(self):
        self.assertEqual(self.finder.find(GridQuery(self.grid, (2, 2), (2, 2))), [(2, 2)])


class TestAdapters(unittest.TestCase):
    def test_function_query_passes_state(self):
        query = FunctionQuery(
            1, lambda n: [(n * 2, 1.0), (n + 1, 1.0)], lambda n: 0 if n == 10 else 1
        )
        self.assertEqual(query.source(), 1)
        adjacent = list(query.adjacent_states(PathNode(5, 0, None, 0.0, 1.0)))
        self.assertEqual(adjacent, [(10, 1.0), (6, 1.0)])
        path = Pathfinder(logger=QUIET).find(query)
        self.assertEqual(path[0], 1)
        self.assertEqual(path[-1], 10)
        self.assertEqual(len(path), 5)

    def test_graph_query_unknown_state_has_no_neighbours(self):
        query = GraphQuery({}, "x", lambda s: 1.0)
        self.assertEqual(list(query.adjacent_states(PathNode("x", 0, None, 0.0, 1.0))), [])
        self.assertEqual(query.estimate_cost_to_destination("anything"), 1.0)


class TestScenarios(unittest.TestCase):
    def setUp(self):
        self.finder = Pathfinder(logger=QUIET)

    def test_maze_reachability(self):
        sc = scenario_maze4(31, 31, seed=5)
        path = self.finder.find(sc.query)
        self.assertEqual(path[0], (0, 0))
        self.assertEqual(path[-1], (30, 30))
        grid = sc.query.grid
        expected = dijkstra((0, 0), grid.neighbors4)[(30, 30)]
        self.assertEqual(self.finder.last_stats.path_cost, expected)

    def test_maze_is_deterministic_per_seed(self):
        self.assertEqual(generate_maze(21, 21, seed=3).walls, generate_maze(21, 21, seed=3).walls)
        other = generate_maze(21, 21, seed=4)
        self.assertNotEqual(generate_maze(21, 21, seed=3).walls, other.walls)

    def test_obstacle_grid_matches_dijkstra(self):
        for seed in range(5):
            sc = scenario_grid_4(25, 25, density=0.25, seed=seed)
            path = self.finder.find(sc.query)
            expected = dijkstra((0, 0), sc.query.grid.neighbors4).get((24, 24))
            if expected is None:
                self.assertEqual(path, [])
            else:
                self.assertEqual(self.finder.last_stats.path_cost, expected)

    def test_geometric_graph_matches_dijkstra(self):
        sc = scenario_geometric(n=80, k=6, seed=2)
        path = self.finder.find(sc.query)
        expected = dijkstra(0, sc.query.neighbors)[79]
        self.assertGreater(len(path), 1)
        self.assertAlmostEqual(self.finder.last_stats.path_cost, expected, places=9)

    def test_puzzle_solution(self):
        sc = scenario_puzzle(steps=20, seed=1)
        path = self.finder.find(sc.query)
        self.assertEqual(path[-1], GOAL_8)
        self.assertLessEqual(len(path) - 1, 20)
        for a, b in zip(path, path[1:]):
            self.assertIn(b, [s for s, _ in puzzle_neighbors(a)])


class TestLogging(unittest.TestCase):
    def test_json_lines(self):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            logger = get_logger("gridastar.tests.json", level="debug", json=True)
        logger.propagate = False
        logger.info("visiting %r", (1, 2))
        record = json.loads(buf.getvalue().strip())
        self.assertEqual(record["level"], "INFO")
        self.assertEqual(record["name"], "gridastar.tests.json")
        self.assertEqual(record["message"], "visiting (1, 2)")
        self.assertEqual(logger.level, logging.DEBUG)

    def test_handler_added_once(self):
        first = get_logger("gridastar.tests.once")
        second = get_logger("gridastar.tests.once", json=True)
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)


if __name__ == "__main__":
    unittest.main()
