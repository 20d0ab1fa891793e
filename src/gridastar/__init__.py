"""GridAStar: A* over lazily expanded, caller-described state graphs.

Public API:
- Pathfinder, PathfinderParams, SearchStats
- PathNode, AdjacentState, PathfindingQuery
- ready-made queries (FunctionQuery, GraphQuery, GridQuery) and benchmark scenarios
"""
from .core.path_node import PathNode
from .core.types import AdjacentState, PathfindingQuery
from .pathfinder import Pathfinder, PathfinderParams, SearchStats
from .queries import FunctionQuery, Grid, GraphQuery, GridQuery
from . import scenarios

__all__ = [
    "Pathfinder",
    "PathfinderParams",
    "SearchStats",
    "PathNode",
    "AdjacentState",
    "PathfindingQuery",
    "FunctionQuery",
    "GraphQuery",
    "Grid",
    "GridQuery",
    "scenarios",
]

__version__ = "0.1.0"
