from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import NamedTuple, Protocol, TypeVar

from .path_node import PathNode

S = TypeVar("S", bound=Hashable)
_StateContra_contra = TypeVar("_StateContra_contra", bound=Hashable, contravariant=True)


class AdjacentState(NamedTuple):
    """A state reachable from the node being expanded and the cost to move there."""

    state: Hashable
    movement_cost: float


class NeighborFn(Protocol[S]):
    def __call__(self, state: S) -> Iterable[tuple[S, float]]: ...


class HeuristicFn(Protocol[_StateContra_contra]):
    def __call__(self, state: _StateContra_contra) -> float: ...


class VisitCallback(Protocol[_StateContra_contra]):
    def __call__(self, node: PathNode[_StateContra_contra]) -> None: ...


class PathfindingQuery(Protocol[S]):
    """What the pathfinder needs to know about a graph of states.

    ``adjacent_states`` receives the node being expanded, so a query may look at
    the accumulated ``cost_from_source`` as well as the state. Adjacent states
    are produced on demand and not cached between expansions.

    ``estimate_cost_to_destination`` must be optimistic (never above the real
    remaining cost) for the found path to be optimal, and must depend on the
    state alone since it is evaluated once per discovered state. A value of
    exactly ``0`` marks the state as the destination.
    """

    def source(self) -> S: ...

    def adjacent_states(self, node: PathNode[S]) -> Iterable[tuple[S, float]]: ...

    def estimate_cost_to_destination(self, state: S) -> float: ...
