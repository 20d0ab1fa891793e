from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

State = TypeVar("State", bound=Hashable)


class PathNode(Generic[State]):
    """Search bookkeeping for one discovered state.

    Nodes live in the pathfinder's per-run arena. ``index`` is the node's slot in
    that arena, which is also its discovery order, and ``previous_index`` is the
    slot of the node it was reached from (``None`` for the source). Only the
    pathfinder mutates a node.
    """

    __slots__ = (
        "state",
        "index",
        "previous_index",
        "cost_from_source",
        "_estimated_cost_to_destination",
        "_estimated_total_cost",
        "_is_open",
    )

    def __init__(
        self,
        state: State,
        index: int,
        previous_index: int | None,
        cost_from_source: float,
        estimated_cost_to_destination: float,
    ) -> None:
        self.reset(state, index, previous_index, cost_from_source, estimated_cost_to_destination)

    def reset(
        self,
        state: State,
        index: int,
        previous_index: int | None,
        cost_from_source: float,
        estimated_cost_to_destination: float,
    ) -> None:
        self.state = state
        self.index = index
        self.previous_index = previous_index
        self.cost_from_source = float(cost_from_source)
        self._estimated_cost_to_destination = float(estimated_cost_to_destination)
        self._estimated_total_cost = self.cost_from_source + self._estimated_cost_to_destination
        self._is_open = True

    @property
    def estimated_cost_to_destination(self) -> float:
        return self._estimated_cost_to_destination

    @property
    def estimated_total_cost(self) -> float:
        return self._estimated_total_cost

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_closed(self) -> bool:
        return not self._is_open

    @property
    def is_source(self) -> bool:
        return self.previous_index is None

    def update_previous_node(self, previous_index: int, cost_from_source: float) -> None:
        """Record a cheaper route; the heuristic remainder is kept as is."""
        if not self._is_open:
            raise ValueError(f"cannot relax closed node for state {self.state!r}")
        self.previous_index = previous_index
        self.cost_from_source = float(cost_from_source)
        self._estimated_total_cost = self.cost_from_source + self._estimated_cost_to_destination

    def close(self) -> None:
        self._is_open = False

    def __repr__(self) -> str:
        return (
            f"PathNode(state={self.state!r}, index={self.index}, "
            f"previous_index={self.previous_index}, g={self.cost_from_source}, "
            f"f={self._estimated_total_cost}, open={self._is_open})"
        )
