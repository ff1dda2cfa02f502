"""A directed graph with node and edge properties and shortest-path search."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any

EdgeId = tuple[int, int]

#: Value marking a missing connection in an adjacency matrix.
NO_CONNECTION = 2**31 - 1

_TO_MILLI = 1000.0
_FROM_MILLI = 1.0 / _TO_MILLI


class GraphError(Exception):
    """Raised when a graph operation cannot be carried out."""


def double_to_milli_int(value: float) -> int:
    """Scale a cost to thousandths and round half away from zero."""
    scaled = value * _TO_MILLI
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def milli_int_to_double(value: int) -> float:
    """Convert a cost in thousandths back to a float."""
    return float(value) * _FROM_MILLI


class GraphBase(ABC):
    """Base class for directed graphs built node by node.

    Each node holds a map from neighbour id to the cost of reaching it.
    Subclasses decide how a graph is created and how edges are attached to a
    newly added node.
    """

    def __init__(self) -> None:
        self._graph: list[dict[int, float]] = []
        self._node_properties: dict[int, Any] = {}
        self._edge_properties: dict[EdgeId, Any] = {}
        self.start_idx: int | None = None
        self.goal_idx: int | None = None
        self.is_created = False

    def __len__(self) -> int:
        return len(self._graph)

    @property
    def num_edges(self) -> int:
        """Number of edges that carry a property."""
        return len(self._edge_properties)

    # Construction -----------------------------------------------------

    def add_node(self, node_property: Any) -> int:
        """Append a node, connect it with ``add_edges`` and return its id.

        If connecting the node fails, the node is removed again and the
        ``GraphError`` propagates.
        """
        self._graph.append({})
        idx = len(self._graph) - 1
        self._node_properties[idx] = node_property
        try:
            self.add_edges()
        except GraphError:
            self._graph.pop()
            del self._node_properties[idx]
            raise
        return idx

    def add_start_node(self, node_property: Any) -> int:
        """Add a node and remember it as the start node."""
        self.start_idx = len(self._graph)
        try:
            return self.add_node(node_property)
        except GraphError as exc:
            raise GraphError("Failed adding start node.") from exc

    def add_goal_node(self, node_property: Any) -> int:
        """Add a node and remember it as the goal node."""
        self.goal_idx = len(self._graph)
        try:
            return self.add_node(node_property)
        except GraphError as exc:
            raise GraphError("Failed adding goal node.") from exc

    def clear(self) -> None:
        """Remove all nodes, edges and properties."""
        self._graph.clear()
        self._node_properties.clear()
        self._edge_properties.clear()
        self.start_idx = None
        self.goal_idx = None
        self.is_created = False

    def clear_edges(self) -> None:
        """Remove all edges but keep the nodes."""
        self._edge_properties.clear()
        for neighbors in self._graph:
            neighbors.clear()

    @abstractmethod
    def create(self) -> None:
        """Build the graph from the subclass's settings."""

    @abstractmethod
    def add_edges(self) -> None:
        """Create all edges for the node at the back of the graph.

        Raise ``GraphError`` if the node cannot be connected.
        """

    def add_edge(self, edge_id: EdgeId, edge_property: Any, cost: float) -> None:
        """Add or overwrite the edge ``edge_id`` with a non-negative cost."""
        source, target = edge_id
        if cost < 0.0:
            raise GraphError(f"Edge cost must not be negative ({cost}).")
        if not self.node_exists(source):
            raise GraphError(f"Edge source node {source} does not exist.")
        self._graph[source][target] = cost
        self._edge_properties.setdefault(edge_id, edge_property)

    def calculate_heuristic(self, goal: int) -> dict[int, float]:
        """Return the heuristic cost to ``goal`` for every node."""
        raise GraphError("Heuristic not implemented.")

    # Queries ----------------------------------------------------------

    def node_exists(self, node_id: int | None) -> bool:
        return node_id is not None and 0 <= node_id < len(self._graph)

    def node_property_exists(self, node_id: Hashable) -> bool:
        return node_id in self._node_properties

    def edge_exists(self, edge_id: EdgeId) -> bool:
        source, target = edge_id
        return self.node_exists(source) and target in self._graph[source]

    def edge_property_exists(self, edge_id: EdgeId) -> bool:
        return edge_id in self._edge_properties

    def edge_cost(self, edge_id: EdgeId) -> float:
        """Return the cost of an existing edge."""
        if not self.edge_exists(edge_id):
            source, target = edge_id
            raise GraphError(f"Edge from {source} to {target} does not exist.")
        source, target = edge_id
        return self._graph[source][target]

    def node_property(self, node_id: int) -> Any:
        """Return the property stored for ``node_id``."""
        try:
            return self._node_properties[node_id]
        except KeyError:
            raise GraphError(f"Cannot access node property {node_id}.") from None

    def edge_property(self, edge_id: EdgeId) -> Any:
        """Return the property stored for ``edge_id``."""
        try:
            return self._edge_properties[edge_id]
        except KeyError:
            source, target = edge_id
            raise GraphError(
                f"Cannot access edge property from {source} to {target}."
            ) from None

    # Search -----------------------------------------------------------

    def solve_dijkstra(self, start: int | None = None, goal: int | None = None) -> list[int]:
        """Return the cheapest node sequence from ``start`` to ``goal``.

        Without arguments the stored start and goal nodes are used.
        """
        start, goal = self._endpoints(start, goal)
        return self._search(start, goal, None)

    def solve_astar(self, start: int | None = None, goal: int | None = None) -> list[int]:
        """Return the cheapest path found by A* using ``calculate_heuristic``."""
        start, goal = self._endpoints(start, goal)
        heuristic = self.calculate_heuristic(goal)
        return self._search(start, goal, heuristic)

    def adjacency_matrix(self) -> list[list[int]]:
        """Return edge costs in thousandths, ``NO_CONNECTION`` where none."""
        size = len(self._graph)
        return [
            [
                double_to_milli_int(self._graph[i][j]) if j in self._graph[i] else NO_CONNECTION
                for j in range(size)
            ]
            for i in range(size)
        ]

    # Internals --------------------------------------------------------

    def _endpoints(self, start: int | None, goal: int | None) -> tuple[int, int]:
        start = self.start_idx if start is None else start
        goal = self.goal_idx if goal is None else goal
        if not self.node_exists(start) or not self.node_exists(goal):
            raise GraphError(f"Start {start} or goal {goal} is not a node of the graph.")
        return start, goal

    def _neighbors(self, node: int) -> dict[int, float]:
        return self._graph[node] if self.node_exists(node) else {}

    def _search(
        self, start: int, goal: int, heuristic: dict[int, float] | None
    ) -> list[int]:
        cost = {i: math.inf for i in range(len(self._graph))}
        cost[start] = 0.0
        if heuristic is None:
            priority = cost
        else:
            if start not in heuristic:
                raise GraphError(f"No heuristic for start node {start}.")
            priority = {i: math.inf for i in range(len(self._graph))}
            priority[start] = heuristic[start]

        open_set = {start}
        closed_set: set[int] = set()
        came_from: dict[int, int] = {}

        while open_set:
            current = min(open_set, key=lambda i: (priority.get(i, math.inf), i))
            if current == goal:
                return self._reconstruct(came_from, current)
            open_set.discard(current)
            closed_set.add(current)

            for neighbor, edge_cost in self._neighbors(current).items():
                if neighbor in closed_set:
                    continue
                open_set.add(neighbor)
                tentative = cost[current] + edge_cost
                if tentative >= cost.get(neighbor, math.inf):
                    continue
                came_from[neighbor] = current
                cost[neighbor] = tentative
                if heuristic is not None:
                    if neighbor not in heuristic:
                        raise GraphError(f"No heuristic for node {neighbor}.")
                    priority[neighbor] = tentative + heuristic[neighbor]

        raise GraphError(f"No path from {start} to {goal}.")

    @staticmethod
    def _reconstruct(came_from: dict[int, int], current: int) -> list[int]:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path