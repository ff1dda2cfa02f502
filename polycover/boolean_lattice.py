"""Boolean lattice over visited cluster sets, for exact GTSP path searches.

Every node holds a set of already visited clusters. An edge of zero cost
leads from a set to each set that has exactly one more cluster. The lattice
starts with the empty set and ends with the set of all clusters.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from polycover.combinatorics import combinations_of_k
from polycover.graph_base import EdgeId, GraphBase, GraphError


@dataclass
class NodeProperty:
    """The set of clusters visited when a lattice node is reached."""

    visited_clusters: set[int] = field(default_factory=set)

    def includes_cluster(self, cluster: int) -> bool:
        """Return whether ``cluster`` has been visited."""
        return cluster in self.visited_clusters


class BooleanLattice(GraphBase):
    """Directed boolean lattice of visited cluster sets with zero edge costs.

    ``num_clusters`` is the number of clusters to visit, not counting a start
    or goal cluster. When it is given, the lattice is created at once.
    """

    def __init__(self, num_clusters: int | None = None) -> None:
        super().__init__()
        self.sorted_original_clusters: list[int] = list(range(num_clusters or 0))
        self.num_clusters = len(self.sorted_original_clusters)
        self.start_cluster = 0
        self.goal_cluster = 0
        if num_clusters is not None:
            self.create()

    def clear(self) -> None:
        """Remove all nodes and edges and forget start and goal clusters."""
        super().clear()
        self.num_clusters = len(self.sorted_original_clusters)
        self.start_cluster = 0
        self.goal_cluster = 0

    def create(self) -> None:
        """Build all 2^n cluster subsets, ordered by size, and their edges."""
        self.clear()
        n = self.num_clusters
        for k in range(n + 1):
            for combination in combinations_of_k(self.sorted_original_clusters, k):
                self.add_node(NodeProperty(combination))

        valid = (
            len(self) == 2**n
            and self.num_edges == n * 2**n // 2
            and len(self) == len(self._node_properties)
        )
        self.is_created = valid
        if not valid:
            raise GraphError(
                f"Boolean lattice over {n} clusters has {len(self)} nodes "
                f"and {self.num_edges} edges."
            )

    def add_edges(self) -> None:
        """Connect the newest node with every node it is a direct neighbour of."""
        if not self._graph:
            raise GraphError("Cannot add edges to an empty graph.")
        new_id = len(self._graph) - 1
        for adj_id in range(new_id):
            backwards = (adj_id, new_id)
            forwards = (new_id, adj_id)
            if self.is_connected(backwards):
                self.add_edge(backwards, None, 0.0)
            elif self.is_connected(forwards):
                self.add_edge(forwards, None, 0.0)

    def is_connected(self, edge_id: EdgeId) -> bool:
        """Return whether the target set is the source set plus one cluster."""
        source, target = edge_id
        if not (self.node_property_exists(source) and self.node_property_exists(target)):
            return False
        visited_from = self._node_properties[source].visited_clusters
        visited_to = self._node_properties[target].visited_clusters
        return len(visited_from) + 1 == len(visited_to) and visited_from <= visited_to

    def add_start_node(self, node_property: NodeProperty | None = None) -> int:
        """Add a start node with a unique start cluster and return its id.

        The start cluster is added to every existing node, so the new empty
        start node leads into the lattice. ``node_property`` is ignored.
        """
        if not self.is_created:
            raise GraphError("create() needs to be called first.")

        self.start_idx = len(self._graph)
        self.start_cluster = self.num_clusters
        self.num_clusters += 1
        for node_id in range(len(self._node_properties)):
            if node_id not in self._node_properties:
                self.is_created = False
                raise GraphError(f"Node property {node_id} is missing.")
            self._node_properties[node_id].visited_clusters.add(self.start_cluster)

        try:
            return self.add_node(NodeProperty())
        except GraphError:
            self.is_created = False
            raise

    def add_goal_node(self, node_property: NodeProperty | None = None) -> int:
        """Add a goal node after the set of all clusters and return its id.

        ``node_property`` is ignored.
        """
        if not self.is_created:
            raise GraphError("create() needs to be called first.")
        if not self._node_properties:
            raise GraphError("Cannot add a goal node to an empty lattice.")

        self.goal_idx = len(self._graph)
        self.goal_cluster = self.num_clusters
        self.num_clusters += 1

        largest = max(
            self._node_properties.values(), key=lambda p: len(p.visited_clusters)
        )
        goal_property = NodeProperty(set(largest.visited_clusters) | {self.goal_cluster})

        try:
            return self.add_node(goal_property)
        except GraphError:
            self.is_created = False
            raise