# polycover

Building blocks for coverage planning in general polygons with holes. The
package is pure Python and has no runtime dependencies.

## Modules

- `polycover.combinatorics`: `factorial(n)`, `n_choose_k(n, k)` and
  `combinations_of_k(sorted_elements, k)`. The last one returns every
  k-element combination as a set, in lexicographic order of element position.
  Negative arguments and `k > n` raise `ValueError`.
- `polycover.graph_base`: `GraphBase` is an abstract directed graph built node
  by node. Subclasses implement `create()` and `add_edges()`. It offers
  `add_node`, `add_start_node`, `add_goal_node` (each returns the new node id),
  `add_edge`, `clear`, `clear_edges`, existence checks, `edge_cost`,
  `node_property`, `edge_property`, `solve_dijkstra` and `solve_astar`. With
  no arguments the search methods use `start_idx` and `goal_idx`.
  `solve_astar` needs a subclass that overrides `calculate_heuristic`.
  `adjacency_matrix()` gives costs in thousandths (`double_to_milli_int`,
  `milli_int_to_double`) and `NO_CONNECTION` (2**31 - 1) where there is no
  edge. Failures, such as a missing edge, an unreachable goal or a negative
  cost, raise `GraphError`.
- `polycover.boolean_lattice`: `BooleanLattice(num_clusters)` builds all
  2^n subsets of visited clusters (`NodeProperty`), joined by zero-cost edges
  from each set to every set that has one more cluster.
  `add_start_node()` and `add_goal_node()` add unique start and goal clusters
  and the nodes that go with them.
- `polycover.gtsp_task`: `Task` is a generalized TSP instance. It holds a cost
  matrix `m` and `clusters` and provides `is_square()` and `is_symmetric()`.
- `polycover.markers`: plain data types (`Color`, `Point3`, `Pose`,
  `PoseArray`, `Marker`, `MarkerType`, `MarkerAction`) and functions that lift
  2D paths to a given altitude:
  - `trajectory_points_from_path`
  - `pose_array_from_path`
  - `create_markers`, which returns a points marker and a line strip
  - `create_triangles`, which returns a triangle list; a triangle without
    three vertices raises `ValueError`
  - `create_start_and_end_point_markers`, which returns green and red spheres
  - `create_start_and_end_text_markers`, which returns "S" and "G" labels. The
    start label gets the namespace `ns + "_end_text"` and the end label an
    empty one.
- `polycover.polygon_editor`: `PolygonEditor` is the editing state for a hull
  (polygon 0) with holes. It has these operations:
  - `create_vertex` and `delete_vertex`
  - `add_hole`, `next_polygon`, `next_vertex`, `reset_polygon`, `clear_all`
    and `remove_empty_holes`
  - `increase_altitude` and `decrease_altitude`, with steps of 0.05 with
    shift, 10 with control and 1 otherwise
  - `status()`, which returns the status line

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from polycover.boolean_lattice import BooleanLattice

lattice = BooleanLattice(3)          # 2**3 nodes, 3 * 2**2 edges
lattice.add_start_node()
lattice.add_goal_node()
path = lattice.solve_dijkstra(lattice.start_idx, lattice.goal_idx)
```

```python
from polycover.polygon_editor import PolygonEditor

editor = PolygonEditor()
for x, y in [(0, 0), (10, 0), (10, 10), (0, 10)]:
    editor.create_vertex(x, y)
editor.add_hole()
print(editor.status())
```

## What it does not do

- There is no coverage or shortest-path planner, no sweep pattern generation
  and no polygon decomposition. It has no command, no service and no
  messaging either.
- `Task` only describes a GTSP instance. The package contains no GTSP solver.
- The polygon editor does not check that polygons are simple. It does not
  subtract holes from the hull, does not render and does not publish its
  result. Callers read `polygons` and `altitude` themselves.
- Marker and pose types are plain data. Nothing here sends them to a viewer.