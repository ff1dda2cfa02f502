"""Interactive editing of a hull polygon and its holes.

The editor keeps a list of polygons. The first is the hull and the others
are holes. One polygon and one vertex in it are selected at a time, and
new vertices go in before the selected vertex.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Vertex = tuple[float, float]

DEFAULT_ALTITUDE = 3.0
DELETE_TOLERANCE = 0.5
SMALL_ALTITUDE_DELTA = 0.05
NORMAL_ALTITUDE_DELTA = 1.0
LARGE_ALTITUDE_DELTA = 10.0

_ALTITUDE = "Altitude: "
_SELECTION = "Current Selection: "
STATUS_INFO = ", ".join(
    (
        "<b>Left-Click:</b> Insert a new vertex",
        "<b>Right-Click:</b> Remove a vertex",
        "<b>h:</b> Add hole",
        "<b>n:</b> Select next polygon",
        "<b>v:</b> Select next vertex",
        "<b>r:</b> Reset polygon",
        "<b>c:</b> Clear all",
        "<b>Enter:</b> Publish polygon",
        "<b>Mouse wheel (+shift/ctrl):</b> Change altitude",
    )
)


def _new_polygons() -> list[list[Vertex]]:
    return [[]]


@dataclass
class PolygonEditor:
    """Editing state for a polygon with holes.

    ``polygon_selection`` indexes ``polygons`` (0 is the hull) and
    ``vertex_selection`` indexes the vertices of the selected polygon; it
    equals the number of vertices when the polygon is empty.
    """

    polygons: list[list[Vertex]] = field(default_factory=_new_polygons)
    polygon_selection: int = 0
    vertex_selection: int = 0
    altitude: float = DEFAULT_ALTITUDE

    @property
    def hull(self) -> list[Vertex]:
        """The vertices of the hull."""
        return self.polygons[0]

    @property
    def holes(self) -> list[list[Vertex]]:
        """The vertex lists of all holes."""
        return self.polygons[1:]

    @property
    def selected_polygon(self) -> list[Vertex]:
        """The vertices of the selected polygon."""
        return self.polygons[self.polygon_selection]

    def create_vertex(self, x: float, y: float) -> None:
        """Insert a vertex before the selected one and select it."""
        self.selected_polygon.insert(self.vertex_selection, (float(x), float(y)))

    def delete_vertex(self, x: float, y: float) -> None:
        """Delete, in each polygon, the first vertex near ``(x, y)``.

        The polygon of the last deleted vertex becomes selected, together
        with the vertex that followed the deleted one.
        """
        for polygon_idx, polygon in enumerate(self.polygons):
            for vertex_idx, (vx, vy) in enumerate(polygon):
                if math.hypot(x - vx, y - vy) < DELETE_TOLERANCE:
                    self.polygon_selection = polygon_idx
                    del polygon[vertex_idx]
                    self.vertex_selection = vertex_idx if vertex_idx < len(polygon) else 0
                    break

    def add_hole(self) -> None:
        """Start a new, empty hole and select it."""
        self.remove_empty_holes()
        self.polygons.append([])
        self.polygon_selection = len(self.polygons) - 1
        self.vertex_selection = 0

    def next_polygon(self) -> None:
        """Select the next polygon, wrapping around to the hull."""
        self.remove_empty_holes()
        self.polygon_selection = (self.polygon_selection + 1) % len(self.polygons)
        self.vertex_selection = 0

    def next_vertex(self) -> None:
        """Select the next vertex, wrapping around to the first."""
        self.vertex_selection += 1
        if self.vertex_selection >= len(self.selected_polygon):
            self.vertex_selection = 0

    def reset_polygon(self) -> None:
        """Clear the selected polygon; a hole is removed entirely."""
        self.selected_polygon.clear()
        if self.polygon_selection != 0:
            del self.polygons[self.polygon_selection]
            self.polygon_selection -= 1
        self.vertex_selection = 0

    def clear_all(self) -> None:
        """Drop every polygon and restore the default altitude."""
        self.polygons = _new_polygons()
        self.polygon_selection = 0
        self.vertex_selection = 0
        self.altitude = DEFAULT_ALTITUDE

    def remove_empty_holes(self) -> None:
        """Remove holes without vertices; if any went, select the last polygon."""
        kept = [self.hull] + [hole for hole in self.holes if hole]
        if len(kept) == len(self.polygons):
            return
        self.polygons = kept
        self.polygon_selection = len(self.polygons) - 1
        self.vertex_selection = 0

    def increase_altitude(self, shift: bool = False, control: bool = False) -> None:
        """Raise the altitude by a small (shift), large (control) or normal step."""
        self.altitude += self._altitude_delta(shift, control)

    def decrease_altitude(self, shift: bool = False, control: bool = False) -> None:
        """Lower the altitude by a small (shift), large (control) or normal step."""
        self.altitude -= self._altitude_delta(shift, control)

    def status(self) -> str:
        """Return the status line describing altitude, selection and keys."""
        text = f"{_ALTITUDE}{self.altitude:g}m, {_SELECTION}"
        if self.polygon_selection == 0:
            text += " Hull"
        else:
            text += f" Hole {self.polygon_selection - 1}"
        return f"{text}, {STATUS_INFO}"

    @staticmethod
    def _altitude_delta(shift: bool, control: bool) -> float:
        if shift:
            return SMALL_ALTITUDE_DELTA
        if control:
            return LARGE_ALTITUDE_DELTA
        return NORMAL_ALTITUDE_DELTA