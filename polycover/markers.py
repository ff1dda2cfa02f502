"""Visualization markers and pose lists built from planar paths and polygons."""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import IntEnum

Point2 = Sequence[float]


@dataclass(frozen=True)
class Color:
    """An RGBA color with components in ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def with_alpha(self, alpha: float) -> Color:
        """Return the same color with another alpha value."""
        return replace(self, a=alpha)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def gray(cls) -> Color:
        return cls(0.5, 0.5, 0.5)

    @classmethod
    def red(cls) -> Color:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> Color:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> Color:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def yellow(cls) -> Color:
        return cls(1.0, 1.0, 0.0)

    @classmethod
    def orange(cls) -> Color:
        return cls(1.0, 0.5, 0.0)

    @classmethod
    def purple(cls) -> Color:
        return cls(0.5, 0.0, 1.0)

    @classmethod
    def chartreuse(cls) -> Color:
        return cls(0.5, 1.0, 0.0)

    @classmethod
    def teal(cls) -> Color:
        return cls(0.0, 1.0, 1.0)

    @classmethod
    def pink(cls) -> Color:
        return cls(1.0, 0.0, 0.5)


@dataclass(frozen=True)
class Point3:
    """A point or vector in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class MarkerType(IntEnum):
    """Shape drawn by a marker."""

    ARROW = 0
    CUBE = 1
    SPHERE = 2
    CYLINDER = 3
    LINE_STRIP = 4
    LINE_LIST = 5
    CUBE_LIST = 6
    SPHERE_LIST = 7
    POINTS = 8
    TEXT_VIEW_FACING = 9
    MESH_RESOURCE = 10
    TRIANGLE_LIST = 11


class MarkerAction(IntEnum):
    """What a viewer should do with a marker."""

    ADD = 0
    DELETE = 2
    DELETEALL = 3


@dataclass
class Pose:
    """A position with an orientation quaternion given as ``(x, y, z, w)``."""

    position: Point3 = field(default_factory=Point3)
    orientation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)


@dataclass
class Marker:
    """A single visualization marker."""

    frame_id: str = ""
    stamp: float = 0.0
    ns: str = ""
    id: int = 0
    type: MarkerType = MarkerType.ARROW
    action: MarkerAction = MarkerAction.ADD
    pose: Pose = field(default_factory=Pose)
    scale: Point3 = field(default_factory=Point3)
    color: Color = field(default_factory=lambda: Color(0.0, 0.0, 0.0, 0.0))
    points: list[Point3] = field(default_factory=list)
    text: str = ""


@dataclass
class PoseArray:
    """A list of poses in one reference frame."""

    frame_id: str = ""
    poses: list[Pose] = field(default_factory=list)


def _lift(point: Point2, altitude: float) -> Point3:
    x, y = point
    return Point3(float(x), float(y), float(altitude))


def trajectory_points_from_path(waypoints: Iterable[Point2], altitude: float) -> list[Point3]:
    """Lift planar waypoints to 3D positions at ``altitude``."""
    return [_lift(p, altitude) for p in waypoints]


def pose_array_from_path(
    waypoints: Iterable[Point2], altitude: float, frame_id: str
) -> PoseArray:
    """Return the waypoints as identity-oriented poses at ``altitude``."""
    return PoseArray(
        frame_id=frame_id,
        poses=[Pose(position=p) for p in trajectory_points_from_path(waypoints, altitude)],
    )


def create_markers(
    vertices: Iterable[Point2],
    altitude: float,
    frame_id: str,
    ns: str,
    points_color: Color,
    lines_color: Color,
    line_size: float,
    point_size: float,
) -> tuple[Marker, Marker]:
    """Return a points marker and a line strip through ``vertices``."""
    stamp = time.time()
    positions = trajectory_points_from_path(vertices, altitude)
    points = Marker(
        frame_id=frame_id,
        stamp=stamp,
        ns=ns,
        id=0,
        type=MarkerType.POINTS,
        scale=Point3(point_size, point_size, 0.0),
        color=points_color,
        points=list(positions),
    )
    line_strip = Marker(
        frame_id=frame_id,
        stamp=stamp,
        ns=ns,
        id=1,
        type=MarkerType.LINE_STRIP,
        scale=Point3(line_size, 0.0, 0.0),
        color=lines_color,
        points=list(positions),
    )
    return points, line_strip


def create_triangles(
    triangles: Iterable[Sequence[Point2]],
    frame_id: str,
    ns: str,
    color: Color,
    altitude: float,
) -> Marker:
    """Return a triangle list marker; every triangle must have three vertices."""
    points: list[Point3] = []
    for triangle in triangles:
        if len(triangle) != 3:
            raise ValueError(f"A triangle needs 3 vertices, got {len(triangle)}.")
        points.extend(_lift(v, altitude) for v in triangle)
    return Marker(
        frame_id=frame_id,
        stamp=time.time(),
        ns=ns,
        id=0,
        type=MarkerType.TRIANGLE_LIST,
        scale=Point3(1.0, 1.0, 1.0),
        color=color,
        points=points,
    )


def create_start_and_end_point_markers(
    start: Point2, end: Point2, altitude: float, frame_id: str, ns: str
) -> tuple[Marker, Marker]:
    """Return translucent green and red spheres at the start and end."""
    stamp = time.time()

    def sphere(point: Point2, suffix: str, color: Color) -> Marker:
        return Marker(
            frame_id=frame_id,
            stamp=stamp,
            ns=ns + suffix,
            id=0,
            type=MarkerType.SPHERE,
            pose=Pose(position=_lift(point, altitude)),
            scale=Point3(1.0, 1.0, 1.0),
            color=color.with_alpha(0.5),
        )

    return sphere(start, "_start", Color.green()), sphere(end, "_end", Color.red())


def create_start_and_end_text_markers(
    start: Point2, end: Point2, altitude: float, frame_id: str, ns: str
) -> tuple[Marker, Marker]:
    """Return "S" and "G" text labels at the start and end."""
    stamp = time.time()

    def label(point: Point2, text: str, label_ns: str) -> Marker:
        return Marker(
            frame_id=frame_id,
            stamp=stamp,
            ns=label_ns,
            type=MarkerType.TEXT_VIEW_FACING,
            pose=Pose(position=_lift(point, altitude)),
            scale=Point3(0.0, 0.0, 1.0),
            color=Color.black(),
            text=text,
        )

    # Only the start label carries a namespace, and it is the end one.
    return label(start, "S", ns + "_end_text"), label(end, "G", "")