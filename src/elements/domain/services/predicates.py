"""Geometric predicates used by entity validators.

These functions operate on sequences of points exposing ``x``, ``y`` and
``z`` attributes and do their arithmetic in numpy, so they can be called
from validators before any value object has been constructed:

- are_coplanar: all points within tolerance of one plane
- segments / check_segment_lengths: consecutive vertex pairs
- check_self_intersection: non-adjacent segment pairs of a closed loop
- polygon_normal / signed_area / needs_reversal: winding and orientation
"""

from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np

from ..constants import EPSILON, MINIMUM_SEGMENT_LENGTH
from ..exceptions import GeometricInconsistencyError, InvalidArgumentError

__all__ = [
    "are_coplanar",
    "check_segment_lengths",
    "check_self_intersection",
    "needs_reversal",
    "polygon_normal",
    "project_to_plane",
    "segments",
    "segments_intersect",
    "signed_area",
    "to_array",
]


class PointLike(Protocol):
    x: float
    y: float
    z: float


def to_array(points: Sequence[PointLike]) -> np.ndarray:
    """Stack points into an (n, 3) float array."""
    if len(points) == 0:
        return np.zeros((0, 3))
    return np.array([(p.x, p.y, p.z) for p in points], dtype=float)


def _first_plane(coords: np.ndarray, tolerance: float) -> tuple[np.ndarray, np.ndarray] | None:
    """Fit a plane through the first three non-degenerate points.

    Returns (origin, unit normal), or None if every point is collinear.
    """
    origin = coords[0]
    second = None
    for candidate in coords[1:]:
        if np.linalg.norm(candidate - origin) > tolerance:
            second = candidate
            break
    if second is None:
        return None
    edge = second - origin
    for candidate in coords[1:]:
        normal = np.cross(edge, candidate - origin)
        length = np.linalg.norm(normal)
        if length > tolerance:
            return origin, normal / length
    return None


def are_coplanar(points: Sequence[PointLike], tolerance: float = EPSILON) -> bool:
    """Check that all points lie within ``tolerance`` of a single plane.

    The plane is fitted through the first three non-degenerate points.
    Fewer than four points, or a fully collinear set, is always coplanar.

    Args:
        points: Points to test.
        tolerance: Maximum distance from the fitted plane.

    Returns:
        True if every point lies on the plane.
    """
    coords = to_array(points)
    if len(coords) < 4:
        return True
    plane = _first_plane(coords, tolerance)
    if plane is None:
        return True
    origin, normal = plane
    distances = np.abs((coords - origin) @ normal)
    return bool(np.all(distances <= tolerance))


def segments(points: Sequence[PointLike], closed: bool) -> list[tuple[int, int]]:
    """Index pairs of consecutive vertices, wrapping around if ``closed``."""
    count = len(points)
    pairs = [(i, i + 1) for i in range(count - 1)]
    if closed and count > 2:
        pairs.append((count - 1, 0))
    return pairs


def check_segment_lengths(
    points: Sequence[PointLike],
    closed: bool,
    minimum: float = MINIMUM_SEGMENT_LENGTH,
) -> None:
    """Reject any consecutive vertex pair closer than ``minimum``.

    Args:
        points: Vertices of the polyline or polygon.
        closed: Include the segment from the last vertex back to the first.
        minimum: Smallest accepted segment length.

    Raises:
        InvalidArgumentError: Naming the first offending segment.
    """
    coords = to_array(points)
    for index, (a, b) in enumerate(segments(points, closed)):
        length = float(np.linalg.norm(coords[b] - coords[a]))
        if length < minimum:
            raise InvalidArgumentError(
                f"The segment {index} from {_fmt(coords[a])} to {_fmt(coords[b])} "
                f"has length {length:.6f}, which is below the minimum of {minimum}."
            )


def polygon_normal(points: Sequence[PointLike]) -> np.ndarray:
    """Unit normal of a closed loop by Newell's method.

    The normal follows the right-hand rule for the loop's winding. A
    degenerate loop returns the zero vector.
    """
    coords = to_array(points)
    if len(coords) < 3:
        return np.zeros(3)
    following = np.roll(coords, -1, axis=0)
    normal = np.array(
        [
            np.sum((coords[:, 1] - following[:, 1]) * (coords[:, 2] + following[:, 2])),
            np.sum((coords[:, 2] - following[:, 2]) * (coords[:, 0] + following[:, 0])),
            np.sum((coords[:, 0] - following[:, 0]) * (coords[:, 1] + following[:, 1])),
        ]
    )
    length = np.linalg.norm(normal)
    if length < EPSILON * EPSILON:
        return np.zeros(3)
    return normal / length


def _plane_basis(normal: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    reference = np.array([1.0, 0.0, 0.0])
    if abs(normal @ reference) > 0.9:
        reference = np.array([0.0, 1.0, 0.0])
    u = reference - normal * (normal @ reference)
    u = u / np.linalg.norm(u)
    v = np.cross(normal, u)
    return u, v


def project_to_plane(points: Sequence[PointLike]) -> np.ndarray:
    """2D coordinates of a planar loop in its own plane, winding preserved.

    The loop is expressed in a right-handed basis whose Z axis is the loop
    normal, so a counter-clockwise loop stays counter-clockwise.
    """
    coords = to_array(points)
    normal = polygon_normal(points)
    if not normal.any():
        plane = _first_plane(coords, EPSILON)
        normal = plane[1] if plane is not None else np.array([0.0, 0.0, 1.0])
    u, v = _plane_basis(normal)
    relative = coords - coords[0]
    return np.column_stack((relative @ u, relative @ v))


def signed_area(points: Sequence[PointLike], reference_normal: np.ndarray | None = None) -> float:
    """Signed area of a planar loop.

    Positive when the loop winds counter-clockwise about ``reference_normal``
    (defaults to +Z).
    """
    coords = to_array(points)
    if len(coords) < 3:
        return 0.0
    if reference_normal is None:
        reference_normal = np.array([0.0, 0.0, 1.0])
    following = np.roll(coords, -1, axis=0)
    doubled = np.sum(np.cross(coords, following), axis=0)
    return float(doubled @ reference_normal) / 2.0


def needs_reversal(loop: Sequence[PointLike], perimeter: Sequence[PointLike]) -> bool:
    """True if a void loop winds the same way as its perimeter."""
    perimeter_normal = polygon_normal(perimeter)
    if not perimeter_normal.any():
        return False
    return float(polygon_normal(loop) @ perimeter_normal) > 0.0


def _orientation(p: np.ndarray, q: np.ndarray, r: np.ndarray, tolerance: float) -> int:
    value = (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])
    if abs(value) <= tolerance:
        return 0
    return 1 if value > 0 else -1


def _on_segment(p: np.ndarray, q: np.ndarray, r: np.ndarray, tolerance: float) -> bool:
    """True if collinear point ``q`` lies within the bounds of segment ``pr``."""
    return (
        min(p[0], r[0]) - tolerance <= q[0] <= max(p[0], r[0]) + tolerance
        and min(p[1], r[1]) - tolerance <= q[1] <= max(p[1], r[1]) + tolerance
    )


def segments_intersect(
    a: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    d: np.ndarray,
    tolerance: float = EPSILON,
) -> bool:
    """2D segment intersection test, touching and overlapping included."""
    o1 = _orientation(a, b, c, tolerance)
    o2 = _orientation(a, b, d, tolerance)
    o3 = _orientation(c, d, a, tolerance)
    o4 = _orientation(c, d, b, tolerance)

    if o1 != o2 and o3 != o4 and 0 not in (o1, o2, o3, o4):
        return True
    if o1 == 0 and _on_segment(a, c, b, tolerance):
        return True
    if o2 == 0 and _on_segment(a, d, b, tolerance):
        return True
    if o3 == 0 and _on_segment(c, a, d, tolerance):
        return True
    if o4 == 0 and _on_segment(c, b, d, tolerance):
        return True
    return False


def check_self_intersection(points: Sequence[PointLike], tolerance: float = EPSILON) -> None:
    """Reject a closed loop whose non-adjacent segments intersect.

    The loop is projected into its own plane and every pair of segments
    that do not share a vertex is tested.

    Args:
        points: Vertices of the closed loop (not repeated at the end).
        tolerance: Orientation tolerance for touching segments.

    Raises:
        GeometricInconsistencyError: Naming the first intersecting pair.
    """
    if len(points) < 4:
        return
    coords = to_array(points)
    flat = project_to_plane(points)
    pairs = segments(points, closed=True)
    count = len(pairs)
    for i in range(count):
        a, b = pairs[i]
        for j in range(i + 2, count):
            if i == 0 and j == count - 1:
                continue
            c, d = pairs[j]
            if segments_intersect(flat[a], flat[b], flat[c], flat[d], tolerance):
                raise GeometricInconsistencyError(
                    f"The polygon is self-intersecting: segment {i} "
                    f"({_fmt(coords[a])} to {_fmt(coords[b])}) "
                    f"intersects segment {j}."
                )


def _fmt(coord: np.ndarray) -> str:
    return f"({coord[0]:.4f}, {coord[1]:.4f}, {coord[2]:.4f})"
