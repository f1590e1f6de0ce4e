"""Domain services: geometric predicates shared by validators and value objects."""

from .predicates import (
    are_coplanar,
    check_segment_lengths,
    check_self_intersection,
    needs_reversal,
    polygon_normal,
    project_to_plane,
    segments,
    segments_intersect,
    signed_area,
)

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
]
