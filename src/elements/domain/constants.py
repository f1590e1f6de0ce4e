"""Numeric tolerances shared by value objects, predicates and the kernel."""

# Component-wise tolerance for vector equality and distance comparisons.
EPSILON: float = 1e-5

# Segments shorter than this are rejected by polyline validation.
MINIMUM_SEGMENT_LENGTH: float = EPSILON

# Largest start or end angle accepted by an arc, in degrees.
MAX_ARC_ANGLE: float = 360.0

# Number of chords per full turn when an arc is sampled for sweeping.
DEFAULT_ARC_DIVISIONS: int = 36
