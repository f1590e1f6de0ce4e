"""Pytest configuration and shared fixtures for element tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from elements.application.factory import reset_factory
from elements.domain import (
    GeometryGenerationError,
    Polygon,
    Profile,
    ValidatorRegistry,
    Vector3,
)


# =============================================================================
# Global state
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_state() -> Any:
    """Restore the validator table, the validation switch and the factory."""
    ValidatorRegistry.reset()
    reset_factory()
    yield
    ValidatorRegistry.reset()
    reset_factory()


# =============================================================================
# Recording kernel
# =============================================================================


@dataclass
class FakeBooleanGeometry:
    polygon_count: int


@dataclass
class FakeSolid:
    """Solid that remembers the call that produced it."""

    call: tuple[Any, ...]

    def to_boolean_representation(self) -> FakeBooleanGeometry:
        return FakeBooleanGeometry(polygon_count=len(self.call))

    def volume(self) -> float:
        return 0.0


class RecordingKernel:
    """Kernel double that records every request.

    Set ``fail`` to make every request raise GeometryGenerationError.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.fail = False

    def _record(self, *call: Any) -> FakeSolid:
        self.calls.append(call)
        if self.fail:
            raise GeometryGenerationError(f"Cannot build {call[0]}")
        return FakeSolid(call)

    def create_extrude(
        self, profile: Profile, height: float, direction: Vector3, flipped: bool
    ) -> FakeSolid:
        return self._record("extrude", profile, height, direction, flipped)

    def create_sweep_along_curve(
        self, profile: Profile, curve: Any, start_setback: float, end_setback: float
    ) -> FakeSolid:
        return self._record("sweep", profile, curve, start_setback, end_setback)

    def create_lamina(self, perimeter: Polygon) -> FakeSolid:
        return self._record("lamina", perimeter)


@pytest.fixture
def kernel() -> RecordingKernel:
    """A fresh recording kernel."""
    return RecordingKernel()


# =============================================================================
# Geometry fixtures
# =============================================================================


@pytest.fixture
def unit_square() -> Polygon:
    """Counter-clockwise 1x1 square centred on the origin."""
    return Polygon.rectangle(1.0, 1.0)


@pytest.fixture
def square_profile(unit_square: Polygon) -> Profile:
    """Profile of the unit square with no voids."""
    return Profile(unit_square)


@pytest.fixture
def framed_profile() -> Profile:
    """4x4 profile with a 2x2 void, both given counter-clockwise."""
    return Profile(Polygon.rectangle(4.0, 4.0), [Polygon.rectangle(2.0, 2.0)])
