"""Unit tests for the validator registry and the validated constructor hook."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import pytest

from elements.contracts import EntityValidator
from elements.domain import (
    ConstructionMode,
    OutOfRangeError,
    Transform,
    ValidatorRegistry,
    Vector3,
    validated,
)


@validated
class Widget:
    """Small validated type used to observe the hooks."""

    def __init__(self, size: float, label: str = "widget") -> None:
        self.size = size
        self.label = label


class RecordingWidgetValidator:
    """Validator that records what it sees and rejects negative sizes."""

    def __init__(self) -> None:
        self.pre_calls: list[dict[str, Any]] = []
        self.post_calls: list[Widget] = []

    @property
    def validates_type(self) -> type:
        return Widget

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        self.pre_calls.append(dict(arguments))
        if arguments["size"] < 0:
            raise OutOfRangeError("size must not be negative")

    def post_construct(self, instance: Any) -> None:
        self.post_calls.append(instance)
        instance.label = instance.label.upper()


@pytest.fixture
def widget_validator() -> RecordingWidgetValidator:
    validator = RecordingWidgetValidator()
    ValidatorRegistry.register(validator)
    return validator


class TestValidatorRegistry:
    """Tests for registry lookup."""

    def test_default_validators_are_loaded(self) -> None:
        available = ValidatorRegistry.available()
        for name in ("Vector3", "Color", "Polygon", "Profile", "Material", "Extrude"):
            assert name in available

    def test_lookup_is_by_exact_type(self) -> None:
        assert ValidatorRegistry.is_registered(Vector3)
        assert not ValidatorRegistry.is_registered(Transform)
        assert ValidatorRegistry.get(Transform) is None

    def test_default_validators_satisfy_protocol(self) -> None:
        validator = ValidatorRegistry.get(Vector3)
        assert isinstance(validator, EntityValidator)

    def test_overwrite_logs_warning(
        self,
        widget_validator: RecordingWidgetValidator,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            ValidatorRegistry.register(RecordingWidgetValidator())
        assert "Overwriting existing validator for 'Widget'" in caplog.text

    def test_clear_leaves_types_unchecked(self) -> None:
        ValidatorRegistry.clear()
        v = Vector3(float("inf"), 0.0, 0.0)
        assert v.x == float("inf")

    def test_reset_restores_defaults(self) -> None:
        ValidatorRegistry.clear()
        ValidatorRegistry.reset()
        with pytest.raises(OutOfRangeError):
            Vector3(float("inf"), 0.0, 0.0)


class TestValidatedConstructor:
    """Tests for the constructor hook order and arguments."""

    def test_pre_construct_sees_bound_arguments(
        self, widget_validator: RecordingWidgetValidator
    ) -> None:
        """Positional arguments are named and defaults applied."""
        Widget(3.0)
        assert widget_validator.pre_calls == [{"size": 3.0, "label": "widget"}]

    def test_pre_construct_failure_prevents_construction(
        self, widget_validator: RecordingWidgetValidator
    ) -> None:
        with pytest.raises(OutOfRangeError):
            Widget(-1.0)
        assert widget_validator.post_calls == []

    def test_post_construct_runs_on_instance(
        self, widget_validator: RecordingWidgetValidator
    ) -> None:
        widget = Widget(1.0, label="small")
        assert widget_validator.post_calls == [widget]
        assert widget.label == "SMALL"

    def test_unregistered_type_is_unchecked(self) -> None:
        widget = Widget(-5.0)
        assert widget.size == -5.0

    def test_trusted_mode_skips_both_hooks(
        self, widget_validator: RecordingWidgetValidator
    ) -> None:
        widget = Widget(-1.0, label="raw", mode=ConstructionMode.TRUSTED)
        assert widget.size == -1.0
        assert widget.label == "raw"
        assert widget_validator.pre_calls == []
        assert widget_validator.post_calls == []


class TestValidationSwitch:
    """Tests for the process-wide validation switch."""

    def test_enabled_by_default(self) -> None:
        assert ValidatorRegistry.validation_enabled()
        assert ValidatorRegistry.resolve_mode(None) is ConstructionMode.VALIDATED

    def test_disabled_switch_skips_hooks(
        self, widget_validator: RecordingWidgetValidator
    ) -> None:
        ValidatorRegistry.disable_validation_on_construction()
        widget = Widget(-1.0, label="raw")
        assert widget.label == "raw"
        assert widget_validator.pre_calls == []

    def test_disabled_switch_allows_invalid_vectors(self) -> None:
        ValidatorRegistry.disable_validation_on_construction()
        v = Vector3(float("nan"), 0.0, 0.0)
        assert v.x != v.x

    def test_explicit_mode_wins_over_switch(self) -> None:
        ValidatorRegistry.disable_validation_on_construction()
        with pytest.raises(OutOfRangeError):
            Vector3(float("nan"), 0.0, 0.0, mode=ConstructionMode.VALIDATED)

    def test_re_enabling(self) -> None:
        ValidatorRegistry.disable_validation_on_construction()
        ValidatorRegistry.enable_validation_on_construction()
        with pytest.raises(OutOfRangeError):
            Vector3(float("nan"), 0.0, 0.0)

    def test_mode_accepts_string_value(self) -> None:
        assert ValidatorRegistry.resolve_mode("trusted") is ConstructionMode.TRUSTED  # type: ignore[arg-type]
