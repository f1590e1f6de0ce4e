"""Unit tests for settings loading, document loading and document validation."""

import json
from pathlib import Path

import pytest

from elements.application import ServiceFactory, get_factory, to_dict
from elements.application.config import (
    ConfigError,
    ElementsSettings,
    ModelLoadError,
    apply_settings,
    load_document,
    load_document_from_dict,
    load_settings,
    load_settings_from_dict,
    validate_document,
)
from elements.domain import (
    ConstructionMode,
    Extrude,
    Mass,
    Material,
    Polygon,
    Profile,
    ValidatorRegistry,
    Z_AXIS,
)


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestSettings:
    """Tests for settings loading."""

    def test_defaults(self) -> None:
        settings = load_settings_from_dict({})
        assert settings.schema_version == "1.0"
        assert settings.validation.enabled is True
        assert settings.kernel.name == "mesh"
        assert settings.kernel.arc_divisions == 36

    def test_unknown_key_is_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings_from_dict({"kernel": {"name": "mesh", "divisions": 12}})
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "kernel.divisions"

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings_from_dict({"schema_version": "2.0"})
        assert "Unsupported schema version" in str(exc_info.value)

    @pytest.mark.parametrize("divisions", [3, 721])
    def test_arc_divisions_range(self, divisions: int) -> None:
        with pytest.raises(ConfigError):
            load_settings_from_dict({"kernel": {"arc_divisions": divisions}})

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "settings.json", {"validation": {"enabled": False}})
        settings = load_settings(path)
        assert settings.validation.enabled is False

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "Settings file not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"kernel": ', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1


class TestApplySettings:
    """Tests for apply_settings."""

    def test_disables_validation(self) -> None:
        apply_settings(ElementsSettings.model_validate({"validation": {"enabled": False}}))
        assert not ValidatorRegistry.validation_enabled()

    def test_enables_validation(self) -> None:
        ValidatorRegistry.disable_validation_on_construction()
        apply_settings(ElementsSettings())
        assert ValidatorRegistry.validation_enabled()

    def test_configures_global_factory(self) -> None:
        factory = apply_settings(
            ElementsSettings.model_validate({"kernel": {"arc_divisions": 16}})
        )
        assert factory is get_factory()
        assert factory.arc_divisions == 16
        assert factory.get_kernel().arc_divisions == 16

    def test_changing_divisions_replaces_kernel(self) -> None:
        factory = ServiceFactory()
        first = factory.get_kernel()
        apply_settings(
            ElementsSettings.model_validate({"kernel": {"arc_divisions": 12}}), factory
        )
        assert factory.get_kernel() is not first

    def test_same_settings_keep_kernel(self) -> None:
        factory = ServiceFactory()
        first = factory.get_kernel()
        apply_settings(ElementsSettings(), factory)
        assert factory.get_kernel() is first

    def test_unknown_kernel_name(self) -> None:
        with pytest.raises(ValueError):
            ServiceFactory(kernel_name="brep").get_kernel()


class TestLoadDocument:
    """Tests for model document loading."""

    def test_load_from_file(self, tmp_path: Path, square_profile: Profile) -> None:
        data = {"version": "1.0", "elements": [to_dict(Mass(square_profile, 2.0))]}
        document = load_document(_write(tmp_path / "model.json", data))
        assert len(document.elements) == 1
        assert document.elements[0]["discriminator"] == "Mass"

    def test_missing_discriminator(self) -> None:
        with pytest.raises(ModelLoadError) as exc_info:
            load_document_from_dict({"elements": [{"height": 1.0}]})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "elements"

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(ModelLoadError):
            load_document_from_dict({"elements": [], "units": "mm"})

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ModelLoadError) as exc_info:
            load_document(tmp_path / "model.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "Model file not found" in str(exc_info.value)


class TestValidateDocument:
    """Tests for validate_document."""

    def test_valid_document(self, square_profile: Profile) -> None:
        document = load_document_from_dict(
            {"elements": [to_dict(Mass(square_profile, 2.0)), to_dict(square_profile)]}
        )
        result = validate_document(document)
        assert result.is_valid
        assert result.exit_code == 0

    def test_invalid_element_is_reported(self, square_profile: Profile) -> None:
        bad = to_dict(Extrude(square_profile, 1.0, Z_AXIS))
        bad["height"] = -2.0
        document = load_document_from_dict(
            {"elements": [to_dict(square_profile), bad]}
        )
        result = validate_document(document)
        assert result.exit_code == 1
        assert len(result.errors) == 1
        assert result.errors[0].path == "elements[1]"
        assert result.errors[0].value == "Extrude"

    def test_each_element_is_checked(self) -> None:
        bow_tie = {
            "discriminator": "Polygon",
            "vertices": [
                {"discriminator": "Vector3", "x": 0.0, "y": 0.0, "z": 0.0},
                {"discriminator": "Vector3", "x": 1.0, "y": 1.0, "z": 0.0},
                {"discriminator": "Vector3", "x": 1.0, "y": 0.0, "z": 0.0},
                {"discriminator": "Vector3", "x": 0.0, "y": 1.0, "z": 0.0},
            ],
        }
        unknown = {"discriminator": "Door"}
        result = validate_document(load_document_from_dict({"elements": [bow_tie, unknown]}))
        assert [e.path for e in result.errors] == ["elements[0]", "elements[1]"]
        assert "self-intersecting" in result.errors[0].message

    def test_malformed_element(self) -> None:
        document = load_document_from_dict(
            {"elements": [{"discriminator": "Vector3", "x": 1.0, "w": 2.0}]}
        )
        result = validate_document(document)
        assert result.errors[0].message.startswith("Malformed Vector3")

    def test_missing_texture_is_a_warning(self, square_profile: Profile) -> None:
        material = Material("Brick", texture="/no/such/brick.png", mode=ConstructionMode.TRUSTED)
        mass = to_dict(Mass(square_profile, 1.0, material=material))
        result = validate_document(load_document_from_dict({"elements": [mass]}))
        assert result.is_valid
        assert result.exit_code == 2
        assert result.warnings[0].path == "elements[0].material.texture"
        assert "/no/such/brick.png" in result.warnings[0].message

    def test_existing_texture_is_fine(self, tmp_path: Path) -> None:
        texture = tmp_path / "brick.png"
        texture.write_bytes(b"\x89PNG")
        material = to_dict(Material("Brick", texture=str(texture)))
        result = validate_document(load_document_from_dict({"elements": [material]}))
        assert result.exit_code == 0

    def test_uses_polygon_helper(self) -> None:
        """Polygons built by helpers serialize to valid entries."""
        entry = to_dict(Polygon.rectangle(3.0, 1.0))
        assert validate_document(load_document_from_dict({"elements": [entry]})).is_valid
