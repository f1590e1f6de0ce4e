"""Unit tests for to_dict / from_dict."""

import json
import uuid

import pytest

from elements.application import from_dict, serializable_types, to_dict
from elements.domain import (
    BuiltInMaterials,
    ConstructionMode,
    Extrude,
    InvalidArgumentError,
    Line,
    Mass,
    Material,
    OutOfRangeError,
    Polygon,
    Profile,
    Sweep,
    Vector3,
    Z_AXIS,
)
from elements.infrastructure.kernel import MeshKernel


class TestToDict:
    """Tests for to_dict."""

    def test_vector(self) -> None:
        assert to_dict(Vector3(1.0, 2.0, 3.0)) == {
            "discriminator": "Vector3",
            "x": 1.0,
            "y": 2.0,
            "z": 3.0,
        }

    def test_material_id_is_a_string(self) -> None:
        data = to_dict(BuiltInMaterials.STEEL)
        assert data["id"] == str(BuiltInMaterials.STEEL.id)
        assert data["color"]["discriminator"] == "Color"

    def test_solid_is_not_written(self, square_profile: Profile) -> None:
        data = to_dict(Extrude(square_profile, 1.0, Z_AXIS))
        assert set(data) == {"discriminator", "profile", "height", "direction", "is_void", "flipped"}

    def test_output_is_json_compatible(self, framed_profile: Profile) -> None:
        data = to_dict(Mass(framed_profile, 2.0))
        assert json.loads(json.dumps(data)) == data

    def test_unknown_type_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            to_dict(object())


class TestFromDict:
    """Tests for from_dict."""

    def test_vector_round_trip(self) -> None:
        assert from_dict(to_dict(Vector3(1.0, 2.0, 3.0))) == Vector3(1.0, 2.0, 3.0)

    def test_material_keeps_its_id(self) -> None:
        material = Material("Oak", (0.6, 0.4, 0.2))
        rebuilt = from_dict(to_dict(material))
        assert isinstance(rebuilt.id, uuid.UUID)
        assert rebuilt == material

    def test_polygon_vertices_are_a_tuple(self) -> None:
        rebuilt = from_dict(to_dict(Polygon.rectangle(2.0, 2.0)))
        assert isinstance(rebuilt.vertices, tuple)
        assert rebuilt == Polygon.rectangle(2.0, 2.0)

    def test_extrude_is_recomputed(self, framed_profile: Profile) -> None:
        """The rebuilt solid equals the solid of the original."""
        original = Extrude(framed_profile, 2.0, Z_AXIS, kernel=MeshKernel())
        rebuilt = from_dict(to_dict(original))
        assert rebuilt == original
        assert rebuilt.solid == original.solid

    def test_sweep_round_trip(self, square_profile: Profile) -> None:
        sweep = Sweep(square_profile, Line(Vector3(), Vector3(4.0, 0.0, 0.0)), start_setback=1.0)
        rebuilt = from_dict(to_dict(sweep))
        assert rebuilt == sweep
        assert rebuilt.solid.volume() == pytest.approx(3.0)

    def test_mass_round_trip(self, square_profile: Profile) -> None:
        mass = Mass(square_profile, 3.0, name="core")
        rebuilt = from_dict(to_dict(mass))
        assert isinstance(rebuilt, Mass)
        assert rebuilt.name == "core"
        assert rebuilt.material == BuiltInMaterials.DEFAULT
        assert rebuilt.volume() == pytest.approx(3.0)

    def test_trusted_by_default(self) -> None:
        data = {"discriminator": "Vector3", "x": float("nan"), "y": 0.0, "z": 0.0}
        v = from_dict(data)
        assert v.x != v.x

    def test_validated_mode_rechecks(self) -> None:
        data = {"discriminator": "Vector3", "x": float("nan"), "y": 0.0, "z": 0.0}
        with pytest.raises(OutOfRangeError):
            from_dict(data, mode=ConstructionMode.VALIDATED)

    def test_nested_values_are_validated(self, square_profile: Profile) -> None:
        data = to_dict(Extrude(square_profile, 1.0, Z_AXIS))
        data["height"] = -1.0
        with pytest.raises(OutOfRangeError):
            from_dict(data, mode=ConstructionMode.VALIDATED)

    def test_unknown_discriminator(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            from_dict({"discriminator": "Door"})
        assert "Door" in str(exc_info.value)

    def test_missing_discriminator(self) -> None:
        with pytest.raises(InvalidArgumentError):
            from_dict({"x": 1.0})

    def test_serializable_types(self) -> None:
        types = serializable_types()
        assert types == sorted(types)
        assert {"Extrude", "Mass", "Material", "Vector3"} <= set(types)
