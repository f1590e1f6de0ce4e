"""Unit tests for Profile and Material post-construction behaviour."""

import logging
import uuid
from pathlib import Path

import pytest

from elements.domain import (
    BuiltInMaterials,
    Color,
    Colors,
    ConstructionMode,
    GeometricInconsistencyError,
    Material,
    OutOfRangeError,
    Polygon,
    Profile,
    ValidatorRegistry,
    Vector3,
)


def _warped_square() -> Polygon:
    return Polygon(
        (
            Vector3(0.0, 0.0, 0.0),
            Vector3(1.0, 0.0, 0.0),
            Vector3(1.0, 1.0, 0.5),
            Vector3(0.0, 1.0, 0.0),
        ),
        mode=ConstructionMode.TRUSTED,
    )


class TestProfile:
    """Tests for Profile."""

    def test_voids_default_to_empty_list(self) -> None:
        profile = Profile(Polygon.rectangle(1.0, 1.0))
        assert profile.voids == []

    def test_missing_perimeter_is_accepted(self) -> None:
        """The perimeter check only applies when a perimeter is given."""
        profile = Profile(None)  # type: ignore[arg-type]
        assert profile.voids == []

    def test_rejects_non_coplanar_perimeter(self) -> None:
        with pytest.raises(GeometricInconsistencyError) as exc_info:
            Profile(_warped_square())
        assert "same plane" in str(exc_info.value)

    def test_voids_are_wound_against_perimeter(self, framed_profile: Profile) -> None:
        """A counter-clockwise void is reversed to clockwise."""
        assert not framed_profile.perimeter.is_clockwise()
        assert framed_profile.voids[0].is_clockwise()

    def test_correctly_wound_void_is_kept(self) -> None:
        void = Polygon.rectangle(1.0, 1.0).reversed()
        profile = Profile(Polygon.rectangle(4.0, 4.0), [void])
        assert profile.voids[0] == void

    def test_area_subtracts_voids(self, framed_profile: Profile) -> None:
        assert framed_profile.area() == pytest.approx(12.0)

    def test_trusted_profile_keeps_voids_as_given(self) -> None:
        """Trusted construction runs no post-construction action."""
        profile = Profile(Polygon.rectangle(1.0, 1.0), mode=ConstructionMode.TRUSTED)
        assert profile.voids is None

    def test_profile_equality(self) -> None:
        assert Profile(Polygon.rectangle(2.0, 2.0)) == Profile(Polygon.rectangle(2.0, 2.0))


class TestMaterial:
    """Tests for Material."""

    def test_defaults(self) -> None:
        material = Material("Paint")
        assert material.color == Colors.GRAY
        assert material.specular_factor == 0.1
        assert material.texture is None
        assert isinstance(material.id, uuid.UUID)

    def test_tuple_color_is_coerced(self) -> None:
        material = Material("Red", (1.0, 0.0, 0.0))
        assert material.color == Color(1.0, 0.0, 0.0, 1.0)

    def test_rejects_tuple_color_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            Material("Red", (2.0, 0.0, 0.0))

    def test_trusted_material_skips_tuple_color_checks(self) -> None:
        material = Material("Red", (2.0, 0.0, 0.0), mode=ConstructionMode.TRUSTED)
        assert material.color.red == 2.0

    def test_tuple_color_follows_disabled_switch(self) -> None:
        ValidatorRegistry.disable_validation_on_construction()
        material = Material("Red", (2.0, 0.0, 0.0))
        assert material.color.red == 2.0

    @pytest.mark.parametrize(
        "specular, glossiness", [(1.5, 0.5), (-0.1, 0.5), (0.5, 1.01), (0.5, -1.0)]
    )
    def test_rejects_factors_out_of_range(
        self, specular: float, glossiness: float
    ) -> None:
        with pytest.raises(OutOfRangeError):
            Material("Bad", specular_factor=specular, glossiness_factor=glossiness)

    def test_missing_texture_is_removed(self, caplog: pytest.LogCaptureFixture) -> None:
        """A texture path that does not exist is nulled with a warning."""
        with caplog.at_level(logging.WARNING):
            material = Material("Brick", texture="/no/such/texture.png")
        assert material.texture is None
        assert "/no/such/texture.png" in caplog.text

    def test_existing_texture_is_kept(self, tmp_path: Path) -> None:
        texture = tmp_path / "brick.png"
        texture.write_bytes(b"\x89PNG")
        material = Material("Brick", texture=str(texture))
        assert material.texture == str(texture)

    def test_only_texture_is_checked(self) -> None:
        """Other texture paths are left alone."""
        material = Material("Brick", normal_texture="/no/such/normal.png")
        assert material.normal_texture == "/no/such/normal.png"

    def test_trusted_material_keeps_missing_texture(self) -> None:
        material = Material(
            "Brick", texture="/no/such/texture.png", mode=ConstructionMode.TRUSTED
        )
        assert material.texture == "/no/such/texture.png"


class TestBuiltInMaterials:
    """Tests for the built-in material set."""

    def test_default_is_white(self) -> None:
        assert BuiltInMaterials.DEFAULT.color == Colors.WHITE

    def test_ids_are_stable(self) -> None:
        assert BuiltInMaterials.STEEL.id == uuid.UUID("5f3c2cf3-0ac4-4a14-a0c6-3c4e6c2e1a61")

    def test_void_is_transparent(self) -> None:
        assert BuiltInMaterials.VOID.color.alpha == 0.0
