"""Unit tests for geometric elements and dimensions."""

import pytest

from elements.domain import (
    ORIGIN,
    X_AXIS,
    AlignedDimension,
    BuiltInMaterials,
    ConstructionMode,
    Dimension,
    Extrude,
    GeometricElement,
    LinearDimension,
    Mass,
    Material,
    OutOfRangeError,
    Plane,
    Polygon,
    Profile,
    Vector3,
)


@pytest.fixture
def footprint() -> Profile:
    return Profile(Polygon.rectangle(2.0, 3.0))


class TestGeometricElement:
    """Tests for GeometricElement."""

    def test_default_material_is_assigned(self) -> None:
        element = GeometricElement()
        assert element.material is BuiltInMaterials.DEFAULT

    def test_explicit_material_is_kept(self) -> None:
        brick = Material("Brick")
        element = GeometricElement(material=brick)
        assert element.material is brick

    def test_trusted_element_keeps_missing_material(self) -> None:
        element = GeometricElement(mode=ConstructionMode.TRUSTED)
        assert element.material is None

    def test_voids(self, square_profile: Profile, kernel) -> None:
        solid = Extrude(square_profile, 1.0, Vector3(0.0, 0.0, 1.0), kernel=kernel)
        hole = Extrude(square_profile, 1.0, Vector3(0.0, 0.0, 1.0), is_void=True, kernel=kernel)
        element = GeometricElement(representation=[solid, hole])
        assert element.voids() == [hole]
        assert element.solid_operations() == [solid, hole]


class TestMass:
    """Tests for Mass."""

    def test_volume(self, footprint: Profile) -> None:
        mass = Mass(footprint, 4.0)
        assert mass.volume() == pytest.approx(24.0)

    def test_height_change_updates_solid(self, footprint: Profile) -> None:
        mass = Mass(footprint, 4.0)
        mass.height = 5.0
        assert mass.volume() == pytest.approx(30.0)

    def test_profile_change_updates_solid(self, footprint: Profile) -> None:
        mass = Mass(footprint, 1.0)
        mass.profile = Profile(Polygon.rectangle(1.0, 1.0))
        assert mass.volume() == pytest.approx(1.0)

    def test_rejects_negative_height(self, footprint: Profile) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            Mass(footprint, -1.0)
        assert "must not be negative" in str(exc_info.value)

    def test_representation_holds_one_extrude(self, footprint: Profile) -> None:
        mass = Mass(footprint, 2.0)
        assert len(mass.representation) == 1
        assert isinstance(mass.representation[0], Extrude)
        assert mass.voids() == []

    def test_mass_gets_default_material(self, footprint: Profile) -> None:
        assert Mass(footprint).material is BuiltInMaterials.DEFAULT


class TestDimensions:
    """Tests for linear and aligned dimensions."""

    def test_linear_dimension_projects_onto_reference_plane(self) -> None:
        dimension = LinearDimension(
            Vector3(0.0, 0.0, 0.0), Vector3(3.0, 4.0, 0.0), Plane(ORIGIN, X_AXIS)
        )
        assert dimension.value == pytest.approx(4.0)

    def test_aligned_dimension_measures_true_length(self) -> None:
        dimension = AlignedDimension(Vector3(0.0, 0.0, 0.0), Vector3(3.0, 4.0, 0.0), offset=1.0)
        assert dimension.value == pytest.approx(5.0)
        assert dimension.offset == 1.0

    def test_base_dimension_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Dimension()
