"""Unit tests for effective footprint resolution."""

import pytest

from roomdesigner.domain.services import resolve_footprint, resolve_with_extension
from roomdesigner.domain.value_objects import (
    EffectiveFootprint,
    Extension,
    Footprint,
    Orientation,
)

SINGLE = Footprint(width=90, length=190)


class TestAxisSwap:
    """Width and length swap on quarter turns."""

    @pytest.mark.parametrize("orientation", [Orientation.NORTH, Orientation.SOUTH])
    def test_primary_axis_keeps_dimensions(self, orientation: Orientation) -> None:
        result = resolve_footprint(orientation, SINGLE)
        assert result == EffectiveFootprint(width=90, total_length=190)

    @pytest.mark.parametrize("orientation", [Orientation.EAST, Orientation.WEST])
    def test_cross_axis_swaps_dimensions(self, orientation: Orientation) -> None:
        result = resolve_footprint(orientation, SINGLE)
        assert result == EffectiveFootprint(width=190, total_length=90)


class TestExtensionContribution:
    """The extension adds its size to the total length for every orientation."""

    @pytest.mark.parametrize("orientation", list(Orientation))
    @pytest.mark.parametrize("size", [5.0, 15.0, 50.0])
    def test_extension_always_adds_once(
        self, orientation: Orientation, size: float
    ) -> None:
        without = resolve_footprint(orientation, SINGLE)
        with_extension = resolve_footprint(orientation, SINGLE, True, size)
        assert with_extension.width == without.width
        assert with_extension.total_length == without.total_length + size

    @pytest.mark.parametrize("orientation", list(Orientation))
    def test_disabled_extension_ignored(self, orientation: Orientation) -> None:
        assert resolve_footprint(orientation, SINGLE, False, 15) == resolve_footprint(
            orientation, SINGLE
        )

    def test_north_with_headboard(self) -> None:
        result = resolve_footprint(Orientation.NORTH, SINGLE, True, 15)
        assert result.total_length == 205

    def test_resolve_with_extension_matches(self) -> None:
        extension = Extension(enabled=True, size=15)
        assert resolve_with_extension(
            Orientation.EAST, SINGLE, extension
        ) == resolve_footprint(Orientation.EAST, SINGLE, True, 15)

    def test_half_dimensions(self) -> None:
        result = resolve_footprint(Orientation.NORTH, SINGLE, True, 10)
        assert result.half_width == 45
        assert result.half_length == 100
