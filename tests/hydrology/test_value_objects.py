"""Tests for hydrology Value Objects (Region, Landscape).

Value Objects validate at construction time, so every test here either builds
a valid instance and inspects it, or expects construction to fail.
"""

from __future__ import annotations

import numpy as np
import pytest

from domain.hydrology.errors import HydrologyError, InvalidRegionError
from domain.hydrology.value_objects import MAX_HEIGHT, Landscape, Region


# ===========================================================================
# Region
# ===========================================================================
class TestRegionInvariants:
    """Tests for Region construction invariants."""

    def test_can_create_region(self):
        region = Region(1, 10)

        assert region.start_index == 1
        assert region.end_index == 10

    def test_keyword_construction(self):
        assert Region(start_index=2, end_index=4) == Region(2, 4)

    def test_narrowest_region_is_three_positions(self):
        region = Region(10, 12)

        assert region.width == 3
        assert region.interior_width == 1
        assert list(region.indices()) == [10, 11, 12]

    def test_inverted_region_raises(self):
        with pytest.raises(InvalidRegionError):
            Region(10, 1)

    @pytest.mark.parametrize("end_index", [10, 11])
    def test_too_narrow_region_raises(self, end_index):
        """Single position and two positions cannot hold an interior."""
        with pytest.raises(InvalidRegionError) as exc_info:
            Region(10, end_index)

        assert exc_info.value.start_index == 10
        assert exc_info.value.end_index == end_index

    def test_negative_start_raises(self):
        with pytest.raises(InvalidRegionError):
            Region(-3, 5)

    def test_error_message_names_range(self):
        with pytest.raises(InvalidRegionError, match=r"\(4->5\)"):
            Region(4, 5)

    def test_invalid_region_is_hydrology_error(self):
        with pytest.raises(HydrologyError):
            Region(0, 1)

    def test_region_equality_by_value(self):
        assert Region(0, 5) == Region(0, 5)
        assert Region(0, 5) != Region(0, 6)
        assert len({Region(0, 5), Region(0, 5)}) == 1

    def test_region_immutable(self):
        region = Region(0, 5)

        with pytest.raises(Exception):  # ValidationError or AttributeError
            region.end_index = 1


# ===========================================================================
# Landscape
# ===========================================================================
class TestLandscapeInvariants:
    """Tests for Landscape construction invariants."""

    def test_from_heights(self):
        landscape = Landscape.from_heights([1, 2, 1, 3, 3, 0, 0])

        assert len(landscape) == 7
        assert landscape.heights() == (1, 2, 1, 3, 3, 0, 0)
        assert landscape.data.dtype == np.int64

    def test_heights_are_python_ints(self):
        landscape = Landscape.from_heights(np.array([4, 0, 4], dtype=np.int32))

        assert all(type(h) is int for h in landscape.heights())

    def test_empty_landscape_is_valid(self):
        landscape = Landscape.from_heights([])

        assert len(landscape) == 0
        assert landscape.heights() == ()

    def test_negative_height_raises(self):
        with pytest.raises(ValueError, match="Heights must be non-negative"):
            Landscape.from_heights([1, -1, 2])

    def test_height_above_max_raises(self):
        with pytest.raises(ValueError, match="Heights must not exceed"):
            Landscape.from_heights([0, MAX_HEIGHT + 1, 0])

    def test_max_height_is_accepted(self):
        landscape = Landscape.from_heights([MAX_HEIGHT, 0, MAX_HEIGHT])

        assert landscape.heights()[0] == MAX_HEIGHT

    def test_float_heights_raise(self):
        with pytest.raises(ValueError, match="Data must hold integers"):
            Landscape.from_heights([1.5, 0.0, 2.0])

    def test_two_dimensional_data_raises(self):
        with pytest.raises(ValueError, match="Data must be 1D"):
            Landscape(data=np.zeros((2, 2), dtype=np.int64))

    def test_data_is_read_only(self):
        landscape = Landscape.from_heights([3, 0, 3])

        with pytest.raises(ValueError):
            landscape.data[1] = 5

    def test_caller_array_is_not_frozen(self):
        """The Value Object owns a copy; the caller's array stays writable."""
        source = np.array([3, 0, 3], dtype=np.int64)
        landscape = Landscape(data=source)

        source[1] = 7

        assert source.flags.writeable
        assert landscape.heights() == (3, 0, 3)

    def test_landscape_equality_by_value(self):
        first = Landscape.from_heights([1, 0, 1])
        second = Landscape.from_heights(np.array([1, 0, 1], dtype=np.int32))

        assert first == second
        assert first != Landscape.from_heights([1, 0, 2])
        assert first != Landscape.from_heights([1, 0, 1, 0])
        assert first != [1, 0, 1]

    def test_landscape_hashable(self):
        first = Landscape.from_heights([1, 0, 1])
        second = Landscape.from_heights([1, 0, 1])

        assert hash(first) == hash(second)
        assert len({first, second, Landscape.from_heights([2, 0, 2])}) == 2

    def test_landscape_immutable(self):
        landscape = Landscape.from_heights([3, 0, 3])

        with pytest.raises(Exception):  # ValidationError or AttributeError
            landscape.data = np.zeros(3, dtype=np.int64)
