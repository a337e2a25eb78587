"""Hydrology Bounded Context - Value Objects.

Immutable data structures describing an elevation profile and the slices of it
the solver works on. All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, model_validator

from domain.hydrology.errors import InvalidRegionError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
MIN_REGION_SPAN = 2  # end - start; two walls plus at least one interior cell
MAX_HEIGHT = 2**31 - 1  # Largest supported ground height


# ---------------------------------------------------------------------------
# Region
# ---------------------------------------------------------------------------
class Region(BaseModel):
    """Contiguous, inclusive index range of a landscape (Value Object).

    Invariants:
        start_index >= 0
        end_index - start_index >= MIN_REGION_SPAN (at least 3 positions)

    Construction outside these invariants raises InvalidRegionError, so any
    Region in hand is wide enough to hold two walls and an interior.
    """

    start_index: int  # First position (inclusive)
    end_index: int  # Last position (inclusive)

    model_config = ConfigDict(frozen=True)

    def __init__(self, start_index: int, end_index: int) -> None:
        super().__init__(start_index=start_index, end_index=end_index)

    @model_validator(mode="after")
    def validate_span(self) -> "Region":
        if self.start_index < 0 or self.end_index - self.start_index < MIN_REGION_SPAN:
            raise InvalidRegionError(self.start_index, self.end_index)
        return self

    @property
    def width(self) -> int:
        """Number of positions covered, walls included."""
        return self.end_index - self.start_index + 1

    @property
    def interior_width(self) -> int:
        return self.end_index - self.start_index - 1

    def indices(self) -> range:
        return range(self.start_index, self.end_index + 1)


# ---------------------------------------------------------------------------
# Landscape
# ---------------------------------------------------------------------------
class Landscape(BaseModel):
    """Immutable 1-D elevation profile at evenly spaced positions (Value Object).

    The data array is copied into an owned, read-only int64 array at
    construction time. Attempts to modify it afterwards raise ValueError.

    Invariants:
        data is 1-D with an integer dtype
        0 <= height <= MAX_HEIGHT for every position

    An empty landscape is valid; it simply retains no water.
    """

    data: NDArray[np.int64]  # 1D int64 array, read-only

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_landscape(self) -> "Landscape":
        if self.data.ndim != 1:
            raise ValueError(f"Data must be 1D, got {self.data.ndim}D")
        if self.data.size and not np.issubdtype(self.data.dtype, np.integer):
            raise ValueError(f"Data must hold integers, got {self.data.dtype}")
        if self.data.size:
            lowest = int(self.data.min())
            highest = int(self.data.max())
            if lowest < 0:
                raise ValueError(f"Heights must be non-negative, got {lowest}")
            if highest > MAX_HEIGHT:
                raise ValueError(f"Heights must not exceed {MAX_HEIGHT}, got {highest}")

        # Owned copy, so the caller's array is never frozen or aliased
        immutable = np.array(self.data, dtype=np.int64, copy=True, order="C")
        immutable.flags.writeable = False
        object.__setattr__(self, "data", immutable)

        return self

    @classmethod
    def from_heights(cls, heights: Sequence[int]) -> "Landscape":
        """Build a Landscape from any sequence of integer heights.

        Raises:
            ValueError: If the heights are not 1-D non-negative integers
        """
        data = np.asarray(heights)
        if data.size == 0:
            data = np.zeros(0, dtype=np.int64)
        return cls(data=data)

    def __len__(self) -> int:
        return int(self.data.shape[0])

    # Generated equality and hashing would compare/hash the ndarray itself
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Landscape):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    def __hash__(self) -> int:
        return hash(self.data.tobytes())

    def heights(self) -> tuple[int, ...]:
        """Return heights as Python ints."""
        return tuple(self.data.tolist())
