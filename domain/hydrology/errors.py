"""Hydrology Bounded Context - Error Hierarchy.

Custom exceptions for water retention operations. Every error here signals a
contract violation by the caller (or a bug); none of them is recoverable.
"""

from __future__ import annotations


class HydrologyError(Exception):
    """Base error for hydrology operations."""


class InvalidRegionError(HydrologyError):
    """Region is narrower than 3 positions, inverted, or starts below 0.

    Attributes:
        start_index: Requested first position of the region
        end_index: Requested last position of the region
    """

    def __init__(self, start_index: int, end_index: int) -> None:
        self.start_index = start_index
        self.end_index = end_index
        super().__init__(
            f"Region must span at least 3 positions from a non-negative start "
            f"({start_index}->{end_index})"
        )


class LandscapeIndexError(HydrologyError, IndexError):
    """Index lies outside the landscape.

    Also an IndexError, so generic sequence handling still catches it.

    Attributes:
        index: The offending index
        size: Number of positions in the landscape
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} outside landscape of {size} positions")
