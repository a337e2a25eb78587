"""Hydrology Bounded Context - Domain Services.

Pure domain logic computing how much rain water a 1-D landscape retains when
both open ends drain freely. NO I/O operations.

The volume is computed by divide and conquer: the two tallest walls of a
region bound one pool whose volume is computed in a single pass, and whatever
remains on either side of that pool is queued as a smaller region. The queue
is an explicit worklist, so landscapes with millions of positions never hit
the interpreter recursion limit.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence

import numpy as np

from domain.hydrology.errors import LandscapeIndexError
from domain.hydrology.value_objects import MIN_REGION_SPAN, Landscape, Region

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

# Placeholder for a peak candidate not seen yet; any real height beats it
_UNSET = -1


# ---------------------------------------------------------------------------
# Initial Region
# ---------------------------------------------------------------------------
def find_initial_region(landscape: Sequence[int]) -> Region | None:
    """Trim the slopes that cannot retain water from both ends.

    The leading rise ends at the first descent and the trailing fall starts
    at the last ascent; water poured on either slope runs off the open end.

        #
      _###....      first descent at index 2: water can sit from index 3
      0123

    Args:
        landscape: Heights, read-only

    Returns:
        The usable Region, or None if what remains is narrower than 3
        positions (flat, monotonic, single-peak, or too short landscapes).
    """
    size = len(landscape)

    from_index = next(
        (i for i in range(size - 1) if landscape[i] > landscape[i + 1]), None
    )
    if from_index is None:
        return None

    to_index = next(
        (i for i in range(size - 1, 0, -1) if landscape[i - 1] < landscape[i]), None
    )
    if to_index is None or to_index - from_index < MIN_REGION_SPAN:
        return None

    return Region(from_index, to_index)


# ---------------------------------------------------------------------------
# Boundary Peak Selection
# ---------------------------------------------------------------------------
def select_boundary_peaks(
    landscape: Sequence[int], region: Region
) -> tuple[int, int]:
    """Find the two highest positions of a region, favouring the widest pair.

    Among equally high candidates the pair farthest apart is kept, so each
    volume computation swallows as much of the landscape as possible. This is
    what keeps the overall run close to linear on landscapes with many
    equal peaks.

    Single left to right scan keeping a highest (first) and a second highest
    (second) candidate. With cur the current height:

        first > second, cur > first   -> second = first, first = cur
        first > second, cur == first  -> second = cur
        first > second, cur > second  -> second = cur
        first > second, cur == second -> second = farthest from first
        first == second, cur >= first -> second = lower index of the two,
                                         first = cur

    In the tied case cur always has the highest index seen so far, so it is
    the new right extreme and only the left one has to be chosen.

    Args:
        landscape: Heights, read-only
        region: Region to scan; its width guarantees both candidates get set

    Returns:
        (left_index, right_index) ordered by index, not by height

    Raises:
        LandscapeIndexError: If the region reaches beyond the landscape
    """
    size = len(landscape)
    if region.end_index >= size:
        raise LandscapeIndexError(region.end_index, size)

    first_index = second_index = _UNSET
    first_height = second_height = _UNSET

    for index in range(region.start_index, region.end_index + 1):
        height = landscape[index]

        # Most positions change nothing
        if height < second_height:
            continue

        if first_height > second_height:
            if height > first_height:
                second_index, second_height = first_index, first_height
                first_index, first_height = index, height
            elif height == first_height or height > second_height:
                second_index, second_height = index, height
            elif abs(first_index - index) > abs(first_index - second_index):
                second_index, second_height = index, height
        else:
            if first_index < second_index:
                second_index, second_height = first_index, first_height
            first_index, first_height = index, height

    if first_index < second_index:
        return first_index, second_index
    return second_index, first_index


# ---------------------------------------------------------------------------
# Volume Between Walls
# ---------------------------------------------------------------------------
def volume_between(landscape: Sequence[int], from_index: int, to_index: int) -> int:
    """Volume held between two walls, walls themselves excluded.

    The water level is the lower wall. The caller must ensure no position
    strictly between the walls is higher than both of them; this is not
    checked, and a violating pair yields a meaningless (possibly negative)
    number.

    Args:
        landscape: Heights, read-only
        from_index: Left wall
        to_index: Right wall

    Returns:
        Retained volume, 0 when the walls are adjacent

    Raises:
        LandscapeIndexError: If either wall lies outside the landscape
    """
    size = len(landscape)
    for index in (from_index, to_index):
        if not 0 <= index < size:
            raise LandscapeIndexError(index, size)

    if to_index - from_index <= 1:
        return 0

    # Python ints: no overflow whatever the input dtype
    level = int(min(landscape[from_index], landscape[to_index]))
    capacity = level * (to_index - from_index - 1)
    occupied = sum(map(int, landscape[from_index + 1 : to_index]))

    return capacity - occupied


# ---------------------------------------------------------------------------
# Region Splitting
# ---------------------------------------------------------------------------
def split_region(region: Region, from_index: int, to_index: int) -> list[Region]:
    """Regions left over once [from_index, to_index] has been consumed.

    Walls are shared: the left remainder ends on from_index and the right one
    starts on to_index. Leftovers narrower than 3 positions are dropped since
    they cannot hold water.

    Returns:
        0, 1 or 2 regions, left one first
    """
    remainders: list[Region] = []
    if from_index - region.start_index >= MIN_REGION_SPAN:
        remainders.append(Region(region.start_index, from_index))
    if region.end_index - to_index >= MIN_REGION_SPAN:
        remainders.append(Region(to_index, region.end_index))
    return remainders


# ---------------------------------------------------------------------------
# Worklist Loop
# ---------------------------------------------------------------------------
def drain_regions(
    landscape: Sequence[int], regions: Iterable[Region], volume: int = 0
) -> int:
    """Accumulate the volume retained by a set of regions.

    Each region is replaced by its leftovers at the front of the worklist, so
    a region's children are settled before its siblings. The order only
    affects memory use, never the total.

    Args:
        landscape: Heights, read-only
        regions: Regions to process, in order
        volume: Volume already accumulated by the caller

    Returns:
        volume plus everything retained by the regions
    """
    worklist = deque(regions)
    total = volume
    processed = 0

    while worklist:
        region = worklist.popleft()
        from_index, to_index = select_boundary_peaks(landscape, region)
        total += volume_between(landscape, from_index, to_index)
        worklist.extendleft(reversed(split_region(region, from_index, to_index)))
        processed += 1

    logger.debug("Drained %d regions, total volume %d", processed, total)
    return total


# ---------------------------------------------------------------------------
# Main Service: calculate_water_amount
# ---------------------------------------------------------------------------
def calculate_water_amount(landscape: Landscape | Sequence[int]) -> int:
    """Compute the total volume of water a landscape retains after rain.

    Args:
        landscape: A Landscape, or any sequence of non-negative integer
            heights (list, tuple, numpy array). Plain sequences are not
            validated.

    Returns:
        Total retained volume; 0 for landscapes shorter than 3 positions,
        flat, or monotonic.

    Example:
        >>> calculate_water_amount([5, 2, 3, 4, 5, 4, 0, 3, 1])
        9
    """
    heights = _as_heights(landscape)

    initial = find_initial_region(heights)
    if initial is None:
        logger.debug("No region can retain water in %d positions", len(heights))
        return 0

    return drain_regions(heights, [initial])


def _as_heights(landscape: Landscape | Sequence[int]) -> Sequence[int]:
    """Python int view of the heights; scanning numpy scalars is much slower."""
    if isinstance(landscape, Landscape):
        return landscape.heights()
    if isinstance(landscape, np.ndarray):
        return landscape.tolist()
    return landscape
