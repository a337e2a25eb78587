"""Single source of truth for worked water retention scenarios.

This module defines the reference landscapes and their expected volumes used
by both:
- scripts/water_demo.py (printed and self-checked)
- tests/hydrology/test_water_amount.py (asserted)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing scenarios, update ONLY this list.
"""

from __future__ import annotations

# Reference landscape printed first by the demo
REFERENCE_LANDSCAPE: tuple[int, ...] = (5, 2, 3, 4, 5, 4, 0, 3, 1)
REFERENCE_VOLUME: int = 9

# (heights, expected volume)
EXPECTED_SCENARIOS: list[tuple[tuple[int, ...], int]] = [
    ((1, 2, 1, 3, 3, 0, 0), 1),  # Two mountains
    ((1, 3, 1, 2, 1, 4, 0), 5),  # Three mountains, tallest on the right
    ((1, 3, 1, 4, 1, 2, 0), 3),  # Three mountains, tallest in the middle
    (REFERENCE_LANDSCAPE, REFERENCE_VOLUME),  # Reference exercise
    ((2, 3, 4, 5, 6), 0),  # Monotonic rise
]

EXPECTED_SCENARIO_COUNT: int = len(EXPECTED_SCENARIOS)
