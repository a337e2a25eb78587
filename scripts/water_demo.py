#!/usr/bin/env python3
"""Print the water retained by the reference landscape and worked scenarios.

Usage:
    python scripts/water_demo.py

Every scenario from shared/scenarios.py is recomputed and compared with its
expected volume; the exit status is 1 if any of them disagrees.
"""

from __future__ import annotations

from domain.hydrology.services import calculate_water_amount
from shared.scenarios import EXPECTED_SCENARIOS, REFERENCE_LANDSCAPE


def main() -> int:
    """Run the demo. Returns the process exit status."""
    volume = calculate_water_amount(REFERENCE_LANDSCAPE)
    print(f"The volume of water for the test is {volume}")

    print("\nScenarios:")
    failures = 0
    for heights, expected in EXPECTED_SCENARIOS:
        actual = calculate_water_amount(heights)
        if actual == expected:
            status = "ok"
        else:
            status = f"FAIL (expected {expected})"
            failures += 1
        print(f"  {str(list(heights)):40} {actual:>6}  {status}")

    if failures:
        print(f"\nERROR: {failures} of {len(EXPECTED_SCENARIOS)} scenarios failed")
        return 1

    print(f"\nAll {len(EXPECTED_SCENARIOS)} scenarios verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
