"""Worked water retention scenarios.

Holds the reference landscapes and expected volumes (see scenarios.py) that
scripts/water_demo.py prints and the tests assert, so neither has to import
the other.
"""

from __future__ import annotations
