"""Hydrology Bounded Context.

Responsible for water retained by 1-D elevation profiles:
- Value Objects: Landscape, Region
- Services: calculate_water_amount and the divide-and-conquer steps behind it
"""
