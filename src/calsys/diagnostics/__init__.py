"""Diagnostics package.

Light-weight command-line checks over the built-in calendar systems.
"""

__all__ = ["pretty_month", "new_years_table", "round_trip"]
