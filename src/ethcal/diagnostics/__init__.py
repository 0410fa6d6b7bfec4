"""Diagnostics package.

- round_trip, new_years_table, pretty_month: always available, light-weight checks
- new_year_scatter: requires the `diagnostics` extra (numpy, matplotlib)
"""

__all__ = ["round_trip", "new_years_table", "new_year_scatter", "pretty_month"]
