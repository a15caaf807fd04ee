"""Diagnostics package.

Light-weight checks and tables; nowruz_scatter additionally needs the
diagnostics extras (numpy, matplotlib).
"""

__all__ = ["round_trip", "nowruz_table", "nowruz_scatter"]
