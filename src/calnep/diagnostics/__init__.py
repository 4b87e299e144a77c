"""Diagnostics package.

Light-weight printers over the bundled table; each module exposes main(argv).
"""

__all__ = ["pretty_month", "year_lengths"]
