"""Diagnostics package.

- tagu_table, consistency: always available, standard library only
- watat_barcode: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["tagu_table", "consistency", "watat_barcode"]
