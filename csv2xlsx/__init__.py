"""
csv2xlsx
========

Converts CSV files to Excel workbooks.

Features:
- Column type inference (integer, float, text) from a sample of rows
- Concurrent reading and merging of several CSV files
- Single-sheet XLSX output
"""

__version__ = "1.0.0"
