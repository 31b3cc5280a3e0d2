"""Thread CSV conversion.

This package finds a thread CSV, resolves the stake amount, and writes
one default prediction row per input data row.
"""
