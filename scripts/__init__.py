"""Maintenance scripts for the confidence table.

Prefer running them as modules, e.g. `python -m scripts.validate_cdf_table`.
"""
