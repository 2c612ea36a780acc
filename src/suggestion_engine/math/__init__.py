"""Numerical helpers: regression, rounding, clustering and confidence."""
