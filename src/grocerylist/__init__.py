"""Consolidate ingredients from several recipes into one grocery list."""

__version__ = "0.1.0"
