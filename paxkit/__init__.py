"""Ordered-sample statistics, metric functions, raster cell indexing and small utilities."""

__version__ = "0.1.0"