"""Instafilter: photo filters with a catalog of adjustable parameters."""

__version__ = "1.0.0"
