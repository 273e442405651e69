"""Shipmap: incremental grid exploration and path metrics."""

__version__ = "1.0.0"
