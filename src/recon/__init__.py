"""Recon: financial health scores, signals and ticker search."""

__version__ = "0.1.0"
