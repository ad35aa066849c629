"""Clientele: customer entities built from validated names and contacts."""

__version__ = "0.1.0"
