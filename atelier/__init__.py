"""Zen Atelier - room decoration loop orchestration."""

__version__ = "0.1.0"
