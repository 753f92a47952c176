"""Utility helpers (lenient number parsing, filename normalisation)."""
