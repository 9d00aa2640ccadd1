"""Child support worksheet calculator (primary and shared custody)."""

__version__ = "0.1.0"
