"""Property expense calculator: monthly expense normalization for a property portfolio."""

__version__ = "0.1.0"
