"""Models for XLSX cell styles, conditional formatting rules and column settings."""

__version__ = "0.1.0"