"""Brand Investment Registry - track brand values and compare their returns."""

__version__ = "0.1.0"
