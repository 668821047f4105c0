"""Custom exception hierarchy for honeycomb word search."""


class HoneycombError(Exception):
    """Base exception for honeycomb failures."""


class InputUnavailableError(HoneycombError):
    """Raised when a honeycomb or dictionary source cannot be read."""


class HoneycombFormatError(HoneycombError):
    """Raised when the honeycomb file header cannot be parsed."""


class GridGeometryError(HoneycombError):
    """Raised when ring sizes do not describe a hexagonal honeycomb."""


class ValidationError(HoneycombError):
    """Raised when the adjacency integrity checks fail."""
