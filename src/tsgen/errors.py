from __future__ import annotations


class TsgenError(Exception):
    """Base class for errors raised by tsgen."""


class CatalogError(TsgenError):
    """Raised when a catalog source cannot be read into the domain model."""


class UnknownDefinitionError(TsgenError):
    """Raised when a catalog entry matches no known type definition variant."""


class UnknownTypeError(TsgenError):
    """Raised when a type expression matches no known variant."""
