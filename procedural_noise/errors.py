"""
Custom exceptions for procedural_noise.

Numeric degeneracies (division by zero, negative logarithms, zero
smoothness...) never raise: they resolve to documented fallbacks in
safe_math. The exceptions below only report caller mistakes.

Exception Hierarchy:
    ProceduralNoiseError (base)
    ├── DimensionError
    └── UnknownEvaluatorError
"""


class ProceduralNoiseError(Exception):
    """Base exception for all procedural_noise errors."""
    pass


class DimensionError(ProceduralNoiseError, ValueError):
    """
    Raised when a coordinate does not have 1 to 4 components.

    Attributes:
        dimensions: The number of components that was received
    """

    def __init__(self, message: str, dimensions: int = None):
        super().__init__(message)
        self.dimensions = dimensions


class UnknownEvaluatorError(ProceduralNoiseError, KeyError):
    """Raised when a host asks the registry for an evaluator that does not exist."""

    def __init__(self, message: str, name: str = None):
        super().__init__(message)
        self.name = name

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message instead
        return self.args[0] if self.args else ''
