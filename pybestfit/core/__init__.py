"""
Core infrastructure for pybestfit.

Shared abstractions used by the regression and sources subpackages.

Key components:
    protocols: PointSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    config: Fixed settings (token limit, output precision, exit codes)
    compute: Timing and tolerance tiers
"""

from pybestfit.core.protocols import PointSource, Backend
from pybestfit.core.result import Result
from pybestfit.core.exceptions import (
    PyBestFitError,
    ValidationError,
    DimensionError,
    UsageError,
    TokenParseError,
    ParseOverflowError,
    FileError,
    NumericalError,
    DegenerateInputError,
)

__all__ = [
    # Protocols
    "PointSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyBestFitError",
    "ValidationError",
    "DimensionError",
    "UsageError",
    "TokenParseError",
    "ParseOverflowError",
    "FileError",
    "NumericalError",
    "DegenerateInputError",
]
