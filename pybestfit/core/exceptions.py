"""
Exception hierarchy for pybestfit.

All exceptions inherit from PyBestFitError to allow catching any
library-specific error. The CLI is the only place that turns these
into messages and exit codes.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyBestFitError(Exception):
    """Base exception for all pybestfit errors."""
    pass


class ValidationError(PyBestFitError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Vector shapes are incorrect or inconsistent.
    
    Raised when x and y have different lengths or are not 1-D.
    """
    pass


class UsageError(ValidationError):
    """
    Command-line arguments are insufficient or malformed.
    
    The CLI prints the usage text and exits with status 1.
    """
    pass


class TokenParseError(ValidationError):
    """
    A token could not be read as a real number.
    
    Attributes:
        token: The offending text
        position: Zero-based character offset (file mode) or argument
            index (CLI mode), if known
        source: File path or 'arguments'
    """
    
    def __init__(
        self,
        message: str,
        token: str | None = None,
        position: int | None = None,
        source: str | None = None,
    ):
        super().__init__(message)
        self.token = token
        self.position = position
        self.source = source


class ParseOverflowError(TokenParseError):
    """
    A numeric token exceeded the maximum token length.
    
    The whole parse is abandoned; no points are returned.
    
    Attributes:
        limit: Maximum number of characters allowed in one token
    """
    
    def __init__(
        self,
        message: str,
        token: str | None = None,
        position: int | None = None,
        source: str | None = None,
        limit: int | None = None,
    ):
        super().__init__(message, token=token, position=position, source=source)
        self.limit = limit


class FileError(PyBestFitError):
    """
    A data file is missing or unreadable.
    
    Attributes:
        path: The file that could not be read
    """
    
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class NumericalError(PyBestFitError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    The dataset cannot define a line.
    
    Raised for an empty dataset, or when every x is identical so the
    denominator N·Σx² − (Σx)² vanishes and the slope is undefined.
    
    Attributes:
        n: Number of points
        denominator: The offending denominator, if computed
    """
    
    def __init__(
        self,
        message: str,
        n: int | None = None,
        denominator: float | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.denominator = denominator
