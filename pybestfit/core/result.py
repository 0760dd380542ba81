"""
Generic result container for pybestfit computations.

The Result class is the envelope every backend returns. It keeps timing,
backend identity and non-fatal warnings next to the parameter payload so
the solution wrapper and the CLI can report them uniformly.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, n)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a fit.
    
    Type Parameters:
        P: The parameter payload type
        
    Attributes:
        params: Parameters (intercept, slope, sums, ...)
        info: Structured metadata (method, n)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered while acquiring or fitting data
    
    Example:
        >>> Result(
        ...     params=LineParams(intercept=0.0, slope=2.0, mean_x=2.0, sums=sums),
        ...     info={'method': 'best_fit', 'n': 3},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_best_fit'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
