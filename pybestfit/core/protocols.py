"""
Core protocols for pybestfit.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
a test double or a third-party reader fits without inheriting anything.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from pybestfit.core.result import Result
    from pybestfit.sources._common import SourceResult

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class PointSource(Protocol):
    """
    Anything that can produce a point sequence for a fit.
    
    Implementations (ArgumentPairsSource, DelimitedFileSource) acquire raw
    input, turn it into a design, and report non-fatal problems as
    warnings instead of raising.
    """
    
    @property
    def description(self) -> str:
        """Human-readable origin of the data ('arguments', a file path)."""
        ...
    
    def load(self) -> 'SourceResult':
        """
        Acquire the points.
        
        Returns:
            SourceResult with the design and any warnings
            
        Raises:
            TokenParseError: If a token is not a number
            ParseOverflowError: If a token is too long
            FileError: If the underlying file cannot be read
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.
    
    Each backend takes a design and produces a parameter payload. Backends
    are stateless, which makes them easy to test and swap.
    
    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}'
        Examples: 'cpu_best_fit', 'cpu_least_squares'
        """
        ...
    
    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.
        
        Raises:
            DegenerateInputError: If the design cannot define a line
        """
        ...
