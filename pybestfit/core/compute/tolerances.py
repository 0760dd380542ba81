"""
Tolerance tiers for numerical comparison.

The two fit parameterizations are algebraic rearrangements of one
formula; they agree only up to floating-point rounding. These tiers say
how close is close enough, for the test suite and for callers comparing
results.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str
    
    def close(self, a: float, b: float) -> bool:
        """True if |a - b| <= atol + rtol * |b|."""
        return abs(a - b) <= self.atol + self.rtol * abs(b)


# best_fit vs least_squares on well-conditioned data
AGREEMENT = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='agreement',
    description='best_fit and least_squares agree to rounding',
)

# Values written at OUTPUT_DECIMALS places and read back
FORMATTED = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='formatted',
    description='round-trip through six-decimal fixed-point text',
)
