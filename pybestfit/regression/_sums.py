"""
Summation engine.

One pass over the points produces the four sigma sums that both fit
parameterizations need. Plain float64 accumulation, no compensated
summation: precision loss on ill-conditioned data is accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pybestfit.regression.design import Point, PointDesign, as_design


@dataclass(frozen=True)
class Sums:
    """Σx, Σy, Σx², Σxy over n points."""
    sum_x: float
    sum_y: float
    sum_x_squared: float
    sum_xy: float
    n: int
    
    @property
    def denominator(self) -> float:
        """N·Σx² − (Σx)², shared by every slope formula."""
        return self.n * self.sum_x_squared - self.sum_x * self.sum_x
    
    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.sum_x, self.sum_y, self.sum_x_squared, self.sum_xy)


def compute_sums(points: PointDesign | Iterable[Point | tuple[float, float]]) -> Sums:
    """
    Reduce points to their sigma sums.
    
    Pure function. Raises nothing; an empty design yields zero sums
    with n=0, and rejecting that is the caller's job.
    """
    design = as_design(points)
    
    sum_x = 0.0
    sum_y = 0.0
    sum_x_squared = 0.0
    sum_xy = 0.0
    for x, y in zip(design.x.tolist(), design.y.tolist()):
        sum_x += x
        sum_y += y
        sum_x_squared += x * x
        sum_xy += x * y
    
    return Sums(
        sum_x=sum_x,
        sum_y=sum_y,
        sum_x_squared=sum_x_squared,
        sum_xy=sum_xy,
        n=design.n,
    )
