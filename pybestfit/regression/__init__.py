"""
Ordinary least squares line fitting.

Public API:
    fit(points, ...) -> LineSolution
    fit_source(source, ...) -> LineSolution
    best_fit(points) -> (b, m)
    least_squares(points) -> (a, b)
    mean(points) -> x̄
    compute_sums(points) -> Sums

fit() handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pybestfit.regression import fit
    >>> result = fit([(1, 2), (2, 4), (3, 6)])
    >>> print(result.report())
"""

from pybestfit.regression.design import Point, PointDesign
from pybestfit.regression.solution import LineSolution, LineParams
from pybestfit.regression._sums import Sums, compute_sums
from pybestfit.regression.solvers import (
    fit,
    fit_source,
    best_fit,
    least_squares,
    mean,
)

__all__ = [
    "fit",
    "fit_source",
    "best_fit",
    "least_squares",
    "mean",
    "compute_sums",
    "Sums",
    "Point",
    "PointDesign",
    "LineSolution",
    "LineParams",
]
