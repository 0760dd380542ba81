"""
Solver dispatch for line fitting.

This module provides fit() (public API), the two tuple-returning
parameterizations, mean(), and backend selection.
"""

from dataclasses import replace
from typing import Iterable, Literal

from pybestfit.core.protocols import PointSource
from pybestfit.core.validation import check_not_empty, check_finite_fit
from pybestfit.regression.design import Point, PointDesign, as_design
from pybestfit.regression.solution import LineSolution
from pybestfit.regression.backends.cpu import BestFitBackend, LeastSquaresBackend
from pybestfit.regression._sums import compute_sums


# Type alias for backend selection
MethodChoice = Literal['best_fit', 'least_squares']

Points = PointDesign | Iterable[Point | tuple[float, float]]


def fit(
    points: Points,
    *,
    method: MethodChoice = 'best_fit',
) -> LineSolution:
    """
    Fit the ordinary least squares line y = m·x + b.
    
    This is the primary public API. Validation, design construction,
    backend selection and result wrapping all happen here.
    
    Args:
        points: A PointDesign or any iterable of Point / (x, y) pairs
        method: Which arrangement of the closed-form solution to use:
            - 'best_fit': slope first, intercept from the slope
            - 'least_squares': both over the shared denominator
            
    Returns:
        LineSolution with intercept, slope, mean of x and the report text
        
    Raises:
        ValidationError: If coordinates are non-numeric or non-finite
        DimensionError: If x and y lengths differ
        DegenerateInputError: If there are no points or every x is equal
        
    Example:
        >>> from pybestfit.regression import fit
        >>> result = fit([(1, 2), (2, 4), (3, 6)])
        >>> result.slope, result.intercept
        (2.0, 0.0)
    """
    # This is the boundary - validate here, trust everywhere else
    design = as_design(points)
    
    backend_impl = _get_backend(method)
    
    result = backend_impl.solve(design)
    
    return LineSolution(_result=result)


def fit_source(
    source: PointSource,
    *,
    method: MethodChoice = 'best_fit',
) -> LineSolution:
    """
    Load points from a source and fit them.
    
    Warnings raised while acquiring the data (a dropped trailing
    coordinate, for instance) are carried on the returned solution.
    """
    loaded = source.load()
    solution = fit(loaded.design, method=method)
    result = replace(
        solution._result,
        info={**solution.info, 'source': source.description},
        warnings=loaded.warnings + solution.warnings,
    )
    return LineSolution(_result=result)


def best_fit(points: Points) -> tuple[float, float]:
    """
    Intercept b and slope m, slope computed first.
    
    Returns:
        (b, m)
        
    Raises:
        DegenerateInputError: If there are no points or every x is equal
    """
    params = BestFitBackend().solve(as_design(points)).params
    return params.intercept, params.slope


def least_squares(points: Points) -> tuple[float, float]:
    """
    Intercept a and slope b over the shared denominator.
    
    Returns:
        (a, b), where a is the intercept and b the slope
        
    Raises:
        DegenerateInputError: If there are no points or every x is equal
    """
    params = LeastSquaresBackend().solve(as_design(points)).params
    return params.intercept, params.slope


def mean(points: Points) -> float:
    """
    Arithmetic mean of the x-coordinates.
    
    Raises:
        DegenerateInputError: If there are no points
        NumericalError: If the sum of x overflows
    """
    design = as_design(points)
    check_not_empty(design.n)
    sums = compute_sums(design)
    mean_x = sums.sum_x / design.n
    check_finite_fit(sums, mean_x=mean_x)
    return mean_x


def _get_backend(choice: MethodChoice) -> BestFitBackend | LeastSquaresBackend:
    """
    Instantiate the backend for a method name.
    
    Raises:
        ValueError: If unknown method specified
    """
    if choice == 'best_fit':
        return BestFitBackend()
    elif choice == 'least_squares':
        return LeastSquaresBackend()
    else:
        raise ValueError(f"Unknown method: {choice!r}")
