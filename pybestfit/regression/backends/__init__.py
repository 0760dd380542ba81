"""
Line-fit backends.

Available backends:
    BestFitBackend: slope first, intercept derived from it
    LeastSquaresBackend: intercept and slope over a shared denominator
"""

from pybestfit.regression.backends.cpu import BestFitBackend, LeastSquaresBackend

__all__ = [
    "BestFitBackend",
    "LeastSquaresBackend",
]
