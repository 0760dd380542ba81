"""
pybestfit: ordinary least squares line fitting for 2-D points.

Fits y = m·x + b to points given on the command line or read from a
delimited text file.

Submodules:
    regression: Summation engine, fit calculator, solutions
    sources: Command-line and delimited-file point sources
    cli: The ``regression`` command
"""

__version__ = "0.1.0"

from pybestfit import regression
from pybestfit import sources
from pybestfit.regression import fit, best_fit, least_squares, mean

__all__ = [
    "__version__",
    "regression",
    "sources",
    "fit",
    "best_fit",
    "least_squares",
    "mean",
]
