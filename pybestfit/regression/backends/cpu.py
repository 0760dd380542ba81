"""
CPU backends for the least-squares line.

Both backends evaluate the closed-form OLS solution from the sigma sums.
They differ only in how the formula is arranged:

    best_fit:       m = (N Σxy − Σx Σy) / (N Σx² − (Σx)²)
                    b = (Σy − m Σx) / N

    least_squares:  a = (Σy Σx² − Σx Σxy) / (N Σx² − (Σx)²)
                    b = (N Σxy − Σx Σy) / (N Σx² − (Σx)²)

least_squares' (a, b) are best_fit's (b, m). They agree up to rounding.
"""

from typing import Any

from pybestfit.core.result import Result
from pybestfit.core.compute.timing import Timer
from pybestfit.core.validation import check_not_empty, check_nonzero_variance, check_finite_fit
from pybestfit.regression.design import PointDesign
from pybestfit.regression.solution import LineParams
from pybestfit.regression._sums import Sums, compute_sums


def _checked_sums(design: PointDesign, timer: Timer) -> Sums:
    check_not_empty(design.n)
    with timer.section('sums'):
        sums = compute_sums(design)
    check_nonzero_variance(design.x, sums.denominator)
    return sums


def _result(name: str, method: str, params: LineParams, timer: Timer) -> Result[LineParams]:
    info: dict[str, Any] = {
        'method': method,
        'n': params.sums.n,
    }
    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=name,
        warnings=(),
    )


class BestFitBackend:
    """
    Slope first, then intercept from the slope.
    
    Implements the Backend protocol for PointDesign -> LineParams.
    """
    
    @property
    def name(self) -> str:
        return 'cpu_best_fit'
    
    def solve(self, design: PointDesign) -> Result[LineParams]:
        """
        Solve OLS for slope m and intercept b.
        
        Raises:
            DegenerateInputError: If the design is empty or x has no spread
            NumericalError: If the sums overflow to a non-finite line
        """
        timer = Timer()
        timer.start()
        
        sums = _checked_sums(design, timer)
        n = sums.n
        
        with timer.section('solve'):
            m = n * sums.sum_xy - sums.sum_x * sums.sum_y
            m /= sums.denominator
            b = sums.sum_y - m * sums.sum_x
            b /= n
            mean_x = sums.sum_x / n
        
        timer.stop()
        
        check_finite_fit(sums, intercept=b, slope=m, mean_x=mean_x)
        
        params = LineParams(intercept=b, slope=m, mean_x=mean_x, sums=sums)
        return _result(self.name, 'best_fit', params, timer)


class LeastSquaresBackend:
    """
    Intercept and slope each over the shared denominator.
    
    Implements the Backend protocol for PointDesign -> LineParams.
    """
    
    @property
    def name(self) -> str:
        return 'cpu_least_squares'
    
    def solve(self, design: PointDesign) -> Result[LineParams]:
        """
        Solve OLS for intercept a and slope b.
        
        Raises:
            DegenerateInputError: If the design is empty or x has no spread
            NumericalError: If the sums overflow to a non-finite line
        """
        timer = Timer()
        timer.start()
        
        sums = _checked_sums(design, timer)
        n = sums.n
        
        with timer.section('solve'):
            denominator = sums.denominator
            a = sums.sum_y * sums.sum_x_squared - sums.sum_x * sums.sum_xy
            a /= denominator
            b = n * sums.sum_xy - sums.sum_x * sums.sum_y
            b /= denominator
            mean_x = sums.sum_x / n
        
        timer.stop()
        
        check_finite_fit(sums, intercept=a, slope=b, mean_x=mean_x)
        
        params = LineParams(intercept=a, slope=b, mean_x=mean_x, sums=sums)
        return _result(self.name, 'least_squares', params, timer)
