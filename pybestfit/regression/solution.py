"""
Line-fit solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pybestfit.core.config import OUTPUT_DECIMALS
from pybestfit.core.result import Result

if TYPE_CHECKING:
    from pybestfit.regression._sums import Sums


@dataclass(frozen=True)
class LineParams:
    """
    Parameter payload for y = slope·x + intercept.
    
    This is the immutable data computed by backends.
    """
    intercept: float
    slope: float
    mean_x: float
    sums: 'Sums'


def format_value(value: float, decimals: int = OUTPUT_DECIMALS) -> str:
    """Fixed-point text, never exponential (C's %lf)."""
    return f"{value:.{decimals}f}"


@dataclass
class LineSolution:
    """
    User-facing fit results.
    
    Wraps the backend Result and provides accessors plus the
    text report printed by the command-line tool.
    """
    _result: Result[LineParams]
    
    @property
    def intercept(self) -> float:
        """b: predicted y at x = 0."""
        return self._result.params.intercept
    
    @property
    def slope(self) -> float:
        """m: change in y per unit x."""
        return self._result.params.slope
    
    @property
    def mean_x(self) -> float:
        """x̄."""
        return self._result.params.mean_x
    
    @property
    def sums(self) -> 'Sums':
        return self._result.params.sums
    
    @property
    def n(self) -> int:
        return self._result.params.sums.n
    
    @property
    def y_at_mean(self) -> float:
        """Fitted y at x̄ (equals the mean of y for an OLS line)."""
        return self.predict(self.mean_x)
    
    def predict(self, x: float) -> float:
        """Fitted y at x."""
        return self.slope * x + self.intercept
    
    @property
    def info(self) -> dict[str, Any]:
        return self._result.info
    
    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing
    
    @property
    def backend_name(self) -> str:
        return self._result.backend_name
    
    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings
    
    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)
    
    def report(self) -> str:
        """The command-line output block."""
        lines = [
            "Best fit (OLS):",
            f"b={format_value(self.intercept)}",
            f"m={format_value(self.slope)}",
            "",
            f"y={format_value(self.y_at_mean)} at x=x̄={format_value(self.mean_x)}",
        ]
        return "\n".join(lines)
    
    def summary(self) -> str:
        """Longer description including the sums and backend."""
        sums = self.sums
        lines = [
            "Ordinary Least Squares Line",
            "=" * 48,
            f"Points: {self.n}",
            f"Line: y = {format_value(self.slope)}·x + {format_value(self.intercept)}",
            f"Mean x: {format_value(self.mean_x)}",
            "",
            "Sums:",
            "-" * 48,
            f"  Σx   {sums.sum_x:>24.6f}",
            f"  Σy   {sums.sum_y:>24.6f}",
            f"  Σx²  {sums.sum_x_squared:>24.6f}",
            f"  Σxy  {sums.sum_xy:>24.6f}",
            "-" * 48,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        
        return "\n".join(lines)
    
    def __repr__(self) -> str:
        return (
            f"LineSolution(n={self.n}, intercept={self.intercept:.6g}, "
            f"slope={self.slope:.6g})"
        )
