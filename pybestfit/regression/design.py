"""
Point Design.

The design is the one owned container of points for a fit: two float64
vectors of equal length, in input order. Sources build it once; the
summation engine and backends only read it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybestfit.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
)


@dataclass(frozen=True)
class Point:
    """An immutable (x, y) pair."""
    x: float
    y: float
    
    def swapped(self) -> Point:
        return Point(self.y, self.x)


@dataclass(frozen=True)
class PointDesign:
    """
    Ordered sequence of points for a linear fit.
    
    Immutable after construction. Duplicates are allowed and order is
    preserved. An empty design is legal to build; the fit operations
    reject it.
    
    Construction:
        PointDesign.from_points([(1, 2), (2, 4)])
        PointDesign.from_points([Point(1, 2), Point(2, 4)])
        PointDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    
    @classmethod
    def from_points(cls, points: Iterable[Point | tuple[float, float]]) -> PointDesign:
        """Build from Point objects or (x, y) pairs."""
        xs: list[float] = []
        ys: list[float] = []
        for point in points:
            if isinstance(point, Point):
                x, y = point.x, point.y
            else:
                x, y = point
            xs.append(x)
            ys.append(y)
        return cls.from_arrays(xs, ys)
    
    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> PointDesign:
        """Build directly from coordinate vectors."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr)
    
    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> PointDesign:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_finite(x, 'x')
        check_finite(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        
        # Own the storage; callers may keep mutating their arrays
        x = x.copy()
        y = y.copy()
        x.flags.writeable = False
        y.flags.writeable = False
        
        return cls(_x=x, _y=y, _n=x.shape[0])
    
    # === Properties ===
    
    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """x-coordinates (n,)."""
        return self._x
    
    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """y-coordinates (n,)."""
        return self._y
    
    @property
    def n(self) -> int:
        """Number of points."""
        return self._n
    
    def points(self) -> list[Point]:
        """Points in input order."""
        return [Point(float(x), float(y)) for x, y in zip(self._x, self._y)]
    
    def swapped(self) -> PointDesign:
        """New design with x and y exchanged on every point."""
        return PointDesign._build(self._y, self._x)
    
    def __len__(self) -> int:
        return self._n
    
    def __iter__(self) -> Iterator[Point]:
        return iter(self.points())
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointDesign):
            return NotImplemented
        return (
            self._n == other._n
            and np.array_equal(self._x, other._x)
            and np.array_equal(self._y, other._y)
        )
    
    def __repr__(self) -> str:
        return f"PointDesign(n={self._n})"


def as_design(points: PointDesign | Iterable[Point | tuple[float, float]]) -> PointDesign:
    """Accept a design or any iterable of points."""
    if isinstance(points, PointDesign):
        return points
    return PointDesign.from_points(points)
