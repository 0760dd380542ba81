"""
Input validation utilities for pybestfit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pybestfit.core.exceptions import (
    ValidationError,
    DimensionError,
    NumericalError,
    DegenerateInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.
    
    Rejects inputs that result in object dtype (mixed types) or any
    other non-numeric dtype (strings, bytes, datetimes).
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray of float64
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    
    # Empty lists come back as float64 already; bools and ints are promoted
    if result.size and not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )
    
    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.
    
    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).
    
    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)
        
    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )
    
    if len(arrays) < 2:
        return
    
    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_not_empty(n: int) -> None:
    """
    Verify the dataset holds at least one point.
    
    Raises:
        DegenerateInputError: If n is zero
    """
    if n < 1:
        raise DegenerateInputError("empty dataset: at least one point is required", n=n)


def check_nonzero_variance(
    x: NDArray[np.floating[Any]],
    denominator: float,
) -> None:
    """
    Verify x has spread, so the fit denominator N·Σx² − (Σx)² is usable.
    
    The denominator equals N² · var(x). It is rejected when every x is
    identical, when it is not finite, or when rounding has pushed it to
    zero or below.
    
    Args:
        x: x-coordinates
        denominator: N·Σx² − (Σx)² as computed from the sums
        
    Raises:
        DegenerateInputError: If the slope would be undefined
    """
    n = x.shape[0]
    if not np.isfinite(denominator):
        raise DegenerateInputError(
            f"degenerate fit: denominator not finite, sums overflowed (n={n}, denominator={denominator!r})",
            n=n,
            denominator=float(denominator),
        )
    if np.all(x == x[0]) or denominator <= 0.0:
        raise DegenerateInputError(
            f"degenerate fit: zero x-variance (n={n}, denominator={denominator!r})",
            n=n,
            denominator=float(denominator),
        )


def check_finite_fit(sums: Any, **values: float) -> None:
    """
    Verify computed fit quantities are finite.
    
    Large but finite coordinates can overflow the sums, after which the
    slope or intercept comes out as NaN or Inf.
    
    Args:
        sums: The sigma sums the values were derived from
        **values: Named results to check (slope=..., intercept=...)
        
    Raises:
        NumericalError: If any value is NaN or Inf
    """
    bad = {name: value for name, value in values.items() if not np.isfinite(value)}
    if bad:
        details = ", ".join(f"{name}={value!r}" for name, value in bad.items())
        raise NumericalError(
            f"fit overflowed: {details} (sums: Σx={sums.sum_x!r}, "
            f"Σy={sums.sum_y!r}, Σx²={sums.sum_x_squared!r}, Σxy={sums.sum_xy!r})"
        )
