"""Shared pieces for point sources."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from pybestfit.core.exceptions import TokenParseError
from pybestfit.regression.design import PointDesign


@dataclass(frozen=True)
class SourceResult:
    """
    What a PointSource hands back.
    
    Attributes:
        design: The acquired points
        warnings: Non-fatal problems met while reading
    """
    design: PointDesign
    warnings: tuple[str, ...] = field(default_factory=tuple)


def parse_number(token: str, *, position: int | None, source: str) -> float:
    """
    Read one token as a finite real number.
    
    Raises:
        TokenParseError: If the token is not a finite number
    """
    where = f"{source}" if position is None else f"{source} at {position}"
    try:
        value = float(token)
    except ValueError as e:
        raise TokenParseError(
            f"{where}: cannot parse {token!r} as a number",
            token=token,
            position=position,
            source=source,
        ) from e
    
    if not math.isfinite(value):
        raise TokenParseError(
            f"{where}: {token!r} is not a finite number",
            token=token,
            position=position,
            source=source,
        )
    return value
