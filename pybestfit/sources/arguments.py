"""
Points from command-line coordinate pairs.

Tokens pair up left to right: x₁ y₁ x₂ y₂ ... A trailing unpaired token
is dropped with a warning. Every token must be a number.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Sequence

from pybestfit.regression.design import PointDesign
from pybestfit.sources._common import SourceResult, parse_number

IGNORED_LAST_PARAM = "Ignoring last param!"


@dataclass(frozen=True)
class ArgumentPairsSource:
    """
    PointSource over a sequence of string tokens.
    
    Example:
        >>> ArgumentPairsSource(['1', '2', '2', '4']).load().design.n
        2
    """
    tokens: tuple[str, ...]
    
    def __init__(self, tokens: Sequence[str]):
        object.__setattr__(self, 'tokens', tuple(tokens))
    
    @property
    def description(self) -> str:
        return 'arguments'
    
    def load(self) -> SourceResult:
        """
        Parse the tokens into points.
        
        Raises:
            TokenParseError: If any paired token is not a finite number
        """
        n_pairs = len(self.tokens) // 2
        used = self.tokens[:2 * n_pairs]
        values = [
            parse_number(token, position=i, source='argument')
            for i, token in enumerate(used, start=1)
        ]
        design = PointDesign.from_arrays(values[0::2], values[1::2])
        
        found: tuple[str, ...] = ()
        if len(self.tokens) > len(used):
            found = (IGNORED_LAST_PARAM,)
        return SourceResult(design=design, warnings=found)


def parse_arguments(tokens: Sequence[str]) -> PointDesign:
    """
    Points from coordinate tokens.
    
    A dropped trailing token is reported with warnings.warn.
    """
    loaded = ArgumentPairsSource(tokens).load()
    for message in loaded.warnings:
        warnings.warn(message, UserWarning, stacklevel=2)
    return loaded.design
