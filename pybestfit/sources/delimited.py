"""
Points from delimited text files.

Any character that cannot belong to a number separates tokens, so CSV,
TSV, whitespace-separated and "x=1 y=2" style files all read the same
way. Tokens are taken strictly as x, y, x, y, ...

Limitations: no header skipping and no quoting. A field like "1,000"
reads as the two tokens 1 and 000.
"""

from __future__ import annotations

import io
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from pybestfit.core.config import MAX_TOKEN_LENGTH, OUTPUT_DECIMALS
from pybestfit.core.exceptions import FileError
from pybestfit.regression.design import PointDesign
from pybestfit.sources._common import SourceResult, parse_number
from pybestfit.sources._tokenizer import tokenize_stream


def read_stream(
    stream: TextIO,
    *,
    swap: bool = False,
    source: str = '<stream>',
    max_length: int = MAX_TOKEN_LENGTH,
) -> SourceResult:
    """
    Parse points from an open text stream.
    
    Args:
        stream: Text to read
        swap: Exchange x and y on every point after parsing
        source: Name used in error messages
        max_length: Longest numeric token accepted
        
    Raises:
        TokenParseError: If a token is not a number
        ParseOverflowError: If a token exceeds max_length
    """
    xs: list[float] = []
    ys: list[float] = []
    pending: tuple[str, int] | None = None
    
    for token, position in tokenize_stream(stream, source=source, max_length=max_length):
        value = parse_number(token, position=position, source=source)
        if pending is None:
            xs.append(value)
            pending = (token, position)
        else:
            ys.append(value)
            pending = None
    
    found: tuple[str, ...] = ()
    if pending is not None:
        xs.pop()
        token, position = pending
        found = (f"Ignoring unpaired trailing value {token!r} at {position} in {source}",)
    
    design = PointDesign.from_arrays(xs, ys)
    if swap:
        design = design.swapped()
    return SourceResult(design=design, warnings=found)


def parse_points_text(text: str, *, swap: bool = False) -> SourceResult:
    """Parse points from a string."""
    return read_stream(io.StringIO(text), swap=swap, source='<text>')


@dataclass(frozen=True)
class DelimitedFileSource:
    """
    PointSource over a delimited text file.
    
    Attributes:
        path: File to read
        swap: Exchange x and y on every point (for files whose columns
            are reversed)
        max_length: Longest numeric token accepted
    """
    path: Path
    swap: bool = False
    max_length: int = MAX_TOKEN_LENGTH
    
    def __post_init__(self):
        object.__setattr__(self, 'path', Path(self.path))
    
    @property
    def description(self) -> str:
        return str(self.path)
    
    def load(self) -> SourceResult:
        """
        Read and parse the file.
        
        The file is closed on every exit path, including parse errors.
        
        Raises:
            FileError: If the file cannot be opened or read
            TokenParseError: If a token is not a number
            ParseOverflowError: If a token exceeds max_length
        """
        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace', newline='') as handle:
                return read_stream(
                    handle,
                    swap=self.swap,
                    source=str(self.path),
                    max_length=self.max_length,
                )
        except OSError as e:
            reason = e.strerror or str(e)
            raise FileError(
                f"Could not read data file '{self.path}': {reason}",
                path=str(self.path),
            ) from e


def read_points(path: str | Path, *, swap: bool = False) -> PointDesign:
    """
    Points from a delimited file.
    
    An unpaired trailing value is reported with warnings.warn.
    """
    loaded = DelimitedFileSource(path, swap=swap).load()
    for message in loaded.warnings:
        warnings.warn(message, UserWarning, stacklevel=2)
    return loaded.design


def format_points(design: PointDesign, *, decimals: int = OUTPUT_DECIMALS) -> str:
    """
    One "x,y" line per point in fixed-point notation.
    
    The output reads back through the file parser as the same points,
    to within the printed precision.
    """
    lines = [
        f"{x:.{decimals}f},{y:.{decimals}f}"
        for x, y in zip(design.x.tolist(), design.y.tolist())
    ]
    return "".join(line + "\n" for line in lines)


def write_points(design: PointDesign, path: str | Path, *, decimals: int = OUTPUT_DECIMALS) -> None:
    """
    Write points as comma-separated lines.
    
    Raises:
        FileError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_text(format_points(design, decimals=decimals), encoding='utf-8')
    except OSError as e:
        raise FileError(
            f"Could not write data file '{path}': {e.strerror or e}",
            path=str(path),
        ) from e
