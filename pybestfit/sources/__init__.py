"""
Point sources.

Two interchangeable ways to acquire points, both satisfying the
PointSource protocol:

    ArgumentPairsSource(tokens)      - x₁ y₁ x₂ y₂ ... from the command line
    DelimitedFileSource(path, swap)  - numbers separated by anything else

Convenience functions return a PointDesign directly and report
non-fatal problems through warnings.warn:

    parse_arguments(tokens)
    read_points(path, swap=False)
    parse_points_text(text, swap=False)   (returns SourceResult)

format_points() / write_points() produce text that reads back unchanged.
"""

from pybestfit.sources._common import SourceResult
from pybestfit.sources._tokenizer import tokenize_stream
from pybestfit.sources.arguments import ArgumentPairsSource, parse_arguments
from pybestfit.sources.delimited import (
    DelimitedFileSource,
    read_stream,
    read_points,
    parse_points_text,
    format_points,
    write_points,
)

__all__ = [
    "SourceResult",
    "ArgumentPairsSource",
    "DelimitedFileSource",
    "parse_arguments",
    "read_stream",
    "read_points",
    "parse_points_text",
    "format_points",
    "write_points",
    "tokenize_stream",
]
