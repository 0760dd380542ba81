"""
Command-line entry point: ``regression``.

    regression [x1] [y1] ... [xn] [yn]
    regression -f <file>
    regression -xf <file>

This is the only place that prints messages or chooses exit codes.
Everything below it raises.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from pybestfit.core.config import EXIT_OK, EXIT_USAGE, EXIT_FAILURE
from pybestfit.core.exceptions import PyBestFitError, UsageError
from pybestfit.core.protocols import PointSource
from pybestfit.regression.solvers import fit_source
from pybestfit.sources import ArgumentPairsSource, DelimitedFileSource

USAGE = """\
regression
Ordinary Least Squares (OLS) linear regression analysis.
Calculates Y baseline b and slope m from set of {x,y} points.

Options:
  -f Specify CSV or other non-digit-separated file
  -xf Specify file and swap x and y values

Usage:
 regression [x₁] [y₁] ... [xₙ] [yₙ]
 regression -f [csv_file]
 regression -xf [csv_file]
CSV files can use any non-digit separator."""

_FILE_OPTIONS = ('-f', '-xf')
_HELP_OPTIONS = ('-h', '--help')


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""
    
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='regression', add_help=False, usage=argparse.SUPPRESS)
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-f', dest='file', metavar='FILE')
    group.add_argument('-xf', dest='swapped_file', metavar='FILE')
    parser.add_argument('-h', '--help', action='store_true', dest='help')
    parser.add_argument('coordinates', nargs='*')
    return parser


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """
    Parse the command line.
    
    Unless the first argument is a known option, every argument is a
    coordinate, so '-3' or '-5.' never read as options. After -f/-xf the
    next argument is always the path, even when it starts with '-', and
    nothing may follow it.
    
    Raises:
        UsageError: If the arguments cannot describe a dataset
    """
    argv = list(argv)
    if not argv:
        raise UsageError("no arguments")
    
    if argv[0] in _FILE_OPTIONS and len(argv) > 1:
        if len(argv) > 2:
            raise UsageError(f"unexpected arguments after {argv[0]} {argv[1]}: {argv[2:]}")
        # '-f=PATH' keeps argparse from reading a dash-leading path as an option
        argv = [f"{argv[0]}={argv[1]}"]
    elif argv[0] not in _FILE_OPTIONS + _HELP_OPTIONS:
        argv = ['--', *argv]
    args = build_parser().parse_args(argv)
    
    if args.help:
        return args
    
    has_file = args.file is not None or args.swapped_file is not None
    if has_file and args.coordinates:
        raise UsageError("coordinates cannot be combined with -f/-xf")
    if not has_file and len(args.coordinates) < 2:
        raise UsageError("at least one x y pair is required")
    return args


def select_source(args: argparse.Namespace) -> PointSource:
    """Pick the input strategy the arguments describe."""
    if args.file is not None:
        return DelimitedFileSource(args.file)
    if args.swapped_file is not None:
        return DelimitedFileSource(args.swapped_file, swap=True)
    return ArgumentPairsSource(args.coordinates)


def run(argv: Sequence[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the tool against explicit streams and return the exit status."""
    try:
        args = parse_args(argv)
    except UsageError:
        print(USAGE, file=stdout)
        return EXIT_USAGE
    
    if args.help:
        print(USAGE, file=stdout)
        return EXIT_OK
    
    try:
        solution = fit_source(select_source(args))
    except PyBestFitError as e:
        print(f"error: {e}", file=stderr)
        return EXIT_FAILURE
    
    for warning in solution.warnings:
        print(f"WARNING: {warning}", file=stderr)
    print(solution.report(), file=stdout)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, sys.stdout, sys.stderr)


if __name__ == '__main__':
    sys.exit(main())
