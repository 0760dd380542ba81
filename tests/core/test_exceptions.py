"""
Tests for the pybestfit exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyBestFitError)
    - Diagnostic attributes on TokenParseError, ParseOverflowError,
      FileError, DegenerateInputError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pybestfit.core.exceptions import (
    DegenerateInputError,
    DimensionError,
    FileError,
    NumericalError,
    ParseOverflowError,
    PyBestFitError,
    TokenParseError,
    UsageError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyBestFitError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        UsageError,
        TokenParseError,
        ParseOverflowError,
        FileError,
        NumericalError,
        DegenerateInputError,
    ])
    def test_is_pybestfit_error(self, exc_type):
        with pytest.raises(PyBestFitError):
            raise exc_type("boom")

    def test_usage_error_is_validation_error(self):
        assert issubclass(UsageError, ValidationError)

    def test_overflow_is_token_parse_error(self):
        assert issubclass(ParseOverflowError, TokenParseError)

    def test_degenerate_is_numerical_error(self):
        assert issubclass(DegenerateInputError, NumericalError)

    def test_file_error_is_not_validation_error(self):
        err = FileError("missing", path="a.csv")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestTokenParseError:

    def test_all_attributes(self):
        err = TokenParseError("bad", token="1.2.3", position=7, source="data.csv")
        assert str(err) == "bad"
        assert err.token == "1.2.3"
        assert err.position == 7
        assert err.source == "data.csv"

    def test_defaults_are_none(self):
        err = TokenParseError("bad")
        assert err.token is None
        assert err.position is None
        assert err.source is None


class TestParseOverflowError:

    def test_limit_and_inherited_attributes(self):
        err = ParseOverflowError("too long", token="1" * 300, position=0,
                                 source="big.csv", limit=256)
        assert err.limit == 256
        assert err.source == "big.csv"
        assert len(err.token) == 300

    def test_catchable_as_token_parse_error(self):
        with pytest.raises(TokenParseError) as exc_info:
            raise ParseOverflowError("too long", limit=256)
        assert exc_info.value.limit == 256


class TestFileError:

    def test_path(self):
        err = FileError("Could not read data file 'x.csv'", path="x.csv")
        assert err.path == "x.csv"
        assert "x.csv" in str(err)

    def test_default_path(self):
        assert FileError("nope").path is None


class TestDegenerateInputError:

    def test_attributes(self):
        err = DegenerateInputError("zero x-variance", n=3, denominator=0.0)
        assert err.n == 3
        assert err.denominator == 0.0

    def test_defaults_are_none(self):
        err = DegenerateInputError("empty dataset")
        assert err.n is None
        assert err.denominator is None
