"""
Tests for the character-level tokenizer.
"""

import io

import pytest

from pybestfit.core.exceptions import ParseOverflowError
from pybestfit.sources import tokenize_stream


def tokens(text, **kwargs):
    return list(tokenize_stream(io.StringIO(text), **kwargs))


class TestTokenize:

    def test_comma_and_newline(self):
        assert tokens("1,2\n3,4\n") == [("1", 0), ("2", 2), ("3", 4), ("4", 6)]

    def test_runs_of_delimiters_give_no_empty_tokens(self):
        assert [t for t, _ in tokens("1,  \t2;;\n\n3")] == ["1", "2", "3"]

    def test_final_token_flushed_without_delimiter(self):
        assert [t for t, _ in tokens("10 20")] == ["10", "20"]

    def test_minus_and_dot_are_numeric(self):
        assert [t for t, _ in tokens("x=-1.5 y=.25")] == ["-1.5", ".25"]

    def test_letters_separate(self):
        assert [t for t, _ in tokens("a1b2c")] == ["1", "2"]

    def test_empty_input(self):
        assert tokens("") == []

    def test_tokens_span_chunks(self):
        assert tokens("123,456", chunk_size=2) == [("123", 0), ("456", 4)]


class TestOverflow:

    def test_token_at_limit_accepted(self):
        assert tokens("1" * 8 + ",2", max_length=8)[0][0] == "1" * 8

    def test_token_past_limit_raises(self):
        with pytest.raises(ParseOverflowError) as exc_info:
            tokens("5,2," + "9" * 9, max_length=8, source="big.csv")
        err = exc_info.value
        assert err.limit == 8
        assert err.position == 4
        assert err.source == "big.csv"

    def test_default_limit_is_256(self):
        assert tokens("1" * 256)[0][0] == "1" * 256
        with pytest.raises(ParseOverflowError):
            tokens("1" * 257)
