"""
Character-level tokenizer for delimited numeric text.

A token is a run of digits, '.' and '-'. Every other character is a
delimiter. Runs of delimiters produce no empty tokens, and the token
still open at end of input is emitted.
"""

from __future__ import annotations

from typing import Iterator, TextIO

from pybestfit.core.config import MAX_TOKEN_LENGTH, NUMERIC_CHARACTERS, READ_CHUNK_SIZE
from pybestfit.core.exceptions import ParseOverflowError


def tokenize_stream(
    stream: TextIO,
    *,
    source: str = '<stream>',
    max_length: int = MAX_TOKEN_LENGTH,
    chunk_size: int = READ_CHUNK_SIZE,
) -> Iterator[tuple[str, int]]:
    """
    Yield (token, offset) pairs from a text stream.
    
    Args:
        stream: Open text stream, read in chunks
        source: Name used in error messages
        max_length: Longest token accepted
        chunk_size: Characters per read
        
    Yields:
        The token text and the character offset where it starts
        
    Raises:
        ParseOverflowError: As soon as a token grows past max_length
    """
    buffer: list[str] = []
    start = 0
    offset = 0
    
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        for char in chunk:
            if char in NUMERIC_CHARACTERS:
                if not buffer:
                    start = offset
                if len(buffer) >= max_length:
                    preview = ''.join(buffer[:16])
                    raise ParseOverflowError(
                        f"{source} at {start}: numeric token longer than "
                        f"{max_length} characters ({preview!r}...)",
                        token=''.join(buffer),
                        position=start,
                        source=source,
                        limit=max_length,
                    )
                buffer.append(char)
            elif buffer:
                yield ''.join(buffer), start
                buffer.clear()
            offset += 1
    
    if buffer:
        yield ''.join(buffer), start
