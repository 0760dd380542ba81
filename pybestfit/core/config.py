"""
Fixed settings for pybestfit.

There are no config files or environment variables; everything the
program can be tuned by lives here as a module constant.
"""

# Longest run of numeric characters accepted as one token in file mode
MAX_TOKEN_LENGTH = 256

# Characters that make up a numeric token in file mode
NUMERIC_CHARACTERS = frozenset('0123456789.-')

# Decimal places in printed output (matches C's %lf)
OUTPUT_DECIMALS = 6

# Chunk size used when streaming a data file
READ_CHUNK_SIZE = 64 * 1024

# Process exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 2

__all__ = [
    'MAX_TOKEN_LENGTH',
    'NUMERIC_CHARACTERS',
    'OUTPUT_DECIMALS',
    'READ_CHUNK_SIZE',
    'EXIT_OK',
    'EXIT_USAGE',
    'EXIT_FAILURE',
]
