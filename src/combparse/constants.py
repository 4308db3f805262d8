"""Shared constants for combparse.

Centralized configuration values used by the parser driver and tracing.
Placing them here keeps the syntax and grammar packages free of
circular imports.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MAX_DEPTH",
    "MAX_SOURCE_SIZE",
    "TRACE_PREVIEW_LENGTH",
]

# Maximum source length (in characters) accepted by run().
# 10 MiB of text is far beyond any document the bundled grammars are meant
# for; larger inputs are rejected before any parser runs.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Maximum nesting depth for parsers wrapped in nested().
# Each level of a recursive grammar costs several Python frames, so the limit
# sits well below the default recursion limit of 1000. Deeper input, or input
# that exhausts the interpreter stack first, fails with NESTING_DEPTH.
MAX_DEPTH: int = 100

# Number of input characters shown in trace log records.
TRACE_PREVIEW_LENGTH: int = 40
