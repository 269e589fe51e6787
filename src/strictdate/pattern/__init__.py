"""Pattern compilation: template strings to immutable CompiledPattern values.

Public API:
    compile_pattern - Returns tuple[CompiledPattern | None, tuple[InvalidPatternError, ...]]
    CompiledPattern - Immutable token sequence, safe to share across threads
    Literal, FieldSpec - Token types

Python 3.13+. Zero external dependencies.
"""

from .compiler import compile_pattern
from .tokens import CompiledPattern, FieldSpec, Literal, PatternToken

__all__ = [
    "CompiledPattern",
    "FieldSpec",
    "Literal",
    "PatternToken",
    "compile_pattern",
]
