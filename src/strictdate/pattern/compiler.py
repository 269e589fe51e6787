"""Template compiler: CLDR-style pattern text to an immutable CompiledPattern.

- compile_pattern() returns tuple[CompiledPattern | None, tuple[InvalidPatternError, ...]]
- Never raises: every problem in the template is collected and returned
- Results are cached per template (compile once, reuse everywhere)

The letter set is a deliberate subset of CLDR date-pattern syntax. Only
numeric fields and UTC offsets are accepted. Everything that would need a
locale or a guess is rejected at compile time, before any input is seen.

Thread-safe. Pure function over the template string.

Python 3.13+.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from strictdate.constants import (
    ASCII_DIGITS,
    MAX_FRACTION_DIGITS,
    MAX_TEMPLATE_LENGTH,
    MAX_YEAR_DIGITS,
    PATTERN_CACHE_SIZE,
)
from strictdate.diagnostics import Diagnostic, ErrorTemplate, InvalidPatternError
from strictdate.enums import FieldKind, ZoneStyle

from .tokens import CompiledPattern, FieldSpec, Literal, PatternToken

__all__ = ["compile_pattern"]

logger = logging.getLogger(__name__)

# ==============================================================================
# LETTER TABLE
# ==============================================================================
# ruff: noqa: ERA001 - Documentation table is not commented-out code
#
#   Pattern | Field            | Digits
#   --------|------------------|----------------------------
#   y       | year             | 1-4, rendered unpadded
#   yyyy    | year             | exactly 4
#   M / MM  | month            | 1-2 / exactly 2
#   d / dd  | day of month     | 1-2 / exactly 2
#   H / HH  | hour 0-23        | 1-2 / exactly 2
#   m / mm  | minute           | 1-2 / exactly 2
#   s / ss  | second           | 1-2 / exactly 2
#   S..S    | fraction         | exactly n, n = 1..9
#   Z..ZZZ  | zone             | +HHMM
#   ZZZZ    | zone             | GMT, GMT+HH:MM
#   ZZZZZ   | zone             | Z, +HH:MM
#   X       | zone             | Z, +HH, +HHMM
#   XX XXXX | zone             | Z, +HHMM
#   XXX ... | zone             | Z, +HH:MM
#
# REJECTED ON PURPOSE:
#   Y       Week-based year. Equal to the calendar year except around New
#           Year, which is exactly when the confusion goes unnoticed.
#   yy      Two-digit year. Needs a century pivot, i.e. a guess.
#   MMM+    Month names. Locale-dependent text.
#   a h K k Twelve-hour clocks and day periods. Locale-dependent text.
#
# QUOTE ESCAPING (CLDR):
#   - Single quotes delimit literal text: 'T' -> "T"
#   - Two single quotes produce one: '' -> "'", also inside quoted text
#
# ==============================================================================


def _numeric(kind: FieldKind, letter: str) -> dict[int, FieldSpec]:
    return {
        1: FieldSpec(kind, 2, exact=False, letters=letter),
        2: FieldSpec(kind, 2, letters=letter * 2),
    }


_FIELD_TABLE: dict[str, dict[int, FieldSpec]] = {
    "y": {
        1: FieldSpec(FieldKind.YEAR_OF_ERA, MAX_YEAR_DIGITS, exact=False, letters="y"),
        4: FieldSpec(FieldKind.YEAR_OF_ERA, MAX_YEAR_DIGITS, letters="yyyy"),
    },
    "M": _numeric(FieldKind.MONTH_OF_YEAR, "M"),
    "d": _numeric(FieldKind.DAY_OF_MONTH, "d"),
    "H": _numeric(FieldKind.HOUR_24, "H"),
    "m": _numeric(FieldKind.MINUTE, "m"),
    "s": _numeric(FieldKind.SECOND, "s"),
    "S": {
        n: FieldSpec(FieldKind.SUBSECOND_FRACTION, n, letters="S" * n)
        for n in range(1, MAX_FRACTION_DIGITS + 1)
    },
    "Z": {
        n: FieldSpec(FieldKind.ZONE_OFFSET, n, zone_style=style, letters="Z" * n)
        for n, style in (
            (1, ZoneStyle.BASIC),
            (2, ZoneStyle.BASIC),
            (3, ZoneStyle.BASIC),
            (4, ZoneStyle.LOCALIZED_GMT),
            (5, ZoneStyle.ISO_EXTENDED),
        )
    },
    "X": {
        n: FieldSpec(FieldKind.ZONE_OFFSET, n, zone_style=style, letters="X" * n)
        for n, style in (
            (1, ZoneStyle.ISO_HOURS),
            (2, ZoneStyle.ISO_BASIC),
            (3, ZoneStyle.ISO_EXTENDED),
            (4, ZoneStyle.ISO_BASIC),
            (5, ZoneStyle.ISO_EXTENDED),
        )
    },
}

_ALLOWED_FORMS: dict[str, str] = {
    "y": "y, yyyy",
    "M": "M, MM",
    "d": "d, dd",
    "H": "H, HH",
    "m": "m, mm",
    "s": "s, ss",
    "S": "S through SSSSSSSSS",
    "Z": "Z through ZZZZZ",
    "X": "X through XXXXX",
}

_WEEK_BASED_YEAR_LETTER = "Y"
_QUOTE = "'"


@dataclass(frozen=True, slots=True)
class _RawToken:
    """Template slice before interpretation."""

    text: str
    offset: int
    is_letters: bool


def _tokenize_template(template: str) -> tuple[list[_RawToken], list[int]]:
    """Split a template into letter runs and literal text.

    Examples:
        "dd.MM.yyyy" -> dd | . | MM | . | yyyy
        "HH 'o''clock'" -> HH | " " | "o'clock"

    Returns:
        Tuple of (tokens, unterminated) where unterminated holds the offset of
        every opening quote that is never closed.
    """
    tokens: list[_RawToken] = []
    unterminated: list[int] = []
    i = 0
    n = len(template)

    while i < n:
        char = template[i]

        if char == _QUOTE:
            # '' outside a quoted section is a literal quote
            if i + 1 < n and template[i + 1] == _QUOTE:
                tokens.append(_RawToken(_QUOTE, i, is_letters=False))
                i += 2
                continue

            start = i
            i += 1
            literal_chars: list[str] = []
            closed = False

            while i < n:
                if template[i] == _QUOTE:
                    if i + 1 < n and template[i + 1] == _QUOTE:
                        literal_chars.append(_QUOTE)
                        i += 2
                    else:
                        i += 1
                        closed = True
                        break
                else:
                    literal_chars.append(template[i])
                    i += 1

            if not closed:
                unterminated.append(start)
            elif literal_chars:
                tokens.append(_RawToken("".join(literal_chars), start, is_letters=False))
            continue

        # CLDR reserves ASCII letters only; other scripts are literal text
        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and template[j] == char:
                j += 1
            tokens.append(_RawToken(template[i:j], i, is_letters=True))
            i = j
            continue

        tokens.append(_RawToken(char, i, is_letters=False))
        i += 1

    return tokens, unterminated


def _append_literal(tokens: list[PatternToken], text: str) -> None:
    if tokens and isinstance(tokens[-1], Literal):
        tokens[-1] = Literal(tokens[-1].text + text)
    else:
        tokens.append(Literal(text))


def compile_pattern(
    template: str,
) -> tuple[CompiledPattern | None, tuple[InvalidPatternError, ...]]:
    """Compile a template into an immutable pattern.

    Never raises. Errors are returned in tuple.

    Args:
        template: CLDR-style date pattern (e.g. "yyyy-MM-dd'T'HH:mm:ss.SSSSSS")

    Returns:
        Tuple of (result, errors):
        - result: CompiledPattern, or None if the template was rejected
        - errors: Tuple of InvalidPatternError (empty tuple on success)

    Examples:
        >>> pattern, errors = compile_pattern("dd/MM/yyyy")
        >>> errors
        ()
        >>> [spec.letters for spec in pattern.fields]
        ['dd', 'MM', 'yyyy']

        >>> pattern, errors = compile_pattern("YYYY-MM-dd")
        >>> pattern is None
        True
        >>> errors[0].diagnostic.code.name
        'PATTERN_WEEK_BASED_YEAR'

    Thread Safety:
        Thread-safe. Results are cached via functools.lru_cache; each call
        gets its own error instances.
    """
    # Runtime defense for untyped callers
    if not isinstance(template, str):
        diagnostic = ErrorTemplate.pattern_not_string(type(template).__name__)  # type: ignore[unreachable]
        return (None, (InvalidPatternError(diagnostic),))

    pattern, rejections = _compile_cached(template)
    # Exceptions are mutable once raised; only the diagnostics are shared
    errors = tuple(
        InvalidPatternError(diagnostic, template=template, offset=offset)
        for offset, diagnostic in rejections
    )
    return (pattern, errors)


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _compile_cached(
    template: str,
) -> tuple[CompiledPattern | None, tuple[tuple[int, Diagnostic], ...]]:
    """Compile a template; rejections are (offset, diagnostic) pairs."""
    if not template:
        return (None, ((-1, ErrorTemplate.pattern_empty()),))
    if len(template) > MAX_TEMPLATE_LENGTH:
        diagnostic = ErrorTemplate.pattern_too_long(len(template), MAX_TEMPLATE_LENGTH)
        return (None, ((-1, diagnostic),))

    raw_tokens, unterminated = _tokenize_template(template)
    rejections: list[tuple[int, Diagnostic]] = []
    tokens: list[PatternToken] = []
    first_offsets: dict[FieldKind, int] = {}
    # Field token immediately before the current one, with no literal between
    previous: tuple[FieldSpec, _RawToken] | None = None

    def reject(offset: int, diagnostic: Diagnostic) -> None:
        rejections.append((offset, diagnostic))

    def reject_ambiguous(following: str) -> None:
        if previous is not None and previous[0].is_variable_width:
            prev_spec, prev_raw = previous
            reject(
                prev_raw.offset,
                ErrorTemplate.pattern_ambiguous_adjacent_fields(
                    template, prev_raw.offset, prev_spec.letters, following
                ),
            )

    for raw in raw_tokens:
        if not raw.is_letters:
            # A digit right after a variable-width field would be read as
            # part of that field
            if raw.text[0] in ASCII_DIGITS:
                reject_ambiguous(raw.text[0])
            _append_literal(tokens, raw.text)
            previous = None
            continue

        run = raw.text
        letter = run[0]

        if letter == _WEEK_BASED_YEAR_LETTER:
            reject(raw.offset, ErrorTemplate.pattern_week_based_year(template, raw.offset, run))
            previous = None
            continue

        forms = _FIELD_TABLE.get(letter)
        if forms is None:
            reject(raw.offset, ErrorTemplate.pattern_unknown_letter(template, raw.offset, run))
            previous = None
            continue

        spec = forms.get(len(run))
        if spec is None:
            kind = next(iter(forms.values())).kind
            reject(
                raw.offset,
                ErrorTemplate.pattern_unsupported_width(
                    template, raw.offset, run, str(kind), _ALLOWED_FORMS[letter]
                ),
            )
            previous = None
            continue

        if spec.kind in first_offsets:
            reject(
                raw.offset,
                ErrorTemplate.pattern_duplicate_field(
                    template, raw.offset, run, str(spec.kind), first_offsets[spec.kind]
                ),
            )
        else:
            first_offsets[spec.kind] = raw.offset

        reject_ambiguous(run)
        tokens.append(spec)
        previous = (spec, raw)

    for offset in unterminated:
        reject(offset, ErrorTemplate.pattern_unterminated_quote(template, offset))

    if rejections:
        rejections.sort(key=lambda rejection: rejection[0])
        logger.debug("Rejected pattern %r with %d error(s)", template, len(rejections))
        return (None, tuple(rejections))

    pattern = CompiledPattern(template=template, tokens=tuple(tokens))
    logger.debug(
        "Compiled pattern %r into %d token(s), fields: %s",
        template,
        len(pattern.tokens),
        ", ".join(spec.letters for spec in pattern.fields),
    )
    return (pattern, ())
