"""Compiled pattern token definitions.

A compiled pattern is an immutable tuple of tokens, each either a Literal
(text that must appear verbatim) or a FieldSpec (a numeric or zone field).
Compile once, then share the value freely: nothing in it can change.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from strictdate.constants import (
    MAX_FRACTION_DIGITS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from strictdate.enums import FieldKind, ZoneStyle

__all__ = [
    "CompiledPattern",
    "FieldSpec",
    "Literal",
    "PatternToken",
]


@dataclass(frozen=True, slots=True)
class Literal:
    """Text matched and rendered verbatim.

    Attributes:
        text: Non-empty literal text (quotes already resolved)
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            msg = "Literal.text must not be empty"
            raise ValueError(msg)

    @staticmethod
    def guard(token: object) -> TypeIs["Literal"]:
        """Type guard for Literal tokens."""
        return isinstance(token, Literal)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One field of a pattern.

    Attributes:
        kind: What the field denotes
        width: Digit count when exact, maximum digit count otherwise
        exact: Whether exactly ``width`` digits are required
        zone_style: Textual shape of a ZONE_OFFSET field (None otherwise)
        letters: The letter run the field was compiled from (e.g. "MM")
    """

    kind: FieldKind
    width: int
    exact: bool = True
    zone_style: ZoneStyle | None = None
    letters: str = ""

    def __post_init__(self) -> None:
        if self.width < 1:
            msg = f"FieldSpec.width must be >= 1, got {self.width}"
            raise ValueError(msg)
        if (self.kind is FieldKind.ZONE_OFFSET) != (self.zone_style is not None):
            msg = "FieldSpec.zone_style is required for zone fields and only for them"
            raise ValueError(msg)

    @staticmethod
    def guard(token: object) -> TypeIs["FieldSpec"]:
        """Type guard for FieldSpec tokens."""
        return isinstance(token, FieldSpec)

    @property
    def is_variable_width(self) -> bool:
        """True if the field's extent depends on the input."""
        return not self.exact or self.zone_style is ZoneStyle.ISO_HOURS


type PatternToken = Literal | FieldSpec


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Immutable, thread-safe compiled template.

    Invariants (established by compile_pattern):
        - Adjacent Literal tokens are merged
        - Each field kind appears at most once (checked on construction)
        - A variable-width field is never directly followed by a field or
          a literal starting with a digit

    Attributes:
        template: The source template
        tokens: Ordered literal and field tokens

    Raises:
        TypeError: If a token is neither a Literal nor a FieldSpec
        ValueError: If a field kind appears more than once
    """

    template: str
    tokens: tuple[PatternToken, ...]

    def __post_init__(self) -> None:
        seen: set[FieldKind] = set()
        for token in self.tokens:
            if isinstance(token, Literal):
                continue
            if not isinstance(token, FieldSpec):
                msg = (
                    "CompiledPattern tokens must be Literal or FieldSpec, "
                    f"got {type(token).__name__}"
                )
                raise TypeError(msg)
            if token.kind in seen:
                msg = f"CompiledPattern has more than one {token.kind} field"
                raise ValueError(msg)
            seen.add(token.kind)

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        """Field tokens in pattern order."""
        return tuple(token for token in self.tokens if isinstance(token, FieldSpec))

    @property
    def field_kinds(self) -> frozenset[FieldKind]:
        """Set of field kinds present in the pattern."""
        return frozenset(spec.kind for spec in self.fields)

    def has_field(self, kind: FieldKind) -> bool:
        """Check whether the pattern contains a field of the given kind."""
        return kind in self.field_kinds

    def field(self, kind: FieldKind) -> FieldSpec | None:
        """Return the field of the given kind, or None."""
        for spec in self.fields:
            if spec.kind is kind:
                return spec
        return None

    @property
    def resolution_nanos(self) -> int:
        """Smallest time step the pattern can render, in nanoseconds.

        Instants that are multiples of this value survive a format/parse
        round trip; finer digits are truncated by format_instant().

        Example:
            >>> pattern.template
            "HH:mm:ss.SSS"
            >>> pattern.resolution_nanos
            1000000
        """
        fraction = self.field(FieldKind.SUBSECOND_FRACTION)
        if fraction is not None:
            return 10 ** (MAX_FRACTION_DIGITS - fraction.width)
        kinds = self.field_kinds
        if FieldKind.SECOND in kinds:
            return NANOS_PER_SECOND
        if FieldKind.MINUTE in kinds:
            return NANOS_PER_MINUTE
        if FieldKind.HOUR_24 in kinds:
            return NANOS_PER_HOUR
        return NANOS_PER_DAY

    def __str__(self) -> str:
        return self.template
