"""Raw field values captured while walking a pattern.

ParsedFields lives for one parse call only. It records what was read and
where, without judging whether the values form a date: range checks belong
to the normalizer.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from strictdate.enums import FieldKind

__all__ = ["ParsedField", "ParsedFields"]


@dataclass(frozen=True, slots=True)
class ParsedField:
    """One field value read from the input.

    Attributes:
        kind: Field that was read
        value: Integer value. For SUBSECOND_FRACTION this is the digits read
            as an integer (scale with ``digits``); for ZONE_OFFSET the signed
            total in minutes
        digits: Number of input characters consumed
        offset: Input offset where the field starts
        parts: Zone offsets only: (sign, hours, minutes) as read
    """

    kind: FieldKind
    value: int
    digits: int
    offset: int
    parts: tuple[int, int, int] | tuple[()] = ()


class ParsedFields:
    """Mapping of FieldKind to ParsedField, built during one parse.

    Attributes:
        source: The input string the fields were read from
    """

    __slots__ = ("_fields", "source")

    def __init__(self, source: str) -> None:
        self.source = source
        self._fields: dict[FieldKind, ParsedField] = {}

    def record(self, field: ParsedField) -> None:
        """Store a field. Each kind is recorded at most once.

        Raises:
            ValueError: If the kind was already recorded (compile_pattern
                never produces such a pattern)
        """
        if field.kind in self._fields:
            msg = f"Field {field.kind} recorded twice"
            raise ValueError(msg)
        self._fields[field.kind] = field

    def get(self, kind: FieldKind) -> ParsedField | None:
        return self._fields.get(kind)

    def value(self, kind: FieldKind, default: int | None = None) -> int | None:
        """Integer value for kind, or default when absent."""
        field = self._fields.get(kind)
        return default if field is None else field.value

    def __contains__(self, kind: object) -> bool:
        return kind in self._fields

    def __iter__(self) -> Iterator[ParsedField]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        values = ", ".join(f"{f.kind}={f.value}" for f in self._fields.values())
        return f"ParsedFields({values})"
