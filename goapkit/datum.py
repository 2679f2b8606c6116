"""Typed scalar values held in planner state."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


class DatumKind(enum.Enum):
    """The kind of value a :class:`Datum` holds, in ordering precedence."""

    BOOL = 0
    I64 = 1
    F64 = 2
    ENUM = 3


_NAMES = {
    DatumKind.BOOL: "Bool",
    DatumKind.I64: "I64",
    DatumKind.F64: "F64",
    DatumKind.ENUM: "Enum",
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        if value == 0 and math.copysign(1.0, value) < 0:
            text = "-0"
        return text
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


@dataclass(frozen=True, eq=False)
class Datum:
    """One value: a bool, a 64-bit integer, a float or an enum discriminant."""

    kind: DatumKind
    value: Any

    def __post_init__(self) -> None:
        kind, value = self.kind, self.value
        if kind is DatumKind.BOOL:
            if not isinstance(value, bool):
                raise TypeError(f"Bool datum needs a bool, got {value!r}")
        elif kind is DatumKind.I64:
            if not _is_int(value):
                raise TypeError(f"I64 datum needs an int, got {value!r}")
            if not _I64_MIN <= value <= _I64_MAX:
                raise OverflowError(f"{value} does not fit in a 64-bit integer")
        elif kind is DatumKind.F64:
            if _is_int(value):
                object.__setattr__(self, "value", float(value))
            elif not isinstance(value, float):
                raise TypeError(f"F64 datum needs a float, got {value!r}")
        elif kind is DatumKind.ENUM:
            if not _is_int(value):
                raise TypeError(f"Enum datum needs an int, got {value!r}")
            if not 0 <= value <= _U64_MAX:
                raise OverflowError(f"{value} is not a valid enum discriminant")
        else:
            raise TypeError(f"unknown datum kind {kind!r}")

    @classmethod
    def of(cls, value: Any) -> Datum:
        """Build a datum from a plain Python value (or return a datum unchanged)."""
        if isinstance(value, Datum):
            return value
        if isinstance(value, enum.Enum):
            raw = value.value
            if _is_int(raw):
                return cls(DatumKind.ENUM, raw)
            return cls(DatumKind.ENUM, list(type(value)).index(value))
        if isinstance(value, bool):
            return cls(DatumKind.BOOL, value)
        if isinstance(value, int):
            return cls(DatumKind.I64, value)
        if isinstance(value, float):
            return cls(DatumKind.F64, value)
        raise TypeError(f"cannot make a Datum from {value!r}")

    def distance(self, other: Datum) -> int:
        """How far apart two data of the same kind are."""
        if self.kind is not other.kind:
            raise TypeError("Cannot calculate distance between different Datum types")
        if self.kind in (DatumKind.BOOL, DatumKind.ENUM):
            return 0 if self.value == other.value else 1
        if self.kind is DatumKind.I64:
            return abs(self.value - other.value)
        diff = abs(self.value - other.value)
        if math.isnan(diff):
            return 0
        if diff >= _U64_MAX:
            return _U64_MAX
        return int(diff)

    def _key(self) -> tuple[int, Any]:
        return (self.kind.value, self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __lt__(self, other: Datum) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Datum) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Datum) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Datum) -> bool:
        if not isinstance(other, Datum):
            return NotImplemented
        return self._key() >= other._key()

    def _arith(self, other: Datum, op: str) -> Datum:
        if (
            not isinstance(other, Datum)
            or self.kind is not other.kind
            or self.kind not in (DatumKind.I64, DatumKind.F64)
        ):
            raise TypeError(f"Unsupported {op} between Datum variants, {self!r} - {other!r}")
        if op == "addition":
            return Datum(self.kind, self.value + other.value)
        return Datum(self.kind, self.value - other.value)

    def __add__(self, other: Datum) -> Datum:
        return self._arith(other, "addition")

    def __sub__(self, other: Datum) -> Datum:
        return self._arith(other, "subtraction")

    def __str__(self) -> str:
        if self.kind is DatumKind.BOOL:
            text = "true" if self.value else "false"
        elif self.kind is DatumKind.F64:
            text = _format_float(self.value)
        else:
            text = str(self.value)
        return f"Datum:{_NAMES[self.kind]}({text})"

    def __repr__(self) -> str:
        return f"{_NAMES[self.kind]}({self.value!r})"