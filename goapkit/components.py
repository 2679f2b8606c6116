"""Base classes for typed state components, action markers and enum data."""

from __future__ import annotations

import enum
from typing import Any, ClassVar, Optional

from goapkit.action import Action
from goapkit.compare import Compare
from goapkit.datum import Datum, DatumKind
from goapkit.mutator import Mutator

_TYPE_KINDS = {bool: DatumKind.BOOL, int: DatumKind.I64, float: DatumKind.F64}


def to_snake_case(s: str) -> str:
    """Turn ``CamelCase`` into ``camel_case``; every capital starts a new word."""
    parts = []
    for char in s:
        if char.isupper():
            if parts:
                parts.append("_")
            parts.append(char.lower())
        else:
            parts.append(char)
    return "".join(parts)


def _resolve_kind(kind: Any) -> Optional[DatumKind]:
    if kind is None or isinstance(kind, DatumKind):
        return kind
    try:
        return _TYPE_KINDS[kind]
    except (KeyError, TypeError):
        raise TypeError(f"Unsupported type for DatumComponent: {kind!r}") from None


class DatumComponent:
    """A component holding one value that is mirrored into planner state.

    Subclasses choose the datum kind with a class keyword, either a
    :class:`DatumKind` or one of ``bool``, ``int`` and ``float``::

        class Hunger(DatumComponent, kind=float): ...

    The state key is the class name in snake case.
    """

    _kind: ClassVar[Optional[DatumKind]] = None

    def __init_subclass__(cls, kind: Any = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if kind is not None:
            cls._kind = _resolve_kind(kind)

    def __init__(self, value: Any) -> None:
        self.value = value
        self.field_value()

    @classmethod
    def _datum(cls, val: Any) -> Datum:
        kind = cls._kind
        if isinstance(val, Datum):
            datum = val
        elif kind is None or (kind is DatumKind.ENUM and isinstance(val, enum.Enum)):
            datum = Datum.of(val)
        else:
            datum = Datum(kind, val)
        if kind is not None and datum.kind is not kind:
            raise TypeError(f"{cls.__name__} holds {kind.name} data, got {val!r}")
        return datum

    def field_key(self) -> str:
        """The state key this component writes to."""
        return type(self).key()

    def field_value(self) -> Datum:
        """The component's value as a datum."""
        return self._datum(self.value)

    @classmethod
    def key(cls) -> str:
        """The state key: the class name in snake case."""
        return to_snake_case(cls.__name__)

    @classmethod
    def set(cls, val: Any) -> Mutator:
        """A mutator setting this component's key to ``val``."""
        return Mutator(Mutator.set(cls.key(), 0).kind, cls.key(), cls._datum(val))

    @classmethod
    def increase(cls, val: Any) -> Mutator:
        """A mutator increasing this component's key by ``val``."""
        return Mutator(Mutator.increment(cls.key(), 0).kind, cls.key(), cls._datum(val))

    @classmethod
    def decrease(cls, val: Any) -> Mutator:
        """A mutator decreasing this component's key by ``val``."""
        return Mutator(Mutator.decrement(cls.key(), 0).kind, cls.key(), cls._datum(val))

    @classmethod
    def is_(cls, val: Any) -> tuple[str, Compare]:
        """A precondition that the key equals ``val``."""
        return cls.key(), Compare(Compare.equals(0).kind, cls._datum(val))

    @classmethod
    def is_not(cls, val: Any) -> tuple[str, Compare]:
        """A precondition that the key differs from ``val``."""
        return cls.key(), Compare(Compare.not_equals(0).kind, cls._datum(val))

    @classmethod
    def is_more(cls, val: Any) -> tuple[str, Compare]:
        """A precondition that the key is at least ``val``."""
        return cls.key(), Compare(Compare.greater_than_equals(0).kind, cls._datum(val))

    @classmethod
    def is_less(cls, val: Any) -> tuple[str, Compare]:
        """A precondition that the key is at most ``val``."""
        return cls.key(), Compare(Compare.less_than_equals(0).kind, cls._datum(val))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class EnumComponent(DatumComponent, kind=DatumKind.ENUM):
    """A component holding an enum value.

    Enum values can only be set and compared for (in)equality. An optional
    ``enum_type`` class keyword restricts the accepted values::

        class AtLocation(EnumComponent, enum_type=Location): ...
    """

    _enum_type: ClassVar[Optional[type[enum.Enum]]] = None

    def __init_subclass__(cls, enum_type: Optional[type[enum.Enum]] = None, **kwargs: Any) -> None:
        if "kind" in kwargs:
            raise TypeError("EnumComponent always holds Enum data")
        super().__init_subclass__(**kwargs)
        if enum_type is not None:
            cls._enum_type = enum_type

    @classmethod
    def _datum(cls, val: Any) -> Datum:
        enum_type = cls._enum_type
        if enum_type is not None and not isinstance(val, (Datum, enum_type)):
            raise TypeError(f"{cls.__name__} needs a {enum_type.__name__}, got {val!r}")
        return super()._datum(val)

    @classmethod
    def increase(cls, val: Any) -> Mutator:
        raise TypeError("You cannot call .increase on a Enum!")

    @classmethod
    def decrease(cls, val: Any) -> Mutator:
        raise TypeError("You cannot call .decrease on a Enum!")

    @classmethod
    def is_more(cls, val: Any) -> tuple[str, Compare]:
        raise TypeError("You cannot call .is_more on a Enum!")

    @classmethod
    def is_less(cls, val: Any) -> tuple[str, Compare]:
        raise TypeError("You cannot call .is_less on a Enum!")


class ActionComponent:
    """A marker for an action; the action key is the class name in snake case."""

    @classmethod
    def key(cls) -> str:
        """The action key."""
        return to_snake_case(cls.__name__)

    @classmethod
    def action(cls) -> Action:
        """A new, empty action with this class's key."""
        return Action(cls.key())

    def action_type_name(self) -> str:
        """The name of the action's class."""
        return type(self).__name__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionComponent):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EnumDatum(enum.Enum):
    """An enum whose members can be used as Enum data.

    Members with integer values use that value as discriminant; others use
    their position in the enum.
    """

    def datum(self) -> Datum:
        """The member as an Enum datum."""
        return Datum.of(self)