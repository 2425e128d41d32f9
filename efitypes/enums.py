"""Integer-backed enumerations that tolerate unknown values."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar


def _is_variant_name(name: str) -> bool:
    return name.isidentifier() and not name.startswith("_") and name.isupper()


class NewtypeEnum:
    """An integer newtype with named constants.

    Unlike ``enum.Enum``, any integer is accepted; values that match a named
    constant are displayed by that name, others as ``TypeName(value)``.
    Subclasses declare constants as upper-case integer class attributes.
    """

    __slots__ = ("_value",)
    _variants: ClassVar[dict[str, int]] = {}

    def __init_subclass__(
        cls, members: Mapping[str, int] | Iterable[tuple[str, int]] | None = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        variants = dict(cls._variants)
        if members is None:
            found = {
                key: value
                for key, value in vars(cls).items()
                if _is_variant_name(key)
                and isinstance(value, int)
                and not isinstance(value, bool)
            }
        else:
            items = members.items() if isinstance(members, Mapping) else members
            found = {}
            for key, value in items:
                if not key.isidentifier() or key.startswith("_"):
                    raise ValueError(f"invalid variant name: {key!r}")
                found[key] = operator.index(value)
        variants.update(found)
        cls._variants = variants
        for key, value in variants.items():
            setattr(cls, key, cls(value))

    def __init__(self, value: int) -> None:
        object.__setattr__(self, "_value", operator.index(value))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> int:
        """The underlying integer."""
        return self._value

    def name(self) -> str | None:
        """The name of the first constant with this value, or None."""
        for key, value in self._variants.items():
            if value == self._value:
                return key
        return None

    def __repr__(self) -> str:
        name = self.name()
        if name is not None:
            return name
        return f"{type(self).__name__}({self._value})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value


def newtype_enum(
    name: str, members: Mapping[str, int] | Iterable[tuple[str, int]]
) -> type[NewtypeEnum]:
    """Create a NewtypeEnum subclass called ``name`` with the given constants."""
    return type(name, (NewtypeEnum,), {}, members=members)