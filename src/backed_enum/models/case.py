"""
Enum Case
=========

This module defines the base case contract shared by every backed enum.

Core Concepts:
    - EnumCase: One member of a closed set, carrying a name and a backing value
    - BackingValue: The primitive kinds a case may be backed by (str, int, float)

Contract:
    Every case type, composed or not, satisfies:

    case.name   -> str                  (read-only)
    case.value  -> str | int | float    (read-only)
    str(case)   -> str(case.value)      (unless a trait overrides __str__)

Identity:
    Cases are compared by identity. A backed enum creates each case exactly
    once, so `Role.ADMIN is Role.from_value(1)` holds for the lifetime of
    the collection.

Example:
    from backed_enum.models.case import EnumCase

    case = EnumCase("ACTIVE", "active")
    assert case.name == "ACTIVE"
    assert str(case) == "active"
"""

from typing import Generic, TypeVar, Union


BackingValue = Union[str, int, float]

K = TypeVar("K", bound=str)
V = TypeVar("V", bound=BackingValue)


def is_backing_value(candidate: object) -> bool:
    """Check whether `candidate` is a primitive that can back a case."""
    # bool is an int subclass, but True must never match a case backed by 1
    if isinstance(candidate, bool):
        return False
    return isinstance(candidate, (str, int, float))


class EnumCase(Generic[K, V]):
    """
    Base case of a backed enum.

    Holds the only state a case owns: its name and its backing value.
    Traits merged by `compose_case` contribute behavior on top of this
    class but never their own copy of `name` or `value`.

    Attributes:
        name: Case name as declared in the enum definition
        value: Backing primitive value
    """

    __slots__ = ("_name", "_value")

    def __init__(self, name: K, value: V) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_value", value)

    @property
    def name(self) -> K:
        return self._name

    @property
    def value(self) -> V:
        return self._value

    def __setattr__(self, key: str, value: object) -> None:
        if key in ("_name", "_value", "name", "value"):
            raise AttributeError(f"{type(self).__name__}.{key} is read-only")
        object.__setattr__(self, key, value)

    def __delattr__(self, key: str) -> None:
        if key in ("_name", "_value", "name", "value"):
            raise AttributeError(f"{type(self).__name__}.{key} is read-only")
        object.__delattr__(self, key)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}={self.value!r}>"
