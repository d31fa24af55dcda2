"""
Case Composer
=============

Merges independent behavior modules ("traits") into one case type.

Composition works by method-table merging, NOT multiple inheritance:
    1. Start from an empty namespace on top of EnumCase
    2. For each trait, in the order supplied:
         walk the trait's own MRO from its most basic class to the trait
         itself (EnumCase and object are skipped) and copy every attribute
         of each class __dict__ into the namespace
    3. Build a single subclass of EnumCase from the merged namespace

Conflict Policy:
    Later entries overwrite earlier ones, so the trait supplied LAST wins,
    and any trait wins over the EnumCase default (e.g. __str__).

State Rules:
    Traits contribute methods and derived accessors only. Constructors
    and the `name`/`value` fields are never copied, so construction always
    runs EnumCase.__init__ exactly once. A trait that declares non-empty
    __slots__ owns state and is rejected.

super():
    Copied functions that use zero-argument super() are rebuilt with their
    `__class__` cell pointing at the composed type, so `super()` inside a
    trait method resolves to EnumCase (e.g. `super().__str__()` renders
    the value). The trait's own functions are left untouched.

Example:
    from backed_enum.models import EnumCase
    from backed_enum.traits import compose_case

    class Comparable(EnumCase):
        def is_(self, other):
            return self.value == other.value

    RoleCase = compose_case(Comparable)
    admin = RoleCase("ADMIN", 1)
    assert admin.is_(RoleCase("ROOT", 1))
"""

import logging
from types import CellType, FunctionType
from typing import Any, Dict, Optional, Tuple, Type, Union

from backed_enum.models.case import EnumCase


logger = logging.getLogger(__name__)


# Entries that describe a class rather than its behavior, or that would
# give a trait its own copy of case state.
_EXCLUDED_ATTRIBUTES = frozenset({
    "__init__",
    "__new__",
    "__slots__",
    "__dict__",
    "__weakref__",
    "__module__",
    "__qualname__",
    "__doc__",
    "__orig_bases__",
    "__parameters__",
    "__annotations__",
    "__firstlineno__",
    "__static_attributes__",
    "__classcell__",
    "_name",
    "_value",
    "name",
    "value",
})


def _trait_chain(trait: type) -> Tuple[type, ...]:
    """Return the trait's own classes, most basic first."""
    return tuple(
        klass
        for klass in reversed(trait.__mro__)
        if klass is not object and not (
            issubclass(EnumCase, klass) and klass is not trait
        )
    )


def _rebind_function(func: FunctionType, class_cell: CellType) -> FunctionType:
    """Copy `func` with its `__class__` cell replaced, if it has one."""
    code = func.__code__
    if "__class__" not in code.co_freevars:
        return func

    closure = tuple(
        class_cell if free == "__class__" else cell
        for free, cell in zip(code.co_freevars, func.__closure__)
    )
    rebound = FunctionType(
        code, func.__globals__, func.__name__, func.__defaults__, closure
    )
    rebound.__kwdefaults__ = func.__kwdefaults__
    rebound.__qualname__ = func.__qualname__
    rebound.__doc__ = func.__doc__
    rebound.__module__ = func.__module__
    rebound.__annotations__ = dict(func.__annotations__)
    rebound.__dict__.update(func.__dict__)
    return rebound


def _rebind_member(member: Any, class_cell: CellType) -> Any:
    """Rebind zero-argument super() in functions, class/static methods and properties."""
    if isinstance(member, FunctionType):
        return _rebind_function(member, class_cell)

    if isinstance(member, (classmethod, staticmethod)):
        func = member.__func__
        if isinstance(func, FunctionType):
            rebound = _rebind_function(func, class_cell)
            if rebound is not func:
                return type(member)(rebound)
        return member

    if isinstance(member, property):
        accessors = tuple(
            _rebind_function(f, class_cell) if isinstance(f, FunctionType) else f
            for f in (member.fget, member.fset, member.fdel)
        )
        if accessors != (member.fget, member.fset, member.fdel):
            return type(member)(*accessors, member.__doc__)
        return member

    return member


def compose_case(*traits: type, name: Optional[str] = None) -> Type[EnumCase]:
    """
    Compose a case type from zero or more traits.

    Args:
        *traits: Behavior modules, merged left to right (last wins)
        name: Name of the new type (default: trait names + "Case")

    Returns:
        A new subclass of EnumCase constructed with `(name, value)`

    Raises:
        TypeError: If a trait is not a class, or declares __slots__
    """
    for trait in traits:
        if not isinstance(trait, type):
            raise TypeError(f"Trait must be a class, got {trait!r}")
        for klass in _trait_chain(trait):
            if klass is not EnumCase and vars(klass).get("__slots__"):
                raise TypeError(
                    f"Trait {trait.__name__} declares __slots__ on "
                    f"{klass.__name__}; traits must not own case state"
                )

    namespace: Dict[str, Any] = {}
    class_cell = CellType()

    for trait in traits:
        for klass in _trait_chain(trait):
            if klass is EnumCase:
                continue
            for attr, member in vars(klass).items():
                if attr in _EXCLUDED_ATTRIBUTES:
                    logger.debug(f"Skipping {klass.__name__}.{attr} while composing")
                    continue
                if attr in namespace:
                    logger.debug(f"{klass.__name__}.{attr} overrides earlier definition")
                namespace[attr] = _rebind_member(member, class_cell)

    type_name = name or (
        "".join(trait.__name__ for trait in traits) + "Case" if traits else "EnumCase"
    )
    namespace["__traits__"] = traits
    namespace["__module__"] = __name__
    namespace["__doc__"] = (
        f"Enum case composed from: {', '.join(t.__name__ for t in traits) or 'no traits'}"
    )

    composed = type(type_name, (EnumCase,), namespace)
    class_cell.cell_contents = composed

    logger.debug(f"Composed case type {type_name} from {len(traits)} trait(s)")
    return composed


def has_trait(case: Union[EnumCase, type], trait: type) -> bool:
    """
    Check whether a case (or case type) carries a trait.

    True if the trait was merged in by `compose_case`, or if the case type
    inherits from the trait directly.
    """
    case_type = case if isinstance(case, type) else type(case)
    for klass in case_type.__mro__:
        if trait in vars(klass).get("__traits__", ()):
            return True
    return issubclass(case_type, trait)
