"""
Enum Factory
============

Builds a BackedEnum collection from an enum definition and a case type.

Construction (single pass, definition order):
    for name, value in definition:
        case = case_class(name, value)
        cases.append(case)           # ordered list
        index[value] = case          # reverse index, last write wins
        members[name] = case         # named accessor

Guarantees:
    - Identity: every access path yields the same case object
        Role.ADMIN is Role.cases[0] is Role.from_value(1) is Role["ADMIN"]
    - Order: `cases` follows the definition's key order, never value order
    - Shared values: both cases stay reachable by name and in `cases`,
      but the reverse index keeps only the later one
    - Frozen: attribute assignment and deletion raise AttributeError

Lookup (from_value):
    1. A case of this collection's case class -> look up its value again
    2. Anything that is not a str, int or float -> None
    3. Exact match in the reverse index -> case, or None on a miss

    Lookups never raise and never coerce between strings and numbers.

Example:
    from backed_enum import build_backed_enum

    Role = build_backed_enum({"ADMIN": 1, "USER": 2, "GUEST": 3}, name="Role")
    assert Role.ADMIN.value == 1
    assert Role.from_value(2) is Role.USER
    assert Role.values() == (1, 2, 3)
"""

import logging
from typing import (
    Any,
    Dict,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from backed_enum.models.case import BackingValue, EnumCase, is_backing_value
from backed_enum.models.definition import EnumDefinition


logger = logging.getLogger(__name__)


C = TypeVar("C", bound=EnumCase)


class BackedEnum(Generic[C]):
    """
    Collection of enum cases addressable by name, position and value.

    Instances are created by `build_backed_enum` and are read-only
    once constructed.

    Attributes:
        cases: Case instances in definition order
        case_class: Type used to construct every case
    """

    __slots__ = ("_name", "_case_class", "_cases", "_members", "_index")

    def __init__(
        self,
        definition: EnumDefinition,
        case_class: Type[C],
        name: str = "BackedEnum",
    ) -> None:
        cases: List[C] = []
        members: Dict[str, C] = {}
        index: Dict[BackingValue, C] = {}

        for key, value in definition.items():
            instance = case_class(key, value)

            cases.append(instance)
            index[value] = instance
            members[key] = instance

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_case_class", case_class)
        object.__setattr__(self, "_cases", tuple(cases))
        object.__setattr__(self, "_members", members)
        object.__setattr__(self, "_index", index)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @property
    def cases(self) -> Tuple[C, ...]:
        return self._cases

    @property
    def case_class(self) -> Type[C]:
        return self._case_class

    def values(self) -> Tuple[BackingValue, ...]:
        """Backing values in case order (duplicates kept)."""
        return tuple(case.value for case in self._cases)

    def from_value(self, candidate: Any) -> Optional[C]:
        """
        Look up the case backed by `candidate`.

        Args:
            candidate: A backing value, or a case of this collection's
                case class

        Returns:
            The matching case, or None if nothing matches
        """
        if isinstance(candidate, self._case_class):
            return self.from_value(candidate.value)

        if not is_backing_value(candidate):
            return None

        return self._index.get(candidate)

    def keys(self) -> Tuple[str, ...]:
        """Case names in definition order."""
        return tuple(self._members)

    def items(self) -> Tuple[Tuple[str, C], ...]:
        return tuple(self._members.items())

    def get(self, name: str, default: Optional[C] = None) -> Optional[C]:
        """Look up a case by name."""
        return self._members.get(name, default)

    # -------------------------------------------------------------------------
    # Named access
    # -------------------------------------------------------------------------

    def __getattr__(self, name: str) -> C:
        try:
            members = object.__getattribute__(self, "_members")
        except AttributeError:
            raise AttributeError(name) from None
        try:
            return members[name]
        except KeyError:
            raise AttributeError(
                f"{self._name} has no case named {name!r}"
            ) from None

    def __getitem__(self, name: str) -> C:
        return self._members[name]

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{self._name} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self._name} is read-only")

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._members))

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[C]:
        return iter(self._cases)

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, EnumCase):
            return any(case is item for case in self._cases)
        return self.from_value(item) is not None

    def __repr__(self) -> str:
        return f"<BackedEnum {self._name}: {', '.join(self._members)}>"


def build_backed_enum(
    definition: Union[EnumDefinition, Mapping[str, BackingValue]],
    case_class: Type[EnumCase] = EnumCase,
    name: str = "BackedEnum",
) -> BackedEnum:
    """
    Build a BackedEnum collection.

    Args:
        definition: Case name -> backing value mapping, free of synthetic
            numeric reverse entries (see `backed_enum.adapters`)
        case_class: Case type to instantiate, usually from `compose_case`
        name: Collection name used in repr and error messages

    Returns:
        A fully populated, read-only BackedEnum

    Raises:
        TypeError: If case_class is not an EnumCase subclass
        pydantic.ValidationError: If the definition is invalid
        Exception: Whatever case_class raises while constructing a case
    """
    if not (isinstance(case_class, type) and issubclass(case_class, EnumCase)):
        raise TypeError(f"case_class must be an EnumCase subclass, got {case_class!r}")

    if not isinstance(definition, EnumDefinition):
        definition = EnumDefinition.model_validate(definition)

    collection = BackedEnum(definition, case_class, name)

    logger.debug(
        f"Built backed enum {name}: "
        f"cases={len(collection)}, case_class={case_class.__name__}"
    )
    return collection
