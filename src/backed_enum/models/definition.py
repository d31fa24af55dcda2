"""
Enum Definition
===============

Validated `case name -> backing value` mapping consumed by the enum factory.

Rules:
    - Keys are case names (str); order is preserved exactly as supplied
    - Values are backing primitives: str, int or finite float
      (bool, NaN and infinity are rejected)
    - Names that BackedEnum itself resolves (its API, slots and anything
      inherited) are rejected
    - The source mapping is copied, never mutated

Synthetic numeric reverse entries (as emitted by TypeScript numeric enums)
are NOT filtered here. Use `backed_enum.adapters.definition_from` at the
boundary where such a mapping enters the system.

Example:
    from backed_enum.models.definition import EnumDefinition

    definition = EnumDefinition.model_validate({"ADMIN": 1, "USER": 2})
    assert list(definition.keys()) == ["ADMIN", "USER"]
"""

from typing import Any, Dict, ItemsView, Iterator, KeysView, Mapping, Union

from pydantic import RootModel, StrictInt, StrictStr, confloat, field_validator


# NaN never equals itself, so a NaN-backed case could not be looked up
FiniteFloat = confloat(strict=True, allow_inf_nan=False)

# Attribute names owned by BackedEnum; a case with one of these names
# could never be reached through its named accessor. Anything else the
# class resolves (e.g. attributes inherited from typing.Generic) is
# rejected as well, see `validate_names`.
RESERVED_NAMES = frozenset({
    "cases",
    "case_class",
    "values",
    "from_value",
    "keys",
    "items",
    "get",
    "_name",
    "_case_class",
    "_cases",
    "_members",
    "_index",
})


class EnumDefinition(RootModel[Dict[StrictStr, Union[StrictInt, FiniteFloat, StrictStr]]]):
    """
    Ordered mapping from case name to backing value.

    Attributes:
        root: The validated mapping, in declaration order
    """

    @field_validator("root", mode="before")
    @classmethod
    def reject_bool_values(cls, v: Any) -> Any:
        """Reject bool values, which would otherwise pass as 0/1."""
        if isinstance(v, Mapping):
            for name, value in v.items():
                if isinstance(value, bool):
                    raise ValueError(f"Case {name!r} is backed by a bool")
        return v

    @field_validator("root")
    @classmethod
    def validate_names(
        cls, v: Dict[str, Union[int, float, str]]
    ) -> Dict[str, Union[int, float, str]]:
        """Reject case names that collide with the collection API."""
        from backed_enum.collection.factory import BackedEnum

        for name in v:
            if name.startswith("__") and name.endswith("__"):
                raise ValueError(f"Case name {name!r} must not be a dunder name")
            if name in RESERVED_NAMES or any(
                name in vars(klass) for klass in BackedEnum.__mro__
            ):
                raise ValueError(f"Case name {name!r} is reserved by BackedEnum")
        return v

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, name: str) -> Union[int, float, str]:
        return self.root[name]

    def keys(self) -> KeysView[str]:
        return self.root.keys()

    def items(self) -> ItemsView[str, Union[int, float, str]]:
        return self.root.items()
