"""
backed-enum
===========

Identity-stable enum cases with reverse lookup and trait composition.

A plain `name -> value` mapping becomes a collection of singleton case
objects, addressable by name, by position and by backing value. Behavior
is attached to cases by composing independent traits into one case type.

Components:
    - models: EnumCase base contract and the EnumDefinition schema
    - traits: compose_case() and the built-in traits
    - collection: build_backed_enum() and the BackedEnum collection
    - adapters: definitions from enum classes, TypeScript-style dicts, files
    - config: YAML/environment settings and logging setup

Example:
    from backed_enum import build_backed_enum, compose_case
    from backed_enum.traits import Comparable, Stringable

    RoleCase = compose_case(Comparable, Stringable)
    Role = build_backed_enum({"ADMIN": 1, "USER": 2}, RoleCase, name="Role")

    assert Role.from_value(2) is Role.USER
    assert str(Role.USER) == "USER"
    assert Role.ADMIN.is_not(Role.USER)
"""

__version__ = "0.1.0"

from backed_enum.adapters import definition_from, is_synthetic_key, load_definition
from backed_enum.collection import BackedEnum, build_backed_enum
from backed_enum.models import BackingValue, EnumCase, EnumDefinition
from backed_enum.traits import compose_case, has_trait

__all__ = [
    "__version__",
    # Models
    "EnumCase",
    "EnumDefinition",
    "BackingValue",
    # Composition
    "compose_case",
    "has_trait",
    # Factory
    "BackedEnum",
    "build_backed_enum",
    # Adapters
    "definition_from",
    "is_synthetic_key",
    "load_definition",
]
