"""
Adapters Module
===============

Boundary adapters that produce EnumDefinitions from external sources
(mappings with synthetic numeric keys, enum.Enum classes, JSON/YAML files).
"""

from backed_enum.adapters.sources import (
    definition_from,
    is_synthetic_key,
    load_definition,
)

__all__ = [
    "definition_from",
    "is_synthetic_key",
    "load_definition",
]
