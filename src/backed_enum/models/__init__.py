"""
Data Models
===========

Core data types for backed enums.

Models:
    Case:
        - EnumCase: Base case contract (name, value, str)
        - BackingValue: Accepted backing primitive kinds

    Definition:
        - EnumDefinition: Validated name -> value mapping
        - RESERVED_NAMES: Case names that would shadow the collection API
"""

from backed_enum.models.case import BackingValue, EnumCase, is_backing_value
from backed_enum.models.definition import RESERVED_NAMES, EnumDefinition

__all__ = [
    # Case
    "EnumCase",
    "BackingValue",
    "is_backing_value",
    # Definition
    "EnumDefinition",
    "RESERVED_NAMES",
]
