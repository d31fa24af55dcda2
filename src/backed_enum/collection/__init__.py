"""
Collection Module
=================

The enum factory and the BackedEnum collection it produces.
"""

from backed_enum.collection.factory import BackedEnum, build_backed_enum

__all__ = [
    "BackedEnum",
    "build_backed_enum",
]
