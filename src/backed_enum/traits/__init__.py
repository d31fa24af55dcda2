"""
Traits Module
=============

Trait composition for enum cases.

This module provides:
    - composer.py: compose_case() merges traits into one case type
    - builtin.py: Comparable, Stringable and Labelled traits
"""

from backed_enum.traits.builtin import Comparable, Labelled, Stringable
from backed_enum.traits.composer import compose_case, has_trait

__all__ = [
    "compose_case",
    "has_trait",
    "Comparable",
    "Labelled",
    "Stringable",
]
