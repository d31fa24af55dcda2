"""
Built-in Traits
===============

Ready-made behavior modules for use with `compose_case`.

Traits:
    - Comparable: Compare cases by backing value
    - Stringable: Render cases by name instead of value
    - Labelled: Human-readable label derived from the case name

Each trait subclasses EnumCase only so that `self.name` and `self.value`
are known to type checkers; `compose_case` copies the methods, not the
inheritance.
"""

from backed_enum.models.case import EnumCase


class Comparable(EnumCase):
    """Equality on backing values, independent of case identity."""

    def is_(self, other: EnumCase) -> bool:
        return self.value == other.value

    def is_not(self, other: EnumCase) -> bool:
        return not self.is_(other)


class Stringable(EnumCase):
    """Render a case by its name; overrides the default value rendering."""

    def __str__(self) -> str:
        return self.name

    def slug(self) -> str:
        """Lower-cased name with the first underscore turned into a dash."""
        return self.name.lower().replace("_", "-", 1)


class Labelled(EnumCase):

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()
