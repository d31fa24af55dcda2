"""
Test Configuration
==================

Pytest fixtures and test configuration for backed-enum.
"""

import pytest


@pytest.fixture
def role_definition():
    """Provide a numeric definition in declaration order."""
    return {"ADMIN": 1, "USER": 2, "GUEST": 3}


@pytest.fixture
def status_definition():
    """Provide a string-backed definition."""
    return {"PENDING": "pending", "ACTIVE": "active", "ARCHIVED": "archived"}


@pytest.fixture
def role_enum(role_definition):
    """Provide a Role collection composed with Comparable and Stringable."""
    from backed_enum import build_backed_enum, compose_case
    from backed_enum.traits import Comparable, Stringable

    role_case = compose_case(Comparable, Stringable)
    return build_backed_enum(role_definition, role_case, name="Role")


@pytest.fixture
def status_enum(status_definition):
    """Provide a Status collection using the default case type."""
    from backed_enum import build_backed_enum

    return build_backed_enum(status_definition, name="Status")


@pytest.fixture
def typescript_role_dump():
    """Provide a TypeScript numeric enum object, reverse entries included."""
    return {
        "1": "ADMIN",
        "2": "USER",
        "3": "GUEST",
        "ADMIN": 1,
        "USER": 2,
        "GUEST": 3,
    }
