"""
Shared test fixtures and utilities for the structured-json test suite.
"""

import pytest

from structured_json import StructuredJson


@pytest.fixture
def document():
    """Empty document for tests that build their own data."""
    return StructuredJson()


@pytest.fixture
def user_document():
    """Document with nested objects, an object array and a scalar array.

    Usage:
        def test_something(user_document):
            assert user_document.get("user:name") == "Ahmet"
    """
    doc = StructuredJson()
    doc.set("user:name", "Ahmet")
    doc.set("user:age", 30)
    doc.set("user:isActive", True)
    doc.set("user:addresses[0]:type", "home")
    doc.set("user:addresses[0]:city", "Ankara")
    doc.set("user:addresses[1]:type", "work")
    doc.set("user:addresses[1]:city", "Istanbul")
    doc.set("user:hobbies[0]", "reading")
    doc.set("user:hobbies[1]", "swimming")
    doc.set("user:hobbies[2]", "programming")
    return doc
