"""
Kernel test configuration.

Shared rows and columns used across resolver, sorting, pagination and
renderer tests.
"""

import pytest

from gridkit.kernel.types import Column


def make_people():
    return [
        {"id": 1, "name": "Alice", "active": True, "score": 95, "nested": {"value": "A"}},
        {"id": 2, "name": "Bob", "active": False, "score": 80, "nested": {"value": "B"}},
        {"id": 3, "name": "Charlie", "active": True, "score": 88, "nested": {"value": "C"}},
        {"id": 4, "name": "David", "active": False, "score": 92, "nested": {"value": "D"}},
        {"id": 5, "name": "Eve", "active": True, "score": 85, "nested": {"value": "E"}},
    ]


def make_columns():
    return [
        Column(key="id", label="ID", sortable=True),
        Column(key="name", label="Name", sortable=True),
        Column(key="active", label="Active", sortable=False),
        Column(key="score", label="Score", sortable=True),
    ]


@pytest.fixture
def people():
    return make_people()


@pytest.fixture
def columns():
    return make_columns()
