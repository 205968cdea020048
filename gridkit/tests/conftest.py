"""
Pytest configuration and fixtures for gridkit service tests.
"""

from __future__ import annotations

import asyncio
import os

import pytest

# Set test environment variables before importing config
os.environ.setdefault("GRIDKIT_API_URL", "http://rows.test")
os.environ.setdefault("GRIDKIT_API_TIMEOUT", "5")
os.environ.setdefault("GRIDKIT_ITEMS_PER_PAGE", "10")


class GatedFetcher:
    """
    Fetcher whose calls block until released, for observing Pending state
    and ordering concurrent requests.
    """

    def __init__(self) -> None:
        self.calls = 0
        self._gates: list[asyncio.Future] = []

    async def __call__(self):
        self.calls += 1
        gate = asyncio.get_running_loop().create_future()
        self._gates.append(gate)
        return await gate

    def resolve(self, index: int, value) -> None:
        self._gates[index].set_result(value)

    def reject(self, index: int, exc: BaseException) -> None:
        self._gates[index].set_exception(exc)


@pytest.fixture
def gated():
    return GatedFetcher()
