"""
Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests.
"""

import asyncio
from typing import Callable, Dict, List, Optional, Sequence

import pytest
from eth_utils import to_checksum_address


def _make_address(n: int) -> str:
    return to_checksum_address("0x" + f"{n:040x}")


class FakeVotingReader:
    """
    In-memory stand-in for the Voting contract.

    Pages are served in call order; powers come from a mapping with a
    default. Tracks every call and the peak number of concurrent power
    lookups.
    """

    def __init__(
        self,
        pages: Optional[Sequence[Sequence[str]]] = None,
        powers: Optional[Dict[str, int]] = None,
        default_power: int = 0,
        delay: float = 0.0,
    ):
        self.pages = [list(page) for page in (pages or [])]
        self.powers = dict(powers or {})
        self.default_power = default_power
        self.delay = delay
        self.voter_calls: List[tuple] = []
        self.power_calls: List[tuple] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def get_delegated_voters(self, delegate, offset, limit):
        self.voter_calls.append((delegate, offset, limit))
        index = len(self.voter_calls) - 1
        if index < len(self.pages):
            return list(self.pages[index])
        return []

    async def _lookup(self, addresses):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        return [self.powers.get(a, self.default_power) for a in addresses]

    async def get_voting_power_multiple(self, addresses):
        self.power_calls.append((None, list(addresses)))
        return await self._lookup(addresses)

    async def get_voting_power_multiple_at_vote(self, vote_id, addresses):
        self.power_calls.append((vote_id, list(addresses)))
        return await self._lookup(addresses)


@pytest.fixture
def make_address() -> Callable[[int], str]:
    """Build a deterministic checksum address from an integer."""
    return _make_address


@pytest.fixture
def fake_reader_cls():
    """The FakeVotingReader class, for tests that configure their own."""
    return FakeVotingReader


@pytest.fixture
def sample_delegate_address() -> str:
    """Default delegate used by the CLI."""
    return "0x6d8d914205bb14104c0f95bfadb4b1680ef60ccc"


@pytest.fixture
def sample_contract_address() -> str:
    """Lido Voting contract on Ethereum mainnet."""
    return "0x2e59a20f205bb85a89c53f1936454680651e618e"


@pytest.fixture
def one_ldo() -> int:
    """1 LDO in raw units."""
    return 10**18


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line("markers", "slow: mark test as slow-running")
