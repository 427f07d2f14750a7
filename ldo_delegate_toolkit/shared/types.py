"""
Shared type definitions used across the LDO Delegate Toolkit.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from eth_typing import ChecksumAddress

# =============================================================================
# POWER TYPES
# =============================================================================


@dataclass(frozen=True)
class PowerEntry:
    """Voting power of a single address (raw units, 18 decimals for LDO)."""

    address: ChecksumAddress
    power: int

    def to_dict(self) -> Dict[str, Any]:
        return {"address": self.address, "power": str(self.power)}


# =============================================================================
# RANKING TYPES
# =============================================================================


@dataclass(frozen=True)
class RankedResult:
    """
    Ranked voting power for a delegate and its delegated voters.

    Attributes:
        active: Entries with power > 0, highest first (ties by address)
        inactive: Entries with power == 0, ordered by address
        total_power: Exact sum of all active powers
        vote_id: Vote the powers were read at, None for current power
    """

    active: Tuple[PowerEntry, ...] = field(default_factory=tuple)
    inactive: Tuple[PowerEntry, ...] = field(default_factory=tuple)
    total_power: int = 0
    vote_id: Optional[int] = None

    @property
    def voter_count(self) -> int:
        return len(self.active) + len(self.inactive)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Amounts are emitted as decimal strings so no precision is lost.
        """
        return {
            "vote_id": self.vote_id,
            "voter_count": self.voter_count,
            "total_power": str(self.total_power),
            "active": [entry.to_dict() for entry in self.active],
            "inactive": [entry.address for entry in self.inactive],
        }
