"""Deterministic ranking of voting power entries."""

from typing import Iterable, Optional

from ldo_delegate_toolkit.shared.types import PowerEntry, RankedResult
from ldo_delegate_toolkit.utils.addresses import address_key


def rank(
    entries: Iterable[PowerEntry], vote_id: Optional[int] = None
) -> RankedResult:
    """
    Sort entries by power and split them into active and inactive voters.

    Order is power descending, then address ascending (byte-wise), so equal
    inputs always produce the same ranking.
    """
    ordered = sorted(
        entries, key=lambda e: (-e.power, address_key(e.address))
    )
    active = tuple(e for e in ordered if e.power > 0)
    inactive = tuple(e for e in ordered if not e.power > 0)

    return RankedResult(
        active=active,
        inactive=inactive,
        total_power=sum(e.power for e in active),
        vote_id=vote_id,
    )
