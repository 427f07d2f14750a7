"""Address helpers shared by the voting pipeline."""

from typing import Iterable, List, Set

from eth_typing import ChecksumAddress
from eth_utils import to_canonical_address


def address_key(address: str) -> bytes:
    """Return the 20-byte canonical form used for equality and ordering."""
    return to_canonical_address(address)


def unique_preserve_order(
    addresses: Iterable[ChecksumAddress],
) -> List[ChecksumAddress]:
    """
    Deduplicate addresses while preserving the first-seen order.

    Two spellings of the same address (checksum vs lower-case) count as one;
    the first spelling seen is kept.
    """
    seen: Set[bytes] = set()
    out: List[ChecksumAddress] = []
    for address in addresses:
        key = address_key(address)
        if key not in seen:
            seen.add(key)
            out.append(address)
    return out
