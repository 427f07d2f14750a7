"""
Bounded-concurrency voting power lookups.

Addresses are split into fixed-size chunks, one contract call per chunk, with
at most ``concurrency`` calls in flight. Results are put back together by
chunk index so the output order never depends on which call finished first.
"""

import asyncio
from typing import List, Optional, Sequence

from eth_typing import ChecksumAddress

from ldo_delegate_toolkit.commands.validation import (
    validate_positive_int,
    validate_vote_id,
)
from ldo_delegate_toolkit.shared.exceptions import (
    CollaboratorFailureException,
    ResponseLengthMismatchException,
)
from ldo_delegate_toolkit.shared.logging import get_logger
from ldo_delegate_toolkit.shared.types import PowerEntry
from ldo_delegate_toolkit.voting.reader import VotingPowerReader

logger = get_logger(__name__)


def chunked(
    addresses: Sequence[ChecksumAddress], chunk_size: int
) -> List[List[ChecksumAddress]]:
    """Split addresses into contiguous chunks of at most ``chunk_size``."""
    return [
        list(addresses[i : i + chunk_size])
        for i in range(0, len(addresses), chunk_size)
    ]


async def _fetch_chunk(
    reader: VotingPowerReader,
    semaphore: asyncio.Semaphore,
    chunk_index: int,
    chunk: List[ChecksumAddress],
    vote_id: Optional[int],
) -> List[PowerEntry]:
    if vote_id is None:
        operation = "getVotingPowerMultiple"
    else:
        operation = "getVotingPowerMultipleAtVote"

    async with semaphore:
        try:
            if vote_id is None:
                balances = await reader.get_voting_power_multiple(chunk)
            else:
                balances = await reader.get_voting_power_multiple_at_vote(
                    vote_id, chunk
                )
        except Exception as e:
            raise CollaboratorFailureException(
                operation,
                str(e),
                {"chunk_index": chunk_index, "chunk_length": len(chunk)},
            ) from e

    if len(balances) != len(chunk):
        raise ResponseLengthMismatchException(
            chunk_index, expected=len(chunk), actual=len(balances)
        )

    for address, power in zip(chunk, balances):
        if isinstance(power, bool) or not isinstance(power, int) or power < 0:
            raise CollaboratorFailureException(
                operation,
                f"could not decode balance {power!r} for {address}",
                {"chunk_index": chunk_index, "chunk_length": len(chunk)},
            )

    logger.debug("Chunk %d: %d balances", chunk_index, len(balances))
    return [
        PowerEntry(address=address, power=power)
        for address, power in zip(chunk, balances)
    ]


async def fetch_powers(
    reader: VotingPowerReader,
    addresses: Sequence[ChecksumAddress],
    vote_id: Optional[int] = None,
    chunk_size: int = 100,
    concurrency: int = 5,
) -> List[PowerEntry]:
    """
    Fetch voting power for every address, in the order given.

    Args:
        reader: Voting contract read interface
        addresses: Unique addresses to look up
        vote_id: Read power at this vote; None reads current power
        chunk_size: Addresses per contract call, >= 1
        concurrency: Maximum calls in flight, >= 1

    Returns:
        One PowerEntry per address, same order as ``addresses``

    Raises:
        InvalidParameterException: bad chunk_size, concurrency or vote_id
        CollaboratorFailureException: a power lookup call failed
        ResponseLengthMismatchException: a chunk came back with the wrong
            number of balances
    """
    validate_positive_int(chunk_size, "chunk_size")
    validate_positive_int(concurrency, "concurrency")
    if vote_id is not None:
        validate_vote_id(vote_id)

    chunks = chunked(addresses, chunk_size)
    if not chunks:
        return []

    semaphore = asyncio.Semaphore(concurrency)
    tasks = [
        asyncio.ensure_future(
            _fetch_chunk(reader, semaphore, index, chunk, vote_id)
        )
        for index, chunk in enumerate(chunks)
    ]
    logger.info(
        "Fetching voting power for %d addresses in %d chunks",
        len(addresses),
        len(chunks),
    )

    try:
        # gather keeps task order, so results line up with chunk indexes
        results = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        # Let cancelled siblings settle so none is left un-awaited
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    return [entry for chunk_entries in results for entry in chunk_entries]
