"""
Voting power ranking service.

Runs the full aggregation pipeline for a delegate:
enumerate delegated voters → deduplicate (delegate first) → fetch power in
bounded-concurrency chunks → rank.
"""

from typing import Optional

from ldo_delegate_toolkit.commands.validation import (
    validate_eth_address,
    validate_positive_int,
    validate_vote_id,
)
from ldo_delegate_toolkit.shared.constants import PipelineDefaults
from ldo_delegate_toolkit.shared.logging import get_logger
from ldo_delegate_toolkit.shared.types import RankedResult
from ldo_delegate_toolkit.utils.addresses import unique_preserve_order
from ldo_delegate_toolkit.voting.enumerator import enumerate_voters
from ldo_delegate_toolkit.voting.fetcher import fetch_powers
from ldo_delegate_toolkit.voting.ranking import rank
from ldo_delegate_toolkit.voting.reader import VotingPowerReader


class VotingPowerService:
    """
    Service computing the ranked voting power of a delegate's voters.

    Attributes:
        reader: Read interface to the Voting contract
    """

    def __init__(self, reader: VotingPowerReader):
        self.reader = reader
        self._log = get_logger(__name__)

    async def compute_ranking(
        self,
        delegate: str,
        vote_id: Optional[int] = None,
        page_size: int = PipelineDefaults.PAGE_SIZE,
        chunk_size: int = PipelineDefaults.CHUNK_SIZE,
        concurrency: int = PipelineDefaults.CONCURRENCY,
    ) -> RankedResult:
        """
        Rank the delegate and everyone delegating to it by voting power.

        All parameters are validated before the first contract call.

        Args:
            delegate: Delegate address (any casing)
            vote_id: Vote to read power at; None for current power
            page_size: getDelegatedVoters page size
            chunk_size: Addresses per power lookup
            concurrency: Maximum power lookups in flight

        Returns:
            RankedResult covering the delegate plus every unique voter

        Raises:
            InvalidParameterException: invalid address, vote id or size
            CollaboratorFailureException: a contract read failed
            ResponseLengthMismatchException: a power lookup returned the
                wrong number of balances
        """
        delegate = validate_eth_address(delegate, "delegate")
        if vote_id is not None:
            validate_vote_id(vote_id)
        validate_positive_int(page_size, "page_size")
        validate_positive_int(chunk_size, "chunk_size")
        validate_positive_int(concurrency, "concurrency")

        self._log.info("Fetching delegated voters for %s", delegate)
        voters = await enumerate_voters(self.reader, delegate, page_size)

        addresses = unique_preserve_order([delegate, *voters])
        self._log.info("Unique addresses: %d", len(addresses))

        if vote_id is None:
            self._log.info("Calculating current voting power")
        else:
            self._log.info("Calculating voting power at vote #%d", vote_id)

        entries = await fetch_powers(
            self.reader,
            addresses,
            vote_id=vote_id,
            chunk_size=chunk_size,
            concurrency=concurrency,
        )
        return rank(entries, vote_id=vote_id)
