"""
Read interface for the Lido DAO Voting contract.

VotingPowerReader is the narrow interface the aggregation pipeline depends
on. LidoVotingReader implements it with web3.py; tests substitute a fake.
"""

import asyncio
from typing import Any, Callable, List, Protocol, Sequence

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from ldo_delegate_toolkit.shared.constants import LidoConstants
from ldo_delegate_toolkit.shared.logging import get_logger
from ldo_delegate_toolkit.shared.services.web3_service import Web3Service


class VotingPowerReader(Protocol):
    """Read operations the ranking pipeline needs from the Voting contract."""

    async def get_delegated_voters(
        self, delegate: ChecksumAddress, offset: int, limit: int
    ) -> List[ChecksumAddress]:
        ...

    async def get_voting_power_multiple(
        self, addresses: Sequence[ChecksumAddress]
    ) -> List[int]:
        ...

    async def get_voting_power_multiple_at_vote(
        self, vote_id: int, addresses: Sequence[ChecksumAddress]
    ) -> List[int]:
        ...


class LidoVotingReader:
    """
    VotingPowerReader backed by the Lido Voting contract over JSON-RPC.

    web3's HTTP provider is blocking, so each call runs in the event loop's
    default executor. That keeps the RPC round-trip as the only suspension
    point and lets several power lookups be in flight at once.
    """

    def __init__(
        self,
        web3_service: Web3Service,
        contract_address: str = LidoConstants.VOTING_CONTRACT,
    ):
        self.web3_service = web3_service
        self.contract_address = to_checksum_address(contract_address)
        self.contract = web3_service.get_contract(
            self.contract_address, LidoConstants.VOTING_ABI
        )
        self._log = get_logger(__name__)

    async def _call(self, fn: Callable[..., Any], *args: Any) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, fn(*args).call)

    async def get_delegated_voters(
        self, delegate: ChecksumAddress, offset: int, limit: int
    ) -> List[ChecksumAddress]:
        """getDelegatedVoters(delegate, offset, limit)"""
        self._log.debug(
            "getDelegatedVoters delegate=%s offset=%d limit=%d",
            delegate,
            offset,
            limit,
        )
        voters = await self._call(
            self.contract.functions.getDelegatedVoters,
            to_checksum_address(delegate),
            offset,
            limit,
        )
        return [to_checksum_address(voter) for voter in voters]

    async def get_voting_power_multiple(
        self, addresses: Sequence[ChecksumAddress]
    ) -> List[int]:
        """getVotingPowerMultiple(voters): current voting power"""
        balances = await self._call(
            self.contract.functions.getVotingPowerMultiple,
            [to_checksum_address(a) for a in addresses],
        )
        return list(balances)

    async def get_voting_power_multiple_at_vote(
        self, vote_id: int, addresses: Sequence[ChecksumAddress]
    ) -> List[int]:
        """getVotingPowerMultipleAtVote(voteId, voters): power at a vote"""
        balances = await self._call(
            self.contract.functions.getVotingPowerMultipleAtVote,
            vote_id,
            [to_checksum_address(a) for a in addresses],
        )
        return list(balances)
