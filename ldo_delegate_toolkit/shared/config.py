"""
Immutable run configuration for the ranking command.

The CLI builds a ToolkitConfig from flags and environment; services receive
the values explicitly and never read the environment themselves.
"""

from dataclasses import dataclass
from typing import Optional

from ldo_delegate_toolkit.commands.validation import (
    validate_eth_address,
    validate_positive_int,
    validate_rpc_url,
    validate_vote_id,
)
from ldo_delegate_toolkit.shared.constants import (
    LidoConstants,
    PipelineDefaults,
    RpcConstants,
)


@dataclass(frozen=True)
class ToolkitConfig:
    """Settings for a single ranking run."""

    rpc_url: str = RpcConstants.DEFAULT_RPC_URL
    contract_address: str = LidoConstants.VOTING_CONTRACT
    delegate_address: str = LidoConstants.DEFAULT_DELEGATE
    vote_id: Optional[int] = None
    page_size: int = PipelineDefaults.PAGE_SIZE
    chunk_size: int = PipelineDefaults.CHUNK_SIZE
    concurrency: int = PipelineDefaults.CONCURRENCY
    rpc_timeout: float = RpcConstants.DEFAULT_TIMEOUT
    decimals: int = LidoConstants.LDO_DECIMALS
    quiet: bool = False

    def validate(self) -> "ToolkitConfig":
        """Return a copy with normalized addresses, raising on bad values."""
        validate_rpc_url(self.rpc_url)
        validate_positive_int(self.page_size, "page_size")
        validate_positive_int(self.chunk_size, "chunk_size")
        validate_positive_int(self.concurrency, "concurrency")
        if self.vote_id is not None:
            validate_vote_id(self.vote_id)

        return ToolkitConfig(
            rpc_url=self.rpc_url,
            contract_address=validate_eth_address(
                self.contract_address, "contract_address"
            ),
            delegate_address=validate_eth_address(
                self.delegate_address, "delegate_address"
            ),
            vote_id=self.vote_id,
            page_size=self.page_size,
            chunk_size=self.chunk_size,
            concurrency=self.concurrency,
            rpc_timeout=self.rpc_timeout,
            decimals=self.decimals,
            quiet=self.quiet,
        )
