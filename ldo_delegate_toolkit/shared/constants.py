"""All constants for the project"""

import os

from dotenv import load_dotenv

from ldo_delegate_toolkit.shared.exceptions import ConfigurationException

load_dotenv()


class LidoConstants:
    """Global class constants for the Lido DAO Voting contract"""

    VOTING_CONTRACT = "0x2e59a20f205bb85a89c53f1936454680651e618e"
    DEFAULT_DELEGATE = "0x6d8d914205bb14104c0f95bfadb4b1680ef60ccc"

    TOKEN_SYMBOL = "LDO"
    LDO_DECIMALS = 18

    VOTING_ABI = "lido_voting"


class RpcConstants:
    """RPC endpoint settings, overridable through the environment or .env"""

    DEFAULT_RPC_URL = "https://eth.drpc.org"
    DEFAULT_TIMEOUT = 30.0

    @staticmethod
    def get_rpc_url() -> str:
        return os.getenv("RPC_URL") or RpcConstants.DEFAULT_RPC_URL

    @staticmethod
    def get_timeout() -> float:
        value = os.getenv("RPC_TIMEOUT")
        if not value:
            return RpcConstants.DEFAULT_TIMEOUT
        try:
            timeout = float(value)
        except ValueError:
            raise ConfigurationException(
                "RPC_TIMEOUT", f"expected seconds as a number, got {value!r}"
            ) from None
        if timeout <= 0:
            raise ConfigurationException("RPC_TIMEOUT", "must be > 0")
        return timeout


class PipelineDefaults:
    """Default sizes for the aggregation pipeline"""

    PAGE_SIZE = 100  # getDelegatedVoters page size
    CHUNK_SIZE = 100  # addresses per getVotingPowerMultiple call
    CONCURRENCY = 5  # in-flight power lookups
