"""
Web3 Service module for reading Ethereum contract state.

This module provides a Web3Service class that manages the HTTP connection to
an Ethereum RPC endpoint and builds contract instances from packaged ABIs.
"""

from typing import Any, Dict

from web3 import Web3

from ldo_delegate_toolkit.shared.constants import RpcConstants
from ldo_delegate_toolkit.shared.services.resource_manager import (
    resource_manager,
)


class Web3Service:
    """
    A service class for managing a Web3 connection.

    Only read calls are issued through it; the toolkit never sends
    transactions.
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = RpcConstants.DEFAULT_TIMEOUT,
    ):
        """
        Initialize the Web3Service.

        Args:
            rpc_url (str): The RPC URL to use.
            timeout (float): HTTP request timeout in seconds.
        """
        self.rpc_url = rpc_url
        self.w3 = self._initialize_web3(rpc_url, timeout)
        self._contract_cache: Dict[Any, Any] = {}

    def _initialize_web3(self, rpc_url: str, timeout: float) -> Web3:
        """Initialize Web3 instance with an HTTP provider"""
        return Web3(
            Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout})
        )

    def get_contract(self, address: str, abi_name: str) -> Any:
        """Get a contract instance for a given address and ABI name"""
        key = (address, abi_name)
        if key not in self._contract_cache:
            abi = resource_manager.load_abi(abi_name)
            self._contract_cache[key] = self.w3.eth.contract(
                address=Web3.to_checksum_address(address.lower()), abi=abi
            )
        return self._contract_cache[key]
