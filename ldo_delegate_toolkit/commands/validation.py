from eth_typing import ChecksumAddress
from eth_utils import is_address, to_checksum_address

from ldo_delegate_toolkit.shared.exceptions import (
    ConfigurationException,
    InvalidParameterException,
)


def validate_eth_address(
    address: str, param_name: str = "address"
) -> ChecksumAddress:
    """Validate and return checksum ethereum address"""
    if not address or not isinstance(address, str):
        raise InvalidParameterException(
            param_name, "address must be a non-empty string"
        )
    if not is_address(address):
        raise InvalidParameterException(
            param_name, f"{address} is not a valid Ethereum address"
        )
    return to_checksum_address(address)


def validate_positive_int(value: int, param_name: str) -> int:
    """Validate a size/count parameter that must be >= 1"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterException(
            param_name, f"{value!r} is not an integer"
        )
    if value < 1:
        raise InvalidParameterException(param_name, "must be >= 1")
    return value


def validate_vote_id(vote_id: int) -> int:
    """Validate a Voting contract vote id"""
    if isinstance(vote_id, bool) or not isinstance(vote_id, int):
        raise InvalidParameterException("vote_id", f"{vote_id!r} is not an integer")
    if vote_id < 0:
        raise InvalidParameterException("vote_id", "must be >= 0")
    return vote_id


def validate_rpc_url(rpc_url: str) -> str:
    """Validate that the RPC URL is an http(s) endpoint"""
    if not rpc_url or not isinstance(rpc_url, str):
        raise ConfigurationException("rpc_url", "RPC URL must be set")
    if not rpc_url.startswith(("http://", "https://")):
        raise ConfigurationException(
            "rpc_url", "RPC URL must start with http:// or https://"
        )
    return rpc_url
