"""
Unit tests for the exception hierarchy, configuration validation and
logging helpers.
"""

import logging

import pytest

from ldo_delegate_toolkit.commands.validation import (
    validate_eth_address,
    validate_positive_int,
    validate_rpc_url,
    validate_vote_id,
)
from ldo_delegate_toolkit.shared.config import ToolkitConfig
from ldo_delegate_toolkit.shared.constants import RpcConstants
from ldo_delegate_toolkit.shared.exceptions import (
    CollaboratorFailureException,
    ConfigurationException,
    DelegateToolkitException,
    InvalidParameterException,
    ResponseLengthMismatchException,
)
from ldo_delegate_toolkit.shared.logging import get_logger, set_log_level


class TestExceptionHierarchy:
    def test_all_errors_share_a_base(self):
        for exc in (
            InvalidParameterException("page_size", "must be >= 1"),
            ConfigurationException("rpc_url", "missing"),
            CollaboratorFailureException("getDelegatedVoters", "boom"),
            ResponseLengthMismatchException(0, expected=2, actual=1),
        ):
            assert isinstance(exc, DelegateToolkitException)

    def test_invalid_parameter_is_value_error(self):
        exc = InvalidParameterException("chunk_size", "must be >= 1")
        assert isinstance(exc, ValueError)
        assert exc.message == "Invalid chunk_size: must be >= 1"
        assert exc.context == {"parameter": "chunk_size"}

    def test_configuration_error_is_its_own_kind(self):
        exc = ConfigurationException("rpc_url", "missing")
        assert not isinstance(exc, InvalidParameterException)
        assert not isinstance(exc, ValueError)
        assert exc.message == "Invalid rpc_url: missing"
        assert exc.context == {"setting": "rpc_url"}

    def test_collaborator_failure_message_has_context(self):
        exc = CollaboratorFailureException(
            "getVotingPowerMultiple", "timeout", {"chunk_index": 3}
        )
        assert exc.message == (
            "getVotingPowerMultiple RPC call failed (chunk_index=3): timeout"
        )
        assert exc.context == {
            "chunk_index": 3,
            "operation": "getVotingPowerMultiple",
        }

    def test_length_mismatch_context(self):
        exc = ResponseLengthMismatchException(4, expected=100, actual=99)
        assert exc.context == {"chunk_index": 4, "expected": 100, "actual": 99}
        assert "got 99, expected 100" in str(exc)


class TestValidation:
    def test_eth_address_is_checksummed(self, make_address):
        address = make_address(0xABCDEF0123)
        assert validate_eth_address(address.lower()) == address

    @pytest.mark.parametrize("value", ["", "0x1234", "hello", None])
    def test_eth_address_rejects_garbage(self, value):
        with pytest.raises(InvalidParameterException):
            validate_eth_address(value, "delegate")

    @pytest.mark.parametrize("value", [0, -5, 1.5, True, "3"])
    def test_positive_int_rejects(self, value):
        with pytest.raises(InvalidParameterException):
            validate_positive_int(value, "page_size")

    def test_vote_id_zero_is_valid(self):
        assert validate_vote_id(0) == 0

    @pytest.mark.parametrize(
        "url", ["", "ws://node:8546", "rpc.example.com"]
    )
    def test_rpc_url_rejected(self, url):
        with pytest.raises(ConfigurationException):
            validate_rpc_url(url)


class TestRpcConstants:
    def test_timeout_default(self, monkeypatch):
        monkeypatch.delenv("RPC_TIMEOUT", raising=False)
        assert RpcConstants.get_timeout() == 30.0

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("RPC_TIMEOUT", "12.5")
        assert RpcConstants.get_timeout() == 12.5

    @pytest.mark.parametrize("value", ["thirty", "0", "-1"])
    def test_bad_timeout_is_configuration_error(self, monkeypatch, value):
        monkeypatch.setenv("RPC_TIMEOUT", value)
        with pytest.raises(ConfigurationException, match="RPC_TIMEOUT"):
            RpcConstants.get_timeout()


class TestToolkitConfig:
    def test_defaults_validate(self, sample_delegate_address):
        config = ToolkitConfig().validate()

        assert config.delegate_address.lower() == sample_delegate_address
        assert config.page_size == 100
        assert config.chunk_size == 100
        assert config.concurrency == 5
        assert config.vote_id is None

    def test_config_is_immutable(self):
        config = ToolkitConfig()
        with pytest.raises(AttributeError):
            config.page_size = 1

    def test_invalid_concurrency(self):
        with pytest.raises(InvalidParameterException, match="concurrency"):
            ToolkitConfig(concurrency=0).validate()

    def test_invalid_rpc_url_does_not_leak_url(self):
        with pytest.raises(ConfigurationException) as exc_info:
            ToolkitConfig(rpc_url="wss://node/SECRET").validate()
        assert "SECRET" not in str(exc_info.value)


class TestLogging:
    def test_module_loggers_are_package_children(self):
        logger = get_logger("ldo_delegate_toolkit.voting.fetcher")
        assert logger.name == "ldo_delegate_toolkit.voting.fetcher"
        assert logger.propagate
        assert not logger.handlers

    def test_foreign_names_are_namespaced(self):
        assert get_logger("tests").name == "ldo_delegate_toolkit.tests"

    def test_single_handler_on_root(self):
        get_logger("a")
        get_logger("b")
        root = logging.getLogger("ldo_delegate_toolkit")
        assert len(root.handlers) == 1

    def test_set_log_level(self):
        root = get_logger()
        previous = root.level
        try:
            set_log_level("WARNING")
            assert root.level == logging.WARNING
            set_log_level(logging.DEBUG)
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)
