"""
Exception hierarchy for the LDO Delegate Toolkit.

Exception Categories:
- InvalidParameterException: Bad input detected before any RPC call
- ConfigurationException: Startup/config errors that prevent operation
- CollaboratorFailureException: The Voting contract read itself failed
- ResponseLengthMismatchException: A power lookup returned the wrong count

None of these are retried. Every one of them aborts the ranking and
propagates to the CLI, which maps them to exit code 1.
"""

from typing import Any, Dict, Optional


class DelegateToolkitException(Exception):
    """
    Base class for every error raised by the toolkit.

    Attributes:
        message: Human-readable error description
        context: Extra details (operation, offset, chunk index, counts)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InvalidParameterException(DelegateToolkitException, ValueError):
    """
    Exception for invalid input parameters.

    Use when:
    - page_size, chunk_size or concurrency is lower than 1
    - An address is malformed
    - A vote id is negative
    """

    def __init__(self, parameter: str, message: str):
        super().__init__(
            f"Invalid {parameter}: {message}", {"parameter": parameter}
        )
        self.parameter = parameter


class ConfigurationException(DelegateToolkitException):
    """
    Exception for configuration/startup errors.

    Use when:
    - The RPC URL cannot be used
    - RPC_TIMEOUT is not a positive number
    - A packaged resource (ABI) is missing
    """

    def __init__(self, setting: str, message: str):
        super().__init__(
            f"Invalid {setting}: {message}", {"setting": setting}
        )
        self.setting = setting


class CollaboratorFailureException(DelegateToolkitException):
    """
    Exception for failed reads against the Voting contract.

    Wraps network errors, decoding errors and contract reverts. The original
    exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        operation: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        details = dict(context or {})
        details["operation"] = operation
        where = ", ".join(
            f"{key}={value}" for key, value in details.items()
            if key != "operation"
        )
        suffix = f" ({where})" if where else ""
        super().__init__(
            f"{operation} RPC call failed{suffix}: {reason}", details
        )
        self.operation = operation


class ResponseLengthMismatchException(DelegateToolkitException):
    """
    Exception for a power lookup whose response length differs from the
    number of addresses requested in that chunk.
    """

    def __init__(self, chunk_index: int, expected: int, actual: int):
        super().__init__(
            f"voting power response length mismatch in chunk {chunk_index} "
            f"(got {actual}, expected {expected})",
            {"chunk_index": chunk_index, "expected": expected, "actual": actual},
        )
        self.chunk_index = chunk_index
        self.expected = expected
        self.actual = actual
