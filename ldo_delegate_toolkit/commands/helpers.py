"""Shared command helpers and utilities."""

import sys
from typing import Callable, Optional

from rich import print as rprint

from ldo_delegate_toolkit.shared.exceptions import (
    DelegateToolkitException,
    InvalidParameterException,
)


def handle_command_error(
    error: Exception, show_usage_fn: Optional[Callable[[], None]] = None
) -> None:
    """
    Standard error handling for commands.

    Args:
        error: The exception that occurred
        show_usage_fn: Optional function to display usage instructions
    """
    if isinstance(error, (InvalidParameterException, ValueError)):
        rprint(f"[red]Error:[/red] {str(error)}")
    elif isinstance(error, DelegateToolkitException):
        rprint(f"[red]Error:[/red] {error.message}")
    else:
        rprint(f"[red]Unexpected error:[/red] {str(error)}")

    if show_usage_fn:
        show_usage_fn()

    sys.exit(1)
