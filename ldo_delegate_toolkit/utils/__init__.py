from ldo_delegate_toolkit.utils.addresses import (
    address_key,
    unique_preserve_order,
)
from ldo_delegate_toolkit.utils.formatters import (
    format_exact,
    format_human,
    redact_rpc_url,
)

__all__ = [
    "address_key",
    "unique_preserve_order",
    "format_exact",
    "format_human",
    "redact_rpc_url",
]
