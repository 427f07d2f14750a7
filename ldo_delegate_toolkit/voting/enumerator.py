"""Paginated enumeration of the voters delegating to a delegate."""

from typing import List

from eth_typing import ChecksumAddress

from ldo_delegate_toolkit.commands.validation import validate_positive_int
from ldo_delegate_toolkit.shared.exceptions import CollaboratorFailureException
from ldo_delegate_toolkit.shared.logging import get_logger
from ldo_delegate_toolkit.voting.reader import VotingPowerReader

logger = get_logger(__name__)


async def enumerate_voters(
    reader: VotingPowerReader,
    delegate: ChecksumAddress,
    page_size: int,
) -> List[ChecksumAddress]:
    """
    Fetch every address that delegated to ``delegate``, page by page.

    Pages are requested one at a time with an increasing offset. Enumeration
    stops on an empty page, or on a page shorter than ``page_size`` (the
    contract only returns fewer voters than asked when it runs out).

    Args:
        reader: Voting contract read interface
        delegate: Delegate address
        page_size: Voters requested per call, >= 1

    Returns:
        Voters in contract order (may contain duplicates)

    Raises:
        InvalidParameterException: page_size < 1
        CollaboratorFailureException: a getDelegatedVoters call failed
    """
    validate_positive_int(page_size, "page_size")

    voters: List[ChecksumAddress] = []
    offset = 0
    while True:
        try:
            page = await reader.get_delegated_voters(delegate, offset, page_size)
        except Exception as e:
            raise CollaboratorFailureException(
                "getDelegatedVoters",
                str(e),
                {"delegate": delegate, "offset": offset, "limit": page_size},
            ) from e

        if not page:
            break

        logger.info("Fetched %d voters (offset %d)", len(page), offset)
        voters.extend(page)

        if len(page) < page_size:
            break

        offset += page_size

    return voters
