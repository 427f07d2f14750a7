from .enumerator import enumerate_voters
from .fetcher import fetch_powers
from .ranking import rank
from .reader import LidoVotingReader, VotingPowerReader
from .service import VotingPowerService

__all__ = [
    "enumerate_voters",
    "fetch_powers",
    "rank",
    "LidoVotingReader",
    "VotingPowerReader",
    "VotingPowerService",
]
