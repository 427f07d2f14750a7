"""LDO Delegate Toolkit - rank the voters delegating to a Lido DAO delegate."""

__version__ = "0.1.0"

from .voting import LidoVotingReader, VotingPowerService

__all__ = ["LidoVotingReader", "VotingPowerService"]
