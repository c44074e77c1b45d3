"""Ranked-choice instant-runoff winner tabulation."""

from rcir.models import EXHAUSTED, VoterRecord, VotingResult
from rcir.voting import get_all_voting_systems, get_voting_system, register_voting_system

# Import voting systems to register them
from rcir.voting import instant_runoff  # noqa: F401
from rcir.voting.instant_runoff import InstantRunoffSystem, find_winners

from rcir.tabulate import TabulationError, tabulate_ballots

__all__ = [
    "EXHAUSTED",
    "InstantRunoffSystem",
    "TabulationError",
    "VoterRecord",
    "VotingResult",
    "find_winners",
    "get_all_voting_systems",
    "get_voting_system",
    "register_voting_system",
    "tabulate_ballots",
]
