"""Orchestrator: run a registered voting system over ranked ballots."""

from collections.abc import Iterable

from rcir.models import VotingResult
from rcir.voting import get_all_voting_systems, get_voting_system

DEFAULT_SYSTEM = "Instant Runoff"


class TabulationError(Exception):
    """Error during ballot tabulation."""
    pass


def tabulate_ballots(ballots: Iterable[Iterable], system_name: str = DEFAULT_SYSTEM) -> VotingResult:
    """Find the winners of an election using a registered voting system.

    Args:
        ballots: Ranked ballots, each an iterable of candidates with the
            most preferred first. Consumed once.
        system_name: Name of the voting system to use

    Returns:
        VotingResult from the chosen voting system

    Raises:
        TabulationError: If no such voting system is registered, or the
            ballots could not be tabulated (e.g., a ballot is not iterable
            or a candidate is not hashable)
    """
    voting_system = get_voting_system(system_name)
    if voting_system is None:
        available = ", ".join(system.name for system in get_all_voting_systems())
        raise TabulationError(
            f"Unknown voting system: {system_name!r}. "
            f"Available voting systems: {available}"
        )

    try:
        return voting_system.calculate(ballots)
    except Exception as e:
        raise TabulationError(f"Failed to tabulate ballots: {e}") from e
