"""Abstract base class for voting systems."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from rcir.models import VotingResult


class VotingSystem(ABC):
    """Abstract base class for voting systems.

    Each voting system implementation determines the winners of an
    election from ranked ballots using its own algorithm. Systems are
    registered via the @register_voting_system decorator in
    rcir/voting/__init__.py.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this voting system."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this voting system works."""
        return ""

    @abstractmethod
    def calculate(self, ballots: Iterable[Iterable]) -> VotingResult:
        """Determine the winners using this voting system.

        Args:
            ballots: Ranked ballots, each an iterable of candidates with the
                most preferred first. Consumed once.

        Returns:
            VotingResult with the winners and calculation details
        """
        pass
