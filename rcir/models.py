"""Core data models for ballots and voting results."""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

C = TypeVar("C", bound=Hashable)


class _Exhausted:
    """Marker type for a voter record with no preferences left."""

    def __repr__(self) -> str:
        return "EXHAUSTED"


# Returned by VoterRecord.advance() instead of None, which is a legal candidate.
EXHAUSTED = _Exhausted()


class VoterRecord(Generic[C]):
    """The unconsumed remainder of one voter's ballot.

    Preferences are pulled from the underlying iterable one at a time, so
    a lazily produced ballot is only read as far as the count needs it.
    A record lives in exactly one candidate's bucket at a time and is
    moved, never copied, when its candidate is eliminated.

    Example:
        >>> voter = VoterRecord(["A", "B"])
        >>> voter.advance()
        'A'
        >>> voter.advance()
        'B'
        >>> voter.advance()
        EXHAUSTED
    """

    __slots__ = ("_remaining", "position")

    def __init__(self, ballot: Iterable[C]):
        self._remaining = iter(ballot)
        self.position = 0

    def advance(self) -> C | _Exhausted:
        """Pull the next preference, or EXHAUSTED if the ranking is used up."""
        candidate = next(self._remaining, EXHAUSTED)
        if candidate is not EXHAUSTED:
            self.position += 1
        return candidate

    def __repr__(self) -> str:
        return f"VoterRecord(position={self.position})"


@dataclass
class VotingResult:
    """Result from a voting system.

    Attributes:
        system_name: Human-readable name of the voting system
        winners: Winning candidates. Empty if no ballot expressed any
                 preference, more than one on an unresolved tie (in no
                 particular order).
        details: System-specific details (e.g., number of rounds and how
                 the count terminated)
    """
    system_name: str
    winners: list[Any]
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def tied(self) -> bool:
        return len(self.winners) > 1

    @property
    def winner(self) -> Any | None:
        """The sole winner, or None if there is none or a tie."""
        if len(self.winners) == 1:
            return self.winners[0]
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "system_name": self.system_name,
            "winners": list(self.winners),
            "tied": self.tied,
            "details": self.details,
        }
