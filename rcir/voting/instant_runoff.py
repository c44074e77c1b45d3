"""Instant Runoff Voting (IRV) system."""

import logging
from collections.abc import Hashable, Iterable
from typing import TypeVar

from rcir.models import EXHAUSTED, VoterRecord, VotingResult
from rcir.voting import register_voting_system
from rcir.voting.base import VotingSystem

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Hashable)


def find_winners(ballots: Iterable[Iterable[C]]) -> list[C]:
    """Find the winners of an instant-runoff election.

    Args:
        ballots: Ranked ballots, each an iterable of candidates with the
            most preferred first. Both the ballots and each ballot's
            candidates are pulled lazily; a ballot is only read as far as
            needed to find its next continuing candidate.

    Returns:
        A single winner if some candidate holds a remaining majority, all
        remaining candidates (in no particular order) if they are tied, or
        an empty list if no ballot ranks anyone.

    Example:
        >>> find_winners([["A"], ["A"], ["B", "A"], ["C"]])
        ['A']
    """
    winners, _ = _run_irv(ballots)
    return winners


def _run_irv(ballots: Iterable[Iterable[C]]) -> tuple[list[C], dict]:
    """Run the count. Returns (winners, details)."""
    voter_map = _assign_first_preferences(ballots)

    round_num = 0
    while voter_map:
        round_num += 1

        vote_totals = {candidate: len(voters) for candidate, voters in voter_map.items()}
        logger.debug("round %d vote totals: %s", round_num, vote_totals)

        # Any of several candidates tied on the best count will do here,
        # it only matters when that count is a majority and so unique.
        best_candidate = max(vote_totals, key=vote_totals.get)
        best_votecount = vote_totals[best_candidate]
        worst_votecount = min(vote_totals.values())
        total_votecount = sum(vote_totals.values())

        if best_votecount > total_votecount // 2:
            logger.info("%s wins with %d of %d votes",
                        best_candidate, best_votecount, total_votecount)
            return [best_candidate], {"rounds": round_num, "method": "majority"}

        if best_votecount == worst_votecount:
            tied = list(voter_map)
            logger.info("%s are tied with %d votes each", tied, best_votecount)
            return tied, {"rounds": round_num, "method": "all_tied"}

        worst_candidates = [
            candidate for candidate, votecount in vote_totals.items()
            if votecount == worst_votecount
        ]
        logger.info("eliminating %s with %d votes each", worst_candidates, worst_votecount)
        _eliminate(voter_map, worst_candidates)

    logger.info("no ballots rank any candidate, no winner")
    return [], {"rounds": round_num, "method": "no_votes"}


def _assign_first_preferences(ballots: Iterable[Iterable[C]]) -> dict[C, list[VoterRecord[C]]]:
    """Build the candidate -> voters map from each ballot's first preference.

    Empty ballots never enter the map.
    """
    voter_map: dict[C, list[VoterRecord[C]]] = {}
    for ballot in ballots:
        voter = VoterRecord(ballot)
        candidate = voter.advance()
        if candidate is not EXHAUSTED:
            voter_map.setdefault(candidate, []).append(voter)
    return voter_map


def _eliminate(voter_map: dict[C, list[VoterRecord[C]]], candidates: list[C]) -> None:
    """Remove candidates from the count and redistribute their voters.

    All candidates are removed before any voter moves, so a voter passing
    over a candidate eliminated in the same round skips it. Voters with no
    continuing candidate left are dropped.
    """
    eliminated = [(candidate, voter_map.pop(candidate)) for candidate in candidates]

    for candidate, voters in eliminated:
        exhausted = 0
        for voter in voters:
            target = voter.advance()
            while target is not EXHAUSTED and target not in voter_map:
                target = voter.advance()
            if target is EXHAUSTED:
                exhausted += 1
            else:
                voter_map[target].append(voter)
        logger.debug("redistributed %d votes from %s, %d exhausted",
                     len(voters), candidate, exhausted)


@register_voting_system
class InstantRunoffSystem(VotingSystem):
    """Instant Runoff Voting system.

    Each round:
    1. Count each ballot for its most preferred continuing candidate
    2. If someone has a majority (>50%) of the counted ballots, they win
    3. If every continuing candidate has the same count, they all tie
    4. Otherwise, eliminate every candidate tied for the fewest votes at
       once and move their ballots to the next continuing preference
       (ballots with none left drop out of later counts)

    Candidates no ballot ranks first never enter the count.
    """

    @property
    def name(self) -> str:
        return "Instant Runoff"

    @property
    def description(self) -> str:
        return "Eliminate the weakest candidates until one holds a remaining majority"

    def calculate(self, ballots: Iterable[Iterable]) -> VotingResult:
        winners, details = _run_irv(ballots)
        return VotingResult(
            system_name=self.name,
            winners=winners,
            details=details,
        )
