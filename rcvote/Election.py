import numbers
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .Ballot import Ballot
from .Candidate import Candidate
from .ElectionResult import ElectionResult, RoundResult
from .Errors import CandidateOverflow, ElectionSetupError, InvalidBallot


class Election:
    """
    An Election holds the candidates running for office and, through them, the
    ballots that have been cast.  The winner is chosen by ranked choice
    (instant runoff) voting:

    1. Every voter ranks all the candidates.  Each ballot counts for the
       highest ranked candidate still in the race.
    2. A candidate holding more than half of the ballots wins.
    3. Otherwise, if every remaining candidate holds the same number of
       ballots, they are all tied.
    4. Otherwise the candidate with the fewest ballots is eliminated and each
       of their ballots moves to its next choice still in the race.  Repeat
       from 2.

    Candidates are identified by the order they were added in, 0 to n - 1.
    That order also breaks ties when choosing who to eliminate (lowest id goes
    first) and orders the names of tied winners.
    """

    def __init__(self, num_candidates: int, debug: bool = False):
        if num_candidates < 1:
            raise ValueError(f"an election needs at least one candidate, got {num_candidates}")
        self.num_candidates = num_candidates
        self.candidates: List[Candidate] = []
        self.debug = debug
        self._result: Optional[ElectionResult] = None

    def add_candidate(self, name: str) -> Candidate:
        if len(self.candidates) >= self.num_candidates:
            raise CandidateOverflow(f"election has room for {self.num_candidates} candidates, cannot add {name}")
        if name in self.candidate_names():
            raise ValueError(f"candidate {name} is already running")
        candidate = Candidate(name, len(self.candidates))
        self.candidates.append(candidate)
        return candidate

    def candidate_names(self) -> List[str]:
        return [c.name for c in self.candidates]

    def is_full(self) -> bool:
        return len(self.candidates) == self.num_candidates

    def check_ready(self):
        if not self.is_full():
            raise ElectionSetupError(f"only {len(self.candidates)} of {self.num_candidates} candidates have been added")

    # a valid ballot is a permutation of the ranks 1 to n, given as integers
    def is_ballot_valid(self, ranks: Sequence[int]) -> bool:
        if len(ranks) != self.num_candidates:
            return False
        if not all(isinstance(r, numbers.Integral) and not isinstance(r, bool) for r in ranks):
            return False
        return sorted(ranks) == list(range(1, self.num_candidates + 1))

    def add_ballot(self, ranks: Sequence[int]) -> Ballot:
        self.check_ready()
        if self._result is not None:
            raise ElectionSetupError("cannot add ballots after the winner has been selected")
        if not self.is_ballot_valid(ranks):
            raise InvalidBallot(ranks)

        ballot = Ballot(list(ranks))
        self.assign_ballot(ballot)
        return ballot

    def add_ranked_names(self, names: Sequence[str]) -> Ballot:
        ids = {c.name: c.id for c in self.candidates}
        ranks = [0] * self.num_candidates
        for rank, name in enumerate(names, start=1):
            if name not in ids:
                raise InvalidBallot(names, f"Unknown candidate {name}")
            ranks[ids[name]] = rank
        return self.add_ballot(ranks)

    # gives the ballot to its top choice, skipping anyone already out of the race.
    def assign_ballot(self, ballot: Ballot) -> int:
        top = ballot.top_candidate()
        while self.candidates[top].is_eliminated():
            ballot.eliminate_candidate(top)
            top = ballot.top_candidate()
        self.candidates[top].add_ballot(ballot)
        return top

    def num_ballots(self) -> int:
        return sum(c.votes() for c in self.candidates)

    def active_mask(self) -> np.ndarray:
        return np.array([not c.is_eliminated() for c in self.candidates], dtype=bool)

    def remaining_candidates(self) -> List[Candidate]:
        return [c for c in self.candidates if not c.is_eliminated()]

    # only candidates still in the race are searched, candidate 0 included.
    def min_votes_index(self, tally: np.ndarray) -> int:
        active = self.active_mask()
        assert active.any()
        masked = np.where(active, tally, np.iinfo(tally.dtype).max)
        return int(np.argmin(masked))

    def max_votes(self, tally: np.ndarray) -> int:
        return int(tally[self.active_mask()].max())

    def is_tie(self, tally: np.ndarray) -> bool:
        return bool(np.all(tally[self.active_mask()] == self.max_votes(tally)))

    def select_winner(self) -> List[str]:
        return self.result().names()

    def result(self) -> ElectionResult:
        if self._result is None:
            self.check_ready()
            self._result = self.compute_result()
        return self._result

    def check_winners(self, tally: np.ndarray, num_ballots: int) -> Tuple[Optional[List[Candidate]], bool]:
        majority = np.flatnonzero(tally > num_ballots // 2)
        if len(majority) > 0:
            return [self.candidates[int(majority[0])]], False

        remaining = self.remaining_candidates()
        if len(remaining) == 1:
            return remaining, False
        if self.is_tie(tally):
            return remaining, True
        return None, False

    def eliminate_lowest(self, tally: np.ndarray) -> Candidate:
        loser = self.candidates[self.min_votes_index(tally)]
        for ballot in loser.eliminate():
            ballot.eliminate_candidate(loser.id)
            tally[self.assign_ballot(ballot)] += 1
        tally[loser.id] = 0
        return loser

    def compute_result(self) -> ElectionResult:
        tally = np.array([c.votes() for c in self.candidates], dtype=np.int64)
        num_ballots = int(tally.sum())
        rounds: List[RoundResult] = []

        while True:
            assert int(tally.sum()) == num_ballots
            assert all(tally[c.id] == c.votes() for c in self.candidates)

            current = RoundResult(len(rounds) + 1,
                                  {c: int(tally[c.id]) for c in self.remaining_candidates()})
            rounds.append(current)

            winners, tie_found = self.check_winners(tally, num_ballots)
            if winners is None:
                current.eliminated = self.eliminate_lowest(tally)
            if self.debug:
                current.print()
            if winners is not None:
                return ElectionResult(winners, tie_found, rounds)
