from typing import Dict, List, Optional

from .Candidate import Candidate


class RoundResult:
    def __init__(self, number: int, vote_totals: Dict[Candidate, int], eliminated: Optional[Candidate] = None):
        self.number = number
        self.vote_totals = vote_totals
        self.eliminated = eliminated

    def ordered_candidates(self) -> List[Candidate]:
        c_list = list(self.vote_totals.items())
        c_list.sort(key=lambda p: p[1], reverse=True)
        return list(map(lambda p: p[0], c_list))

    def total_votes(self) -> int:
        return sum(self.vote_totals.values())

    def print(self):
        print(f"round: {self.number}")
        for c in self.ordered_candidates():
            print("%30s %7d" % (c.name, self.vote_totals[c]))
        if self.eliminated is not None:
            print(f"eliminated: {self.eliminated.name}")
        print("")


class ElectionResult:
    def __init__(self, winners: List[Candidate], is_tie: bool = False, rounds: List[RoundResult] = None):
        self.winners = winners
        self.is_tie = is_tie
        self.rounds = rounds if rounds is not None else []

    def winner(self) -> Candidate:
        return self.winners[0]

    def names(self) -> List[str]:
        return [c.name for c in self.winners]

    def eliminated(self) -> List[Candidate]:
        return [r.eliminated for r in self.rounds if r.eliminated is not None]
