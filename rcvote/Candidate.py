from dataclasses import dataclass, field
from typing import List

from .Ballot import Ballot
from .Errors import DegenerateElimination


@dataclass(eq=False)
class Candidate:
    name: str
    id: int = 0
    ballots: List[Ballot] = field(default_factory=list)
    eliminated: bool = False

    def add_ballot(self, ballot: Ballot) -> None:
        self.ballots.append(ballot)

    def votes(self) -> int:
        return len(self.ballots)

    def is_eliminated(self) -> bool:
        return self.eliminated

    # hands back every ballot this candidate held so the election can pass them on
    def eliminate(self) -> List[Ballot]:
        if self.eliminated:
            raise DegenerateElimination(f"{self.name} has already been eliminated")
        self.eliminated = True
        released = self.ballots
        self.ballots = []
        return released
