from dataclasses import dataclass, field
from typing import List, Set

from .Errors import DegenerateElimination


@dataclass
class Ballot:
    # ranks[candidate_id] is the rank this voter gave that candidate, 1 is the top choice
    ranks: List[int]
    eliminated: Set[int] = field(default_factory=set)

    def top_candidate(self) -> int:
        remaining = [i for i in range(len(self.ranks)) if i not in self.eliminated]
        if not remaining:
            raise DegenerateElimination(f"every candidate on ballot {self.ranks} has been eliminated")
        return min(remaining, key=lambda i: self.ranks[i])

    def eliminate_candidate(self, candidate_id: int) -> None:
        self.eliminated.add(candidate_id)
