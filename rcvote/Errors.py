class ElectionError(Exception):
    pass


class InvalidBallot(ElectionError, ValueError):
    def __init__(self, ranks, reason: str = "Invalid ballot"):
        super().__init__(f"{reason}: {list(ranks)}")
        self.ranks = list(ranks)


class ElectionSetupError(ElectionError):
    pass


# more candidates than the election was created for
class CandidateOverflow(ElectionSetupError, IndexError):
    pass


# eliminating a candidate twice, or a ballot with nobody left on it
class DegenerateElimination(ElectionError, RuntimeError):
    pass
