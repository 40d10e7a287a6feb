from typing import Iterator, List, Tuple

from rcvote.Election import Election
from rcvote.Errors import ElectionSetupError, InvalidBallot


# A ballot file is plain text:
#   the number of candidates n on the first line,
#   the n candidate names, one per line,
#   then one ballot per line: n integers, the rank given to each candidate in the order they were listed.
# Blank lines and lines starting with '#' are ignored.

class BallotLoader(object):
    def __init__(self, ballot_file: str, skip_invalid: bool = False, debug: bool = False):
        self.ballot_file = ballot_file
        self.skip_invalid = skip_invalid
        self.debug = debug
        self.names: List[str] = []
        self.accepted = 0
        self.rejected = 0
        self.election = None

        self.load()

    def read_lines(self) -> Iterator[Tuple[int, str]]:
        with open(self.ballot_file, "r") as f:
            for line_number, line in enumerate(f, start=1):
                text = line.strip()
                if text and not text.startswith("#"):
                    yield line_number, text

    def reject(self, ranks, line_number: int, reason: str):
        if not self.skip_invalid:
            raise InvalidBallot(ranks, f"{reason} on line {line_number} of {self.ballot_file}")
        self.rejected += 1

    def load(self):
        lines = list(self.read_lines())
        if not lines:
            raise ElectionSetupError(f"no candidates found in {self.ballot_file}")

        line_number, header = lines[0]
        try:
            num_candidates = int(header)
        except ValueError:
            raise ElectionSetupError(f"line {line_number} of {self.ballot_file}: "
                                     f"expected the number of candidates, got {header!r}")

        if num_candidates < 1:
            raise ElectionSetupError(f"line {line_number} of {self.ballot_file}: "
                                     f"an election needs at least one candidate, got {num_candidates}")

        roster = lines[1:num_candidates + 1]
        self.names = [name for _, name in roster]
        if len(self.names) != num_candidates:
            raise ElectionSetupError(f"{self.ballot_file} lists {len(self.names)} of {num_candidates} candidates")

        self.election = Election(num_candidates, debug=self.debug)
        for line_number, name in roster:
            if name in self.election.candidate_names():
                raise ElectionSetupError(f"line {line_number} of {self.ballot_file}: "
                                         f"candidate {name} is listed twice")
            self.election.add_candidate(name)

        for line_number, text in lines[num_candidates + 1:]:
            fields = text.split()
            try:
                ranks = [int(field) for field in fields]
            except ValueError:
                self.reject(fields, line_number, "Ranks must be integers")
                continue

            if not self.election.is_ballot_valid(ranks):
                self.reject(ranks, line_number, "Invalid ballot")
                continue

            self.election.add_ballot(ranks)
            self.accepted += 1
