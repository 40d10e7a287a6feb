"""Tests for the ballot file loader and the command line entry point."""

from pathlib import Path

import pytest

from BallotLoader import BallotLoader
from ranked_choice_voting import format_result, main
from rcvote.Candidate import Candidate
from rcvote.ElectionResult import ElectionResult
from rcvote.Errors import ElectionSetupError, InvalidBallot

DATA = Path(__file__).parent / "data"


def write_ballots(tmp_path, text: str) -> str:
    ballot_file = tmp_path / "ballots.txt"
    ballot_file.write_text(text)
    return str(ballot_file)


class TestBallotLoader:
    def test_example_file(self):
        loader = BallotLoader(str(DATA / "Test1.txt"))
        assert loader.names == ["Adele", "Beyonce", "Coldplay", "Drake"]
        assert loader.accepted == 9
        assert loader.rejected == 0
        assert loader.election.num_ballots() == 9
        assert loader.election.select_winner() == ["Beyonce"]

    def test_example_rounds(self):
        result = BallotLoader(str(DATA / "Test1.txt")).election.result()
        assert [c.name for c in result.eliminated()] == ["Adele", "Drake"]
        assert len(result.rounds) == 3

    def test_comments_and_blank_lines(self, tmp_path):
        ballot_file = write_ballots(tmp_path, "# roster\n2\n\nAdele\nBeyonce\n\n# ballots\n1 2\n2 1\n1 2\n")
        loader = BallotLoader(ballot_file)
        assert loader.names == ["Adele", "Beyonce"]
        assert loader.election.select_winner() == ["Adele"]

    def test_invalid_ballot_reports_line(self, tmp_path):
        ballot_file = write_ballots(tmp_path, "2\nAdele\nBeyonce\n1 2\n1 1\n")
        with pytest.raises(InvalidBallot, match="line 5"):
            BallotLoader(ballot_file)

    def test_non_numeric_ranks(self, tmp_path):
        ballot_file = write_ballots(tmp_path, "2\nAdele\nBeyonce\n1 x\n")
        with pytest.raises(InvalidBallot, match="line 4"):
            BallotLoader(ballot_file)

    def test_skip_invalid(self, tmp_path):
        ballot_file = write_ballots(tmp_path, "2\nAdele\nBeyonce\n1 2\n1 1\n1 x\n2 1 3\n2 1\n2 1\n")
        loader = BallotLoader(ballot_file, skip_invalid=True)
        assert loader.accepted == 3
        assert loader.rejected == 3
        assert loader.election.select_winner() == ["Beyonce"]

    def test_missing_candidates(self, tmp_path):
        ballot_file = write_ballots(tmp_path, "3\nAdele\nBeyonce\n")
        with pytest.raises(ElectionSetupError):
            BallotLoader(ballot_file)

    def test_bad_header(self, tmp_path):
        ballot_file = write_ballots(tmp_path, "Adele\nBeyonce\n")
        with pytest.raises(ElectionSetupError):
            BallotLoader(ballot_file)

    def test_empty_file(self, tmp_path):
        ballot_file = write_ballots(tmp_path, "\n# nothing here\n")
        with pytest.raises(ElectionSetupError):
            BallotLoader(ballot_file)

    @pytest.mark.parametrize("header", ["0", "-2"])
    def test_no_candidates(self, tmp_path, header):
        ballot_file = write_ballots(tmp_path, f"{header}\n")
        with pytest.raises(ElectionSetupError, match="line 1"):
            BallotLoader(ballot_file)

    def test_candidate_listed_twice(self, tmp_path):
        ballot_file = write_ballots(tmp_path, "2\nAdele\nAdele\n1 2\n")
        with pytest.raises(ElectionSetupError, match="line 3"):
            BallotLoader(ballot_file)

    def test_election_built_from_constructor_options(self, capsys):
        election = BallotLoader(str(DATA / "Test1.txt"), skip_invalid=False, debug=True).election
        assert election.debug
        assert election.candidate_names() == ["Adele", "Beyonce", "Coldplay", "Drake"]
        assert election.select_winner() == ["Beyonce"]
        assert "round: 1" in capsys.readouterr().out


class TestRankedChoiceVoting:
    def test_winner(self, capsys):
        main([str(DATA / "Test1.txt")])
        assert capsys.readouterr().out == "Winner is Beyonce\n"

    def test_tie(self, tmp_path, capsys):
        ballot_file = write_ballots(tmp_path, "2\nAdele\nBeyonce\n1 2\n2 1\n")
        main([ballot_file])
        assert capsys.readouterr().out == "Tie between Adele and Beyonce\n"

    def test_debug(self, capsys):
        main([str(DATA / "Test1.txt"), "--debug"])
        out = capsys.readouterr().out
        assert "Valid Ballots" in out
        assert "round: 3" in out
        assert out.endswith("Winner is Beyonce\n")

    def test_skip_invalid_flag(self, tmp_path, capsys):
        ballot_file = write_ballots(tmp_path, "2\nAdele\nBeyonce\n1 1\n2 1\n")
        main([ballot_file, "--skip-invalid"])
        assert capsys.readouterr().out == "Winner is Beyonce\n"

    def test_format_three_way_tie(self):
        winners = [Candidate("A", 0), Candidate("B", 1), Candidate("C", 2)]
        assert format_result(ElectionResult(winners, is_tie=True)) == "Tie between A, B and C"

    def test_format_winner(self):
        assert format_result(ElectionResult([Candidate("A", 0)])) == "Winner is A"
