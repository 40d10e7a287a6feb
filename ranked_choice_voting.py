#!venv/bin/python3
from argparse import ArgumentParser

from BallotLoader import BallotLoader
from rcvote.ElectionResult import ElectionResult


def format_result(result: ElectionResult) -> str:
    if not result.is_tie:
        return f"Winner is {result.winner().name}"
    names = result.names()
    return f"Tie between {', '.join(names[:-1])} and {names[-1]}"


def print_stat(prefix, count, explanation):
    print("%20s %7d %s" % (prefix, count, explanation))


# one argument is required: the ballot file.
# --skip-invalid drops malformed ballots instead of stopping,
# --debug prints the vote totals of every round.

def main(argv=None):
    argparse = ArgumentParser(description="Select the winner of a ranked choice election")
    argparse.add_argument("ballot_file", help="File with the candidate names followed by one ballot per line")
    argparse.add_argument("--skip-invalid", action="store_true", help="Skip invalid ballots", default=False)
    argparse.add_argument("--debug", action="store_true", help="Debug flag", default=False)
    args = argparse.parse_args(argv)

    loader = BallotLoader(args.ballot_file, skip_invalid=args.skip_invalid, debug=args.debug)
    if args.debug:
        print_stat("Valid Ballots", loader.accepted, "ballots ranking every candidate exactly once")
        print_stat("Invalid Ballots", loader.rejected, "ballots skipped")
        print("")

    print(format_result(loader.election.result()))


if __name__ == "__main__":
    main()
