from __future__ import annotations

import argparse
from typing import Callable

from commit_reveal import DEFAULT_DIGEST, SUPPORTED_DIGESTS, EntropyUnavailable, verify_hmac
from game import GameSession, RoundResult, parse_selection
from move_table import format_table
from protocol import InvalidMoveSet, InvalidSelection, MoveSet, build_matrix

EXIT_OK = 0
EXIT_INVALID_MOVES = 1
EXIT_INVALID_SELECTION = 2

_RESULT_LINES = {
    "Win": "You win!",
    "Lose": "You lose!",
    "Draw": "Draw!",
}


def main(argv: list[str] | None = None, *, read_line: Callable[[str], str] = input) -> int:
    parser = argparse.ArgumentParser(
        prog="hmac-rps",
        description="Provably fair rock-paper-scissors over any odd number of moves.",
        epilog="Put -- before the moves if a move name starts with a dash: hmac-rps -- rock -paper scissors",
    )
    parser.add_argument("moves", nargs="*", metavar="MOVE", help="Move names in circular order, e.g. rock paper scissors")
    parser.add_argument("--table", action="store_true", help="Print the outcome table and exit without playing")
    parser.add_argument("--digest", default=DEFAULT_DIGEST, choices=SUPPORTED_DIGESTS, help="HMAC digest")

    args = parser.parse_args(argv)

    try:
        moves = MoveSet.from_args(args.moves)
    except InvalidMoveSet:
        _print_usage_hint()
        return EXIT_INVALID_MOVES

    if args.table:
        print(format_table(build_matrix(moves)))
        return EXIT_OK

    try:
        session = GameSession.start(moves, digest=args.digest)
    except EntropyUnavailable as exc:
        raise SystemExit(f"Cannot start a fair game: {exc}")

    print(f"HMAC: {session.hmac}")
    _print_menu(moves)

    try:
        raw = read_line("Enter your move: ")
    except (EOFError, KeyboardInterrupt):
        print()
        print("Exiting the game.")
        return EXIT_OK

    try:
        selection = parse_selection(raw, len(moves))
    except InvalidSelection as exc:
        print(exc)
        return EXIT_INVALID_SELECTION

    if selection.command == "help":
        print(format_table(build_matrix(moves)))
        return EXIT_OK
    if selection.command == "exit":
        print("Exiting the game.")
        return EXIT_OK

    _show_round_result(session.play(selection))
    return EXIT_OK


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hmac-rps-verify",
        description="Check that a revealed key and move match the HMAC shown before you played.",
    )
    parser.add_argument("--key", required=True, help="HMAC key printed after the round (hex)")
    parser.add_argument("--move", required=True, help="Computer move printed after the round")
    parser.add_argument("--hmac", required=True, help="HMAC printed before you chose your move")
    parser.add_argument("--digest", default=DEFAULT_DIGEST, choices=SUPPORTED_DIGESTS)

    args = parser.parse_args(argv)

    if verify_hmac(expected_hmac=args.hmac, key=args.key, move=args.move, digest=args.digest):
        print("OK: HMAC matches")
        return 0
    print(f"MISMATCH: HMAC({args.digest}) of {args.move!r} under the given key does not equal {args.hmac}")
    return 1


def _print_usage_hint() -> None:
    print("Invalid number of moves. Please provide an odd number of unique moves (at least 3).")
    print("Example: hmac-rps rock paper scissors")


def _print_menu(moves: MoveSet) -> None:
    print("Available moves:")
    for i, name in enumerate(moves, start=1):
        print(f"{i} - {name}")
    print("0 - exit")
    print("? - help")


def _show_round_result(result: RoundResult) -> None:
    print(f"HMAC: {result.hmac}")
    print(f"Your move: {result.human_move}")
    print(f"Computer move: {result.computer_move}")
    print(_RESULT_LINES[result.outcome])
    print(f"HMAC key: {result.key}")


if __name__ == "__main__":
    raise SystemExit(main())
