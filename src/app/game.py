from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from commit_reveal import DEFAULT_DIGEST, Commitment, commit, reveal
from protocol import InvalidSelection, MoveSet, Outcome, resolve

Command = Literal["play", "exit", "help"]


@dataclass(frozen=True)
class Selection:
    command: Command
    index: int | None = None


@dataclass(frozen=True)
class RoundResult:
    human_move: str
    computer_move: str
    outcome: Outcome
    hmac: str
    key: str


def parse_selection(raw: str, n: int) -> Selection:
    value = raw.strip()
    if value == "?":
        return Selection(command="help")
    try:
        index = int(value)
    except ValueError:
        raise InvalidSelection(_range_message(n)) from None
    if index == 0:
        return Selection(command="exit")
    if not 1 <= index <= n:
        raise InvalidSelection(_range_message(n))
    return Selection(command="play", index=index)


@dataclass
class GameSession:
    """One round against the computer.

    The commitment is private to the session; the key only leaves it inside the
    ``RoundResult`` returned by :meth:`play`, which needs a parsed selection.
    """

    moves: MoveSet
    _commitment: Commitment = field(repr=False)
    _played: bool = False

    @classmethod
    def start(cls, moves: MoveSet, *, digest: str = DEFAULT_DIGEST) -> "GameSession":
        return cls(moves=moves, _commitment=commit(moves.moves, digest=digest))

    @property
    def hmac(self) -> str:
        return self._commitment.hmac

    @property
    def digest(self) -> str:
        return self._commitment.digest

    @property
    def played(self) -> bool:
        return self._played

    def play(self, selection: Selection) -> RoundResult:
        if selection.command != "play" or selection.index is None:
            raise ValueError(f"cannot play a {selection.command!r} selection")
        if self._played:
            raise RuntimeError("session already played; start a new one")
        self._played = True

        computer_index = self.moves.index(self._commitment.move)
        outcome = resolve(selection.index, computer_index, len(self.moves))
        disclosed = reveal(self._commitment)
        return RoundResult(
            human_move=self.moves.name(selection.index),
            computer_move=disclosed.move,
            outcome=outcome,
            hmac=self._commitment.hmac,
            key=disclosed.key,
        )


def _range_message(n: int) -> str:
    return f"Invalid move. Please enter a number between 0 and {n} (or ? for help)."
