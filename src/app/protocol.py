from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Sequence

Outcome = Literal["Win", "Lose", "Draw"]

MIN_MOVES = 3


class InvalidMoveSet(ValueError):
    pass


class InvalidSelection(ValueError):
    pass


def unique_moves(tokens: Iterable[str]) -> tuple[str, ...]:
    # First occurrence wins; order is the circular order used by resolve().
    return tuple(dict.fromkeys(tokens))


def validate_moves(moves: Sequence[str]) -> None:
    n = len(moves)
    if n < MIN_MOVES or n % 2 != 1:
        raise InvalidMoveSet(
            f"got {n} unique move(s); an odd number of unique moves (at least {MIN_MOVES}) is required"
        )
    if len(set(moves)) != n:
        raise InvalidMoveSet("moves must be unique")


@dataclass(frozen=True)
class MoveSet:
    moves: tuple[str, ...]

    def __post_init__(self) -> None:
        validate_moves(self.moves)

    @classmethod
    def from_args(cls, tokens: Iterable[str]) -> "MoveSet":
        return cls(unique_moves(tokens))

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self):
        return iter(self.moves)

    def name(self, index: int) -> str:
        """Return the move at 1-based ``index``."""
        if not 1 <= index <= len(self.moves):
            raise IndexError(f"move index must be between 1 and {len(self.moves)}, got {index}")
        return self.moves[index - 1]

    def index(self, name: str) -> int:
        """Return the 1-based position of ``name``."""
        try:
            return self.moves.index(name) + 1
        except ValueError:
            raise ValueError(f"unknown move {name!r}") from None


def resolve(human_index: int, computer_index: int, n: int) -> Outcome:
    """Outcome for the human, with both indices 1-based in ``[1, n]``.

    The half of the circle that follows the human's move beats it; the half
    that precedes it loses to it. For rock, paper, scissors this is the
    classic game.
    """
    if n < MIN_MOVES or n % 2 != 1:
        raise ValueError(f"n must be odd and at least {MIN_MOVES}, got {n}")
    for label, idx in (("human_index", human_index), ("computer_index", computer_index)):
        if not 1 <= idx <= n:
            raise ValueError(f"{label} must be between 1 and {n}, got {idx}")

    mid = n // 2
    diff = (computer_index - human_index) % n
    if diff == 0:
        return "Draw"
    if diff <= mid:
        return "Lose"
    return "Win"


def determine_outcome(moves: MoveSet, human_move: str, computer_move: str) -> Outcome:
    return resolve(moves.index(human_move), moves.index(computer_move), len(moves))


def build_matrix(moves: MoveSet) -> list[list[str]]:
    """Rows are the computer's move, columns the human's; cells are the human's outcome."""
    n = len(moves)
    table: list[list[str]] = [["Moves", *moves]]
    for row in range(1, n + 1):
        cells: list[str] = [moves.name(row)]
        for col in range(1, n + 1):
            cells.append(resolve(human_index=col, computer_index=row, n=n))
        table.append(cells)
    return table
