from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

import commit_reveal  # type: ignore[import-not-found]  # noqa: E402
from commit_reveal import verify_hmac  # type: ignore[import-not-found]  # noqa: E402
from game import GameSession, Selection, parse_selection  # type: ignore[import-not-found]  # noqa: E402
from protocol import InvalidSelection, MoveSet  # type: ignore[import-not-found]  # noqa: E402

RPS = MoveSet(("rock", "paper", "scissors"))


def _session_with_computer_move(monkeypatch: pytest.MonkeyPatch, move: str) -> GameSession:
    monkeypatch.setattr(commit_reveal, "pick_move", lambda moves: move)
    return GameSession.start(RPS)


def test_parse_selection_commands() -> None:
    assert parse_selection("?", 3) == Selection(command="help")
    assert parse_selection("0", 3) == Selection(command="exit")
    assert parse_selection(" 2\n", 3) == Selection(command="play", index=2)


@pytest.mark.parametrize("raw", ["", "rock", "4", "-1", "1.5", "??"])
def test_parse_selection_rejects_bad_input(raw: str) -> None:
    with pytest.raises(InvalidSelection, match="between 0 and 3"):
        parse_selection(raw, 3)


def test_play_rock_against_scissors_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    session = _session_with_computer_move(monkeypatch, "scissors")
    result = session.play(Selection(command="play", index=1))
    assert result.human_move == "rock"
    assert result.computer_move == "scissors"
    assert result.outcome == "Win"
    assert result.hmac == session.hmac
    assert verify_hmac(expected_hmac=session.hmac, key=result.key, move=result.computer_move)


def test_play_draw_and_lose(monkeypatch: pytest.MonkeyPatch) -> None:
    session = _session_with_computer_move(monkeypatch, "paper")
    assert session.play(Selection(command="play", index=2)).outcome == "Draw"

    session = _session_with_computer_move(monkeypatch, "paper")
    assert session.play(Selection(command="play", index=1)).outcome == "Lose"


def test_session_is_single_use() -> None:
    session = GameSession.start(RPS)
    session.play(Selection(command="play", index=1))
    assert session.played
    with pytest.raises(RuntimeError):
        session.play(Selection(command="play", index=1))


@pytest.mark.parametrize("command", ["exit", "help"])
def test_non_play_selection_reveals_nothing(command: str) -> None:
    session = GameSession.start(RPS)
    with pytest.raises(ValueError):
        session.play(Selection(command=command))  # type: ignore[arg-type]
    assert not session.played


def test_new_sessions_draw_fresh_keys() -> None:
    keys = {GameSession.start(RPS).play(Selection(command="play", index=1)).key for _ in range(20)}
    assert len(keys) == 20


def test_session_repr_does_not_leak_commitment() -> None:
    session = GameSession.start(RPS)
    assert "Commitment" not in repr(session)
