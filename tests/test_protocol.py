from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from protocol import (  # type: ignore[import-not-found]  # noqa: E402
    InvalidConfiguration,
    MoveSet,
    OutcomeTable,
    determine_outcome,
)

ODD_SIZES = list(range(3, 16, 2))


def _table(n: int) -> OutcomeTable:
    return OutcomeTable.build(MoveSet(tuple(f"m{i}" for i in range(1, n + 1))))


@pytest.mark.parametrize("names", [["a", "b"], ["a", "b", "c", "d"], [], ["a"]])
def test_move_set_rejects_bad_counts(names: list[str]) -> None:
    with pytest.raises(InvalidConfiguration):
        MoveSet(tuple(names))


def test_move_set_rejects_duplicates() -> None:
    with pytest.raises(InvalidConfiguration, match="Rock"):
        MoveSet(("Rock", "Paper", "Rock"))


def test_move_set_names_are_case_sensitive() -> None:
    moves = MoveSet(("rock", "Rock", "ROCK"))
    assert len(moves) == 3


def test_move_set_rejects_empty_name() -> None:
    with pytest.raises(InvalidConfiguration):
        MoveSet(("Rock", "", "Scissors"))


def test_move_set_lookups() -> None:
    moves = MoveSet(["Rock", "Paper", "Scissors"])  # type: ignore[arg-type]
    assert moves.names == ("Rock", "Paper", "Scissors")
    assert moves.name(1) == "Rock"
    assert moves.name(3) == "Scissors"
    assert moves.ordinal("Paper") == 2
    assert list(moves) == [(1, "Rock"), (2, "Paper"), (3, "Scissors")]
    assert list(moves.ordinals) == [1, 2, 3]

    with pytest.raises(ValueError):
        moves.name(0)
    with pytest.raises(ValueError):
        moves.name(4)
    with pytest.raises(KeyError):
        moves.ordinal("Lizard")


@pytest.mark.parametrize("n", ODD_SIZES)
def test_diagonal_is_draw(n: int) -> None:
    table = _table(n)
    for a in range(1, n + 1):
        assert table.outcome(a, a) == "draw"


@pytest.mark.parametrize("n", ODD_SIZES)
def test_outcomes_are_antisymmetric(n: int) -> None:
    table = _table(n)
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            if a == b:
                continue
            assert {table.outcome(a, b), table.outcome(b, a)} == {"win", "lose"}


@pytest.mark.parametrize("n", ODD_SIZES)
def test_each_move_beats_half_the_others(n: int) -> None:
    table = _table(n)
    for a in range(1, n + 1):
        row = [table.outcome(a, b) for b in range(1, n + 1)]
        assert row.count("win") == (n - 1) // 2
        assert row.count("lose") == (n - 1) // 2
        assert row.count("draw") == 1


@pytest.mark.parametrize("n", ODD_SIZES)
def test_each_move_beats_the_moves_that_follow_it(n: int) -> None:
    table = _table(n)
    for a in range(1, n + 1):
        expected = sorted((a - 1 + k) % n + 1 for k in range(1, n // 2 + 1))
        assert table.wins_for(a) == expected


def test_each_move_beats_the_next_one_with_three_moves() -> None:
    table = OutcomeTable.build(MoveSet(("Rock", "Paper", "Scissors")))
    assert table.outcome_by_name("Rock", "Paper") == "win"
    assert table.outcome_by_name("Paper", "Scissors") == "win"
    assert table.outcome_by_name("Scissors", "Rock") == "win"
    assert table.outcome_by_name("Rock", "Scissors") == "lose"
    assert table.outcome_by_name("Rock", "Rock") == "draw"


def test_classic_rules_when_listed_in_dominance_order() -> None:
    table = OutcomeTable.build(MoveSet(("Rock", "Scissors", "Paper")))
    assert table.outcome_by_name("Rock", "Scissors") == "win"
    assert table.outcome_by_name("Scissors", "Paper") == "win"
    assert table.outcome_by_name("Paper", "Rock") == "win"
    assert table.outcome_by_name("Rock", "Paper") == "lose"
    assert table.outcome_by_name("Rock", "Rock") == "draw"


def test_five_moves_in_listed_order() -> None:
    table = OutcomeTable.build(MoveSet(("Rock", "Paper", "Scissors", "Lizard", "Spock")))
    assert table.wins_for(1) == [2, 3]
    assert table.outcome_by_name("Rock", "Scissors") == "win"
    assert table.outcome_by_name("Rock", "Spock") == "lose"
    assert table.outcome_by_name("Rock", "Lizard") == "lose"
    assert table.outcome_by_name("Spock", "Rock") == "win"


def test_lizard_spock_rules_when_listed_in_dominance_order() -> None:
    table = OutcomeTable.build(MoveSet(("Rock", "Scissors", "Lizard", "Paper", "Spock")))
    wins = {
        ("Rock", "Scissors"), ("Rock", "Lizard"),
        ("Scissors", "Lizard"), ("Scissors", "Paper"),
        ("Lizard", "Paper"), ("Lizard", "Spock"),
        ("Paper", "Spock"), ("Paper", "Rock"),
        ("Spock", "Rock"), ("Spock", "Scissors"),
    }
    for a, b in wins:
        assert table.outcome_by_name(a, b) == "win"
        assert table.outcome_by_name(b, a) == "lose"


def test_order_of_names_changes_who_wins() -> None:
    forward = OutcomeTable.build(MoveSet(("Rock", "Paper", "Scissors")))
    reversed_ = OutcomeTable.build(MoveSet(("Scissors", "Paper", "Rock")))
    assert forward.outcome_by_name("Rock", "Scissors") == "lose"
    assert reversed_.outcome_by_name("Rock", "Scissors") == "win"


def test_determine_outcome_is_cyclic_distance() -> None:
    assert determine_outcome(3, 1, 1) == "draw"
    assert determine_outcome(3, 1, 2) == "win"
    assert determine_outcome(3, 1, 3) == "lose"
    assert determine_outcome(7, 6, 2) == "win"
    assert determine_outcome(7, 2, 6) == "lose"


def test_table_rejects_unknown_ordinal() -> None:
    with pytest.raises(ValueError):
        _table(3).outcome(1, 4)
