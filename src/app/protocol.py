from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Iterator, Literal

Outcome = Literal["win", "lose", "draw"]

OUTCOME_LABELS: Final[dict[Outcome, str]] = {
    "win": "Win!",
    "lose": "Lose!",
    "draw": "Draw!",
}


class InvalidConfiguration(ValueError):
    """Raised when the move list cannot form a cyclic dominance ordering."""


@dataclass(frozen=True)
class MoveSet:
    """Ordered, odd-sized collection of unique move names.

    Ordinals are 1-based and follow the order the names were supplied in.
    """

    names: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        names = tuple(self.names)
        if len(names) < 3 or len(names) % 2 == 0:
            raise InvalidConfiguration(
                f"expected an odd number of moves (at least 3), got {len(names)}"
            )
        if any(not name for name in names):
            raise InvalidConfiguration("move names must not be empty")
        if len(set(names)) != len(names):
            dupes = sorted({n for n in names if names.count(n) > 1})
            raise InvalidConfiguration("duplicate move names: " + ", ".join(dupes))

        object.__setattr__(self, "names", names)
        object.__setattr__(self, "_index", {name: i + 1 for i, name in enumerate(names)})

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(enumerate(self.names, start=1))

    @property
    def ordinals(self) -> range:
        return range(1, len(self.names) + 1)

    def name(self, ordinal: int) -> str:
        if ordinal not in self.ordinals:
            raise ValueError(f"ordinal {ordinal} out of range 1-{len(self.names)}")
        return self.names[ordinal - 1]

    def ordinal(self, name: str) -> int:
        return self._index[name]


def determine_outcome(n: int, a: int, b: int) -> Outcome:
    """Outcome for move ``a`` played against move ``b`` among ``n`` moves.

    Each move beats the (n - 1) / 2 moves that follow it on the cycle and
    loses to the (n - 1) / 2 that precede it.
    """
    distance = (n + b - a) % n
    if distance == 0:
        return "draw"
    if distance <= n // 2:
        return "win"
    return "lose"


@dataclass(frozen=True)
class OutcomeTable:
    moves: MoveSet
    _cells: dict[tuple[int, int], Outcome] = field(repr=False)

    @classmethod
    def build(cls, moves: MoveSet) -> "OutcomeTable":
        n = len(moves)
        cells = {(a, b): determine_outcome(n, a, b) for a in moves.ordinals for b in moves.ordinals}
        return cls(moves=moves, _cells=cells)

    def outcome(self, a: int, b: int) -> Outcome:
        """Row ``a`` against column ``b``, from ``a``'s side."""
        try:
            return self._cells[(a, b)]
        except KeyError:
            raise ValueError(f"ordinals ({a}, {b}) out of range 1-{len(self.moves)}") from None

    def outcome_by_name(self, a: str, b: str) -> Outcome:
        return self.outcome(self.moves.ordinal(a), self.moves.ordinal(b))

    def wins_for(self, a: int) -> list[int]:
        return [b for b in self.moves.ordinals if self.outcome(a, b) == "win"]
