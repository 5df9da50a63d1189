from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Sequence

from commit_reveal import Commitment, SecureRandom
from protocol import MoveSet, Outcome, OutcomeTable

logger = logging.getLogger(__name__)

_ORDINAL_RE = re.compile(r"[+-]?[0-9]+")

Action = Literal["help", "exit", "resolved"]


class SessionState(Enum):
    AWAITING_MOVE = "awaiting_move"
    RESOLVED = "resolved"
    EXITED = "exited"


class InvalidInput(ValueError):
    """Menu response that is neither ``0``, ``?`` nor a move ordinal."""

    def __init__(self, raw: str, move_count: int) -> None:
        self.raw = raw
        self.move_count = move_count
        super().__init__(f"Invalid input. Please enter a valid move (1-{move_count}) or '0' to exit.")


@dataclass(frozen=True)
class RoundResult:
    # Outcome is from the human's side: outcome(human, computer).
    human: int
    computer: int
    human_move: str
    computer_move: str
    outcome: Outcome
    key: bytes
    selector: int
    mac: bytes


class GameSession:
    """One round against the computer.

    The computer's move is committed when the session is created. ``submit``
    feeds one line of menu input and moves the state machine forward:

        AWAITING_MOVE --"?"--> AWAITING_MOVE   (help, no move consumed)
        AWAITING_MOVE --"0"--> EXITED
        AWAITING_MOVE --1..N--> RESOLVED
    """

    def __init__(self, moves: MoveSet, commitment: Commitment) -> None:
        self.moves = moves
        self.table = OutcomeTable.build(moves)
        self.commitment = commitment
        self.state = SessionState.AWAITING_MOVE
        self.result: RoundResult | None = None
        self._computer = commitment.computer_ordinal(len(moves))
        logger.debug("Session started with %d moves, mac=%s", len(moves), commitment.mac_hex)

    @classmethod
    def start(cls, names: Sequence[str], source: SecureRandom | None = None) -> "GameSession":
        moves = MoveSet(tuple(names))
        return cls(moves, Commitment.generate(source))

    @property
    def mac_hex(self) -> str:
        return self.commitment.mac_hex

    def submit(self, raw: str) -> Action:
        if self.state is not SessionState.AWAITING_MOVE:
            raise RuntimeError(f"session already {self.state.value}")

        choice = raw.strip()
        if choice == "?":
            logger.debug("Help requested")
            return "help"

        if not _ORDINAL_RE.fullmatch(choice):
            logger.debug("Rejected non-numeric input %r", raw)
            raise InvalidInput(raw, len(self.moves))
        ordinal = int(choice)

        if ordinal == 0:
            self.state = SessionState.EXITED
            logger.debug("Session exited without a move")
            return "exit"

        if ordinal not in self.moves.ordinals:
            logger.debug("Rejected out-of-range input %r", raw)
            raise InvalidInput(raw, len(self.moves))

        self.result = self._resolve(ordinal)
        self.state = SessionState.RESOLVED
        logger.debug("Session resolved: human=%d computer=%d outcome=%s", ordinal, self._computer, self.result.outcome)
        return "resolved"

    def _resolve(self, human: int) -> RoundResult:
        c = self.commitment
        return RoundResult(
            human=human,
            computer=self._computer,
            human_move=self.moves.name(human),
            computer_move=self.moves.name(self._computer),
            outcome=self.table.outcome(human, self._computer),
            key=c.key,
            selector=c.selector,
            mac=c.mac,
        )
