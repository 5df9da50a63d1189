from __future__ import annotations

import argparse
import logging
from typing import Callable

from commit_reveal import Commitment, EntropyUnavailable, from_hex, to_hex, verify_commitment
from help_table import HELP_TITLE, format_help_table, format_menu
from protocol import OUTCOME_LABELS, InvalidConfiguration, MoveSet
from session import GameSession, InvalidInput, RoundResult

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps",
        description="Play an N-move rock-paper-scissors round against the computer. "
        "The computer's move is committed with an HMAC before you choose.",
    )
    parser.add_argument("moves", nargs="*", help="Odd number (>= 3) of unique move names; order defines who beats whom")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        session = GameSession.start(args.moves)
    except InvalidConfiguration as exc:
        print("Error: You must provide an odd number (at least 3) of unique, non-empty moves.")
        print(f"   {exc}")
        print("   Example: rps Rock Paper Scissors")
        return 1
    except EntropyUnavailable as exc:
        print(f"Error: {exc}")
        return 2

    play(session)
    return 0


def play(
    session: GameSession,
    *,
    read: Callable[[], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    """Console loop for one round; returns once the session is resolved or exited."""
    read = read or input
    write = write or print
    write(f"HMAC: {session.mac_hex}")
    write(format_menu(session.moves))

    while True:
        try:
            line = read()
        except EOFError:
            write("No input; exiting.")
            return

        try:
            action = session.submit(line)
        except InvalidInput as exc:
            write(str(exc))
            write(format_menu(session.moves))
            continue

        if action == "help":
            write("\n" + HELP_TITLE)
            write(format_help_table(session.table))
            write(format_menu(session.moves))
            continue
        if action == "resolved" and session.result is not None:
            _show_round_result(session.result, write)
        return


def _show_round_result(result: RoundResult, write: Callable[[str], None]) -> None:
    write(f"Your move: {result.human_move}")
    write(f"Computer move: {result.computer_move}")
    write(OUTCOME_LABELS[result.outcome])
    write(f"HMAC key: {to_hex(result.key)}")
    write(f"HMAC selector: {to_hex(bytes([result.selector]))}")


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps-verify",
        description="Check that a revealed key and selector match the HMAC shown before your move.",
    )
    parser.add_argument("--hmac", required=True, help="HMAC shown before the move (hex)")
    parser.add_argument("--key", required=True, help="Revealed HMAC key (hex)")
    parser.add_argument("--selector", required=True, help="Revealed selector byte (hex)")
    parser.add_argument("--moves", nargs="+", default=None, help="Move list of the game, to show the committed move")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        mac = from_hex(args.hmac)
        key = from_hex(args.key)
        selector = from_hex(args.selector)
    except ValueError as exc:
        print(f"Error: malformed hex value: {exc}")
        return 2
    if len(selector) != 1:
        print("Error: selector must be exactly one byte (two hex characters)")
        return 2

    moves: MoveSet | None = None
    if args.moves:
        try:
            moves = MoveSet(tuple(args.moves))
        except InvalidConfiguration as exc:
            print(f"Error: {exc}")
            return 2

    ok = verify_commitment(expected_hmac=mac, key=key, selector=selector)
    logger.debug("Verification %s for selector %s", "passed" if ok else "failed", args.selector)
    if ok and moves is not None:
        committed = Commitment(key=key, selector=selector[0], mac=mac)
        print(f"Committed move: {moves.name(committed.computer_ordinal(len(moves)))}")
    print("OK" if ok else "MISMATCH")
    return 0 if ok else 1


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    raise SystemExit(main())
