# apps/cli/play.py
"""
Play the daily puzzle in a terminal.

Each line you type is fed to the game key by key, followed by Enter.
Special lines:
  !back   delete the last letter
  !clear  delete the whole entry
  !quit   leave the game

The board is drawn with pattern symbols under each guess
(G = correct, Y = wrong location, - = absent) and the keyboard shows the
best verdict seen for every letter.

Usage:
    python -m apps.cli.play                  # today's word
    python -m apps.cli.play --date 2022-03-14
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys

from dailyword.engine.errors import IndexOutOfRange
from dailyword.engine.keyboard import classify
from dailyword.engine.scoring import pattern_string
from dailyword.game.config import GameConfig
from dailyword.game.controls import InputController, notification_for
from dailyword.game.session import GameSession

KEY_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")


def render_board(session: GameSession) -> str:
    lines = []
    for letters, verdicts in session.rows():
        cells = " ".join(ch.upper() for ch in letters.ljust(session.word_length, "_"))
        lines.append(cells if verdicts is None else f"{cells}   {pattern_string(verdicts)}")
    return "\n".join(lines)


def _key_symbol(verdict) -> str:
    return verdict.symbol if verdict is not None else " "


def render_keyboard(session: GameSession) -> str:
    keys = session.key_classification
    lines = []
    for row in KEY_ROWS:
        lines.append(" ".join(f"{ch.upper()}{_key_symbol(classify(ch, keys))}" for ch in row))
    return "\n".join(lines)


def main(argv=None):
    ap = argparse.ArgumentParser(description="dailyword — guess the word of the day")
    GameConfig.add_arguments(ap)
    ap.add_argument("--date", type=dt.date.fromisoformat, default=None,
                    help="play the word for this day (YYYY-MM-DD, default: today)")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    config = GameConfig.from_args(args)

    try:
        catalog = config.load_catalog()
        now = dt.datetime.combine(args.date, dt.time()) if args.date else None
        session = GameSession.for_day(catalog, config, now=now)
    except IndexOutOfRange as e:
        print(f"error: no target word for that day: {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    controls = InputController(session)
    print(render_board(session))

    while controls.enabled:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line == "!quit":
            break
        if line == "!clear":
            while controls.handle_key("Backspace"):
                pass
        elif line == "!back":
            controls.handle_key("Backspace")
        else:
            for ch in line:
                controls.handle_key(ch)
            result = controls.handle_key("Enter")
            note = notification_for(result, session.target) if result is not None else None
            if note is not None:
                print(f"*** {note.message} ***")
        print(render_board(session))
        print(render_keyboard(session))

    return 0


if __name__ == "__main__":
    sys.exit(main())
