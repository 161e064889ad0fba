"""
Scripted-game harness.

- run_case:  play one target word with a fixed list of guesses, pressing
             every key through the InputController like a real player.
- run_batch: run the same script against many targets.

Rejected guesses (too short, not in the word list) are counted and the
typed letters are cleared with backspaces, so the script moves on. The
harness is UI-agnostic. The batch CLI uses it, and tests can use it too.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from dailyword.datasets.catalog import WordCatalog
from dailyword.game.config import MAX_ATTEMPTS
from dailyword.game.controls import InputController
from dailyword.game.session import GameSession, GameStatus, Rejected

logger = logging.getLogger(__name__)


def run_case(
        guesses: Sequence[str],
        target: str,
        *,
        catalog: WordCatalog,
        max_attempts: int = MAX_ATTEMPTS,
) -> Dict:
    """
    Play `guesses` in order against `target` until the game ends or the
    script runs out.

    Returns:
        dict with keys:
            target, status ("won"/"lost"/"in_progress"), success (bool),
            guesses (int scored), rejected (int), time_ms (float),
            history (list[(guess, pattern)])
    """
    session = GameSession(target, catalog, max_attempts=max_attempts, word_length=catalog.word_length)
    controls = InputController(session)
    rejected = 0

    t0 = time.perf_counter()
    for word in guesses:
        if session.is_over:
            break
        for ch in word:
            controls.letter_pressed(ch)
        result = controls.enter_pressed()
        if isinstance(result, Rejected):
            rejected += 1
            logger.debug("script guess %r rejected: %s", word, result.reason.value)
            while controls.backspace_pressed():
                pass
    dt_ms = (time.perf_counter() - t0) * 1000.0

    history: List[Tuple[str, str]] = [(g.word, g.pattern) for g in session.guesses]
    return {
        "target": session.target,
        "status": session.status.value,
        "success": session.status is GameStatus.WON,
        "guesses": len(history),
        "rejected": rejected,
        "time_ms": dt_ms,
        "history": history,
    }


def sample_targets(targets: Iterable[str], sample: Optional[int] = None) -> List[str]:
    """The first `sample` targets in list (day) order, or all of them."""
    pool = list(targets)
    if sample is not None:
        pool = pool[:sample]
    return pool


def run_batch(
        guesses: Sequence[str],
        targets: Iterable[str],
        *,
        catalog: WordCatalog,
        max_attempts: int = MAX_ATTEMPTS,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run the same guess script against each target. If `sample` is given,
    only the first K targets are played.
    """
    pool = sample_targets(targets, sample)
    return [run_case(guesses, t, catalog=catalog, max_attempts=max_attempts) for t in pool]
