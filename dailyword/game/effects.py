"""
Timed visual effects as data.

The reveal, shake and dance sequences are an ordered pipeline of
(delay, effect) steps derived from verdicts the core already computed. A
view drains the queue against its own clock; nothing here sleeps.
"""

from __future__ import annotations

import enum
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from dailyword.engine.scoring import LetterVerdict
from .session import Guess

FLIP_MS = 500
DANCE_MS = 500


class EffectKind(enum.Enum):
    FLIP = "flip"
    SHAKE = "shake"
    DANCE = "dance"


@dataclass(frozen=True)
class Effect:
    delay_ms: float
    kind: EffectKind
    index: int                                # tile position in the row
    verdict: Optional[LetterVerdict] = None   # style to apply after a flip


def reveal_effects(guess: Guess, flip_ms: int = FLIP_MS) -> List[Effect]:
    """Staggered flips, one per tile, each landing on its verdict."""
    return [Effect(i * flip_ms / 2, EffectKind.FLIP, i, v) for i, v in enumerate(guess.verdicts)]


def shake_effects(n_tiles: int) -> List[Effect]:
    return [Effect(0, EffectKind.SHAKE, i) for i in range(n_tiles)]


def dance_effects(n_tiles: int, dance_ms: int = DANCE_MS) -> List[Effect]:
    return [Effect(i * dance_ms / 5, EffectKind.DANCE, i) for i in range(n_tiles)]


@dataclass(order=True)
class _Entry:
    due: float
    seq: int
    effect: Effect = field(compare=False)


class EffectQueue:
    """Effects ordered by due time (FIFO among equal times)."""

    def __init__(self):
        self._heap: List[_Entry] = []
        self._seq = itertools.count()

    def push(self, effects: Iterable[Effect], start_ms: float = 0.0) -> None:
        for e in effects:
            heapq.heappush(self._heap, _Entry(start_ms + e.delay_ms, next(self._seq), e))

    def drain(self, until_ms: float) -> List[Effect]:
        """Pop every effect due at or before `until_ms`, in order."""
        out = []
        while self._heap and self._heap[0].due <= until_ms:
            out.append(heapq.heappop(self._heap).effect)
        return out

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

