from dailyword.engine import LetterVerdict, evaluate
from dailyword.game import Guess
from dailyword.game.effects import (
    EffectKind, EffectQueue, dance_effects, reveal_effects, shake_effects,
)


def test_reveal_is_staggered_and_carries_verdicts():
    guess = Guess("slate", evaluate("slate", "crane"))
    effects = reveal_effects(guess)
    assert [e.delay_ms for e in effects] == [0, 250, 500, 750, 1000]
    assert all(e.kind is EffectKind.FLIP for e in effects)
    assert effects[2].verdict is LetterVerdict.CORRECT


def test_shake_and_dance_timing():
    assert [e.delay_ms for e in shake_effects(3)] == [0, 0, 0]
    assert [e.delay_ms for e in dance_effects(5)] == [0, 100, 200, 300, 400]


def test_queue_drains_in_due_order():
    q = EffectQueue()
    q.push(dance_effects(5), start_ms=1000)
    q.push(shake_effects(2))
    assert len(q) == 7

    first = q.drain(until_ms=0)
    assert [e.kind for e in first] == [EffectKind.SHAKE, EffectKind.SHAKE]
    assert q.drain(until_ms=999) == []
    due = q.drain(until_ms=1150)
    assert [e.index for e in due] == [0, 1]
    assert len(q) == 3
    q.clear()
    assert len(q) == 0
