from typing import Iterable, Optional

from src.showdown_predictor.schema.report import ScoreResult, Signal


def signal(name: str, weight: float, reason: str = "") -> Signal:
    return Signal(name=name, weight=weight, reason=reason)


def override(name: str, score: float, reason: str = "") -> Signal:
    """A signal that replaces the running score outright"""
    return Signal(name=name, weight=score, reason=reason, override=True)


def fold_signals(base: float, signals: Iterable[Optional[Signal]], lower: Optional[float] = None, upper: Optional[float] = None) -> ScoreResult:
    """
    Fold weighted signals over a base score.

    None entries are skipped so callers can build the list with conditional
    expressions. The trail keeps the contributing signals in order, and the
    result is clamped to [lower, upper] when bounds are given.
    """
    score = base
    trail: list[Signal] = []
    for contribution in signals:
        if contribution is None:
            continue
        score = contribution.weight if contribution.override else score + contribution.weight
        trail.append(contribution)

    if lower is not None:
        score = max(lower, score)
    if upper is not None:
        score = min(upper, score)
    return ScoreResult(score=score, trail=tuple(trail))
