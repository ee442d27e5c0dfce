"""
CAGED drill scoring - pure logic.

Converts a drill attempt (shapes played, self-rated accuracy, elapsed time)
into a 0-100 score, plus the labels and bands the UI shows next to it.
No Flask, no I/O; every function is total over its inputs and never raises.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from fretlog_app.modules.shared.utils.numbers import round_half_up

from ..config import CagedDefaultConfig
from ..schemas import DrillAttempt, DrillScore

UNKNOWN_LABEL = 'Unknown'

ACCURACY_LABELS = {
    1: 'Poor - Many mistakes',
    2: 'Fair - Some mistakes',
    3: 'Good - Few mistakes',
    4: 'Very Good - Rare mistakes',
    5: 'Perfect - No mistakes',
}


class ScoreBand(Enum):
    """Severity band used for colour-coding a score."""
    HIGH = 'High'
    MEDIUM = 'Medium'
    LOW = 'Low'
    CRITICAL = 'Critical'


class ScoreEngine:
    """
    Pure calculation engine for drill scores.

    The target time and shape vocabulary default to the module config; a
    host may build an engine with a different target time (e.g. from
    ``CAGED_TARGET_TIME_SECONDS``).
    """

    def __init__(
        self,
        target_time_seconds: Optional[float] = None,
        shapes: Iterable[str] = CagedDefaultConfig.SHAPES,
    ):
        if target_time_seconds is None or target_time_seconds <= 0:
            target_time_seconds = CagedDefaultConfig.TARGET_TIME_SECONDS
        self.target_time_seconds = target_time_seconds
        self.shapes = tuple(shapes)

    def shape_coverage(self, shapes: Iterable[str]) -> float:
        # Duplicates never inflate coverage; surplus entries cap at 1.0
        return min(len(set(shapes)) / len(self.shapes), 1.0)

    @staticmethod
    def accuracy_score(accuracy: int) -> float:
        # 1-5 rating -> 0.0-1.0
        low, high = CagedDefaultConfig.ACCURACY_MIN, CagedDefaultConfig.ACCURACY_MAX
        return (accuracy - low) / (high - low)

    def speed_score(self, time_seconds: float) -> float:
        if time_seconds > 0:
            return min(self.target_time_seconds / time_seconds, 1.0)
        return 0.0

    def compute(self, attempt: DrillAttempt) -> DrillScore:
        """
        Score one attempt.

        raw = 0.4 * coverage + 0.4 * accuracy + 0.2 * speed, reported as
        round(raw * 100). Out-of-range accuracy is not clamped.
        """
        coverage = self.shape_coverage(attempt.shapes)
        accuracy = self.accuracy_score(attempt.accuracy)
        speed = self.speed_score(attempt.time_seconds)

        raw = ((coverage * CagedDefaultConfig.WEIGHT_SHAPES)
               + (accuracy * CagedDefaultConfig.WEIGHT_ACCURACY)
               + (speed * CagedDefaultConfig.WEIGHT_SPEED))

        return DrillScore(
            value=round_half_up(raw * 100),
            shape_coverage=coverage,
            accuracy_score=accuracy,
            speed_score=speed,
            raw=raw,
        )


_default_engine = ScoreEngine()


def compute_score(attempt: DrillAttempt, engine: Optional[ScoreEngine] = None) -> DrillScore:
    return (engine or _default_engine).compute(attempt)


def accuracy_label(accuracy) -> str:
    """Descriptive phrase for a 1-5 rating; anything else is 'Unknown'."""
    if isinstance(accuracy, bool):
        return UNKNOWN_LABEL
    try:
        return ACCURACY_LABELS.get(accuracy, UNKNOWN_LABEL)
    except TypeError:
        # unhashable input
        return UNKNOWN_LABEL


def score_severity_band(score: float) -> ScoreBand:
    if score >= CagedDefaultConfig.BAND_HIGH:
        return ScoreBand.HIGH
    if score >= CagedDefaultConfig.BAND_MEDIUM:
        return ScoreBand.MEDIUM
    if score >= CagedDefaultConfig.BAND_LOW:
        return ScoreBand.LOW
    return ScoreBand.CRITICAL


def format_duration(total_seconds: int) -> str:
    """'45s' under a minute, otherwise '2m 5s'."""
    if total_seconds < 60:
        return f'{total_seconds}s'
    minutes, seconds = divmod(total_seconds, 60)
    return f'{minutes}m {seconds}s'
