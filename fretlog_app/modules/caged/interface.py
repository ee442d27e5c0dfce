# modules/caged/interface.py
from typing import Optional, Sequence

from flask import current_app, has_app_context

from fretlog_app.models import DrillSessionRecord
from .logics import analytics
from .logics.scoring import (
    ACCURACY_LABELS,
    ScoreEngine,
    accuracy_label,
    format_duration,
    score_severity_band,
)
from .schemas import DrillAttempt, DrillScore


class CagedInterface:
    """
    Single entry point of the CAGED module for routes and other modules.
    """

    @staticmethod
    def get_engine(target_time_seconds: Optional[float] = None) -> ScoreEngine:
        """Engine honouring CAGED_TARGET_TIME_SECONDS when an app is active."""
        if target_time_seconds is None and has_app_context():
            target_time_seconds = current_app.config.get('CAGED_TARGET_TIME_SECONDS')
        return ScoreEngine(target_time_seconds=target_time_seconds)

    @staticmethod
    def describe_score(attempt: DrillAttempt, score: DrillScore) -> dict:
        """Everything the drill result card shows."""
        return {
            'score': score.value,
            'breakdown': score.breakdown(),
            'band': score_severity_band(score.value).value,
            'accuracy': attempt.accuracy,
            'accuracy_label': accuracy_label(attempt.accuracy),
            'time_seconds': attempt.time_seconds,
            'time_label': format_duration(attempt.time_seconds),
            'shapes': list(attempt.shapes),
        }

    @staticmethod
    def get_accuracy_labels() -> dict:
        return dict(ACCURACY_LABELS)

    @staticmethod
    def analyze_sessions(sessions: Sequence[DrillSessionRecord]) -> dict:
        stats = analytics.drill_session_stats(sessions)
        return {
            'stats': None if stats is None else {
                'avg_score': stats.avg_score,
                'avg_time': stats.avg_time,
                'avg_time_label': format_duration(stats.avg_time),
                'best_score': stats.best_score,
                'best_time': stats.best_time,
                'best_time_label': format_duration(stats.best_time),
            },
            'shapes': [p.to_dict() for p in analytics.analyze_shape_performance(sessions)],
            'summary': analytics.performance_summary(sessions).to_dict(),
        }
