"""
Stateless analytics over logged CAGED drill sessions.
Pure functions, no database dependencies.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from fretlog_app.models import DrillSessionRecord
from fretlog_app.modules.shared.utils.numbers import round_half_up

from ..config import CagedDefaultConfig
from ..schemas import DrillStatsDTO, PerformanceSummaryDTO, ShapePerformanceDTO
from .scoring import ScoreEngine


def drill_session_stats(sessions: Sequence[DrillSessionRecord]) -> Optional[DrillStatsDTO]:
    """Average/best score and time; None when nothing has been logged."""
    if not sessions:
        return None

    scores = [s.score for s in sessions]
    times = [s.time_seconds for s in sessions if s.time_seconds is not None]

    return DrillStatsDTO(
        avg_score=round_half_up(sum(scores) / len(scores)),
        avg_time=round_half_up(sum(times) / len(times)) if times else 0,
        best_score=max(scores),
        best_time=min(times) if times else 0,
    )


def _practiced_shapes(session: DrillSessionRecord, vocabulary: Iterable[str]) -> List[str]:
    played = set(session.shapes)
    return [shape for shape in vocabulary if shape in played]


def analyze_shape_performance(
    sessions: Sequence[DrillSessionRecord],
    vocabulary: Sequence[str] = CagedDefaultConfig.SHAPES,
) -> List[ShapePerformanceDTO]:
    """
    Per-shape performance, one entry per shape in vocabulary order.

    Every distinct shape played in a session counts as one attempt. The
    attempt inherits the session's normalized accuracy, an equal share of
    the session time and the session score. Sessions without an accuracy
    rating or a time do not contribute to those averages.
    """
    totals = {
        shape: {'attempts': 0, 'rated': 0, 'accuracy': 0.0, 'timed': 0,
                'time': 0.0, 'score': 0.0, 'last': None}
        for shape in vocabulary
    }

    for session in sessions:
        shapes = _practiced_shapes(session, vocabulary)
        if not shapes:
            continue
        per_shape_time = (session.time_seconds / len(shapes)
                          if session.time_seconds is not None else None)

        for shape in shapes:
            current = totals[shape]
            current['attempts'] += 1
            current['score'] += session.score
            if session.accuracy is not None:
                current['rated'] += 1
                current['accuracy'] += ScoreEngine.accuracy_score(session.accuracy)
            if per_shape_time is not None:
                current['timed'] += 1
                current['time'] += per_shape_time
            if current['last'] is None or session.date > current['last']:
                current['last'] = session.date

    results = []
    for shape in vocabulary:
        data = totals[shape]
        results.append(ShapePerformanceDTO(
            shape=shape,
            total_attempts=data['attempts'],
            accuracy_rate=data['accuracy'] / data['rated'] if data['rated'] else 0.0,
            avg_time=data['time'] / data['timed'] if data['timed'] else 0.0,
            avg_score=data['score'] / data['attempts'] if data['attempts'] else 0.0,
            last_practiced=data['last'],
        ))
    return results


def performance_summary(sessions: Sequence[DrillSessionRecord]) -> PerformanceSummaryDTO:
    """Headline numbers plus the strongest and weakest shape by accuracy."""
    if not sessions:
        return PerformanceSummaryDTO()

    practiced = [p for p in analyze_shape_performance(sessions) if p.total_attempts > 0]

    # max/min keep the first shape in vocabulary order on ties
    strongest = max(practiced, key=lambda p: p.accuracy_rate) if practiced else None
    weakest = min(practiced, key=lambda p: p.accuracy_rate) if practiced else None

    return PerformanceSummaryDTO(
        total_sessions=len(sessions),
        avg_score=round_half_up(sum(s.score for s in sessions) / len(sessions)),
        strongest_shape=strongest,
        weakest_shape=weakest,
    )
