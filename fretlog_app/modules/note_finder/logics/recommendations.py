"""
Note finder performance analysis and practice recommendations.

Pure functions over logged attempts. The current time and the random
source are parameters, so results are reproducible in tests.
"""

from __future__ import annotations

import math
import random
from datetime import datetime
from typing import List, Optional, Sequence

from fretlog_app.models import ALL_NOTES, NoteFinderAttempt
from fretlog_app.modules.shared.utils.numbers import round_half_up

from ..config import NoteFinderDefaultConfig as Cfg
from ..schemas import NotePerformanceDTO, NoteRecommendationDTO, QuizQuestionDTO

MODES = ('find-any', 'find-all', 'find-on-string')


def difficulty_score(accuracy: float, avg_time_ms: float, total: int, days_since_practice: float) -> float:
    """
    How hard a note currently is for the player, 0-1.

    Low accuracy, slow answers, few attempts and not having practiced
    recently each push the score up.
    """
    score = (1 - accuracy) * Cfg.WEIGHT_ACCURACY

    slow = 0.0
    if avg_time_ms > Cfg.SLOW_RESPONSE_MS:
        slow = (avg_time_ms - Cfg.SLOW_RESPONSE_MS) / Cfg.SLOW_RESPONSE_SPAN_MS
    score += min(slow, Cfg.SLOW_RESPONSE_CAP) * Cfg.WEIGHT_SPEED

    if total < Cfg.MIN_ATTEMPTS_FOR_CONFIDENCE:
        score += (Cfg.MIN_ATTEMPTS_FOR_CONFIDENCE - total) / Cfg.MIN_ATTEMPTS_FOR_CONFIDENCE * Cfg.WEIGHT_EXPOSURE

    score += min(days_since_practice / Cfg.STALENESS_DAYS, 1) * Cfg.WEIGHT_STALENESS

    return min(score, 1.0)


def analyze_note_performance(attempts: Sequence[NoteFinderAttempt], now: datetime) -> List[NotePerformanceDTO]:
    """Per-note metrics for all twelve notes; unknown note names are ignored."""
    totals = {note: {'correct': 0, 'total': 0, 'time_ms': 0.0, 'last': None} for note in ALL_NOTES}

    for attempt in attempts:
        data = totals.get(attempt.note)
        if data is None:
            continue
        data['total'] += 1
        if attempt.correct:
            data['correct'] += 1
        data['time_ms'] += attempt.time_seconds * 1000
        if data['last'] is None or attempt.created_at > data['last']:
            data['last'] = attempt.created_at

    results = []
    for note in ALL_NOTES:
        data = totals[note]
        accuracy = data['correct'] / data['total'] if data['total'] else 0.0
        avg_time_ms = data['time_ms'] / data['total'] if data['total'] else 0.0
        if data['last'] is not None:
            days = (now - data['last']).total_seconds() / 86400
        else:
            days = Cfg.NEVER_PRACTICED_DAYS

        difficulty = difficulty_score(accuracy, avg_time_ms, data['total'], days)
        results.append(NotePerformanceDTO(
            note=note,
            accuracy=accuracy,
            avg_time_ms=avg_time_ms,
            total_attempts=data['total'],
            last_practiced=data['last'],
            difficulty_score=difficulty,
            needs_practice=(difficulty > Cfg.NEEDS_PRACTICE_THRESHOLD
                            or data['total'] < Cfg.MIN_ATTEMPTS_FOR_EXPOSURE),
        ))
    return results


def _skill_level(total_attempts: int, average_accuracy: float) -> str:
    min_attempts, min_accuracy = Cfg.BEGINNER_EXIT
    if total_attempts < min_attempts or average_accuracy < min_accuracy:
        return 'beginner'
    min_attempts, min_accuracy = Cfg.INTERMEDIATE_EXIT
    if total_attempts < min_attempts or average_accuracy < min_accuracy:
        return 'intermediate'
    return 'advanced'


def _recommended_mode(level: str, rng: random.Random) -> str:
    if level == 'beginner':
        return 'find-any'
    if level == 'intermediate':
        return 'find-any' if rng.random() > 0.5 else 'find-on-string'
    return rng.choice(MODES)


def generate_recommendations(
    attempts: Sequence[NoteFinderAttempt],
    now: datetime,
    rng: Optional[random.Random] = None,
) -> NoteRecommendationDTO:
    """Which notes to drill, which to maintain, and at what difficulty."""
    rng = rng or random.Random()
    performance = analyze_note_performance(attempts, now)

    # Stable sort: equally hard notes stay in chromatic order
    hardest_first = sorted(performance, key=lambda p: p.difficulty_score, reverse=True)
    priority = [p.note for p in hardest_first if p.needs_practice][:Cfg.MAX_PRIORITY_NOTES]

    strong = [p for p in performance
              if p.accuracy > Cfg.MAINTENANCE_ACCURACY
              and p.total_attempts >= Cfg.MIN_ATTEMPTS_FOR_CONFIDENCE
              and not p.needs_practice]
    maintenance = [p.note for p in sorted(strong, key=lambda p: p.accuracy, reverse=True)]
    maintenance = maintenance[:Cfg.MAX_MAINTENANCE_NOTES]

    practiced = [p for p in performance if p.total_attempts > 0]
    average_accuracy = sum(p.accuracy for p in practiced) / max(1, len(practiced))
    total_attempts = sum(p.total_attempts for p in performance)

    level = _skill_level(total_attempts, average_accuracy)

    reasoning = 'Based on your practice history: '
    if priority:
        reasoning += f"Focus on {', '.join(priority[:3])} (these need more practice). "
    if maintenance:
        reasoning += f"Review {', '.join(maintenance[:2])} to maintain your progress. "
    reasoning += f'Difficulty: {level} ({round_half_up(average_accuracy * 100)}% avg accuracy).'

    return NoteRecommendationDTO(
        priority_notes=priority,
        maintenance_notes=maintenance,
        difficulty_level=level,
        max_frets=Cfg.FRETS_BY_LEVEL[level],
        recommended_mode=_recommended_mode(level, rng),
        reasoning=reasoning,
        average_accuracy=average_accuracy,
        total_attempts=total_attempts,
    )


def generate_quiz_sequence(
    attempts: Sequence[NoteFinderAttempt],
    now: datetime,
    num_questions: int = Cfg.QUIZ_LENGTH,
    rng: Optional[random.Random] = None,
    recommendation: Optional[NoteRecommendationDTO] = None,
) -> List[QuizQuestionDTO]:
    """
    A shuffled quiz weighted towards weak notes.

    Roughly 70% priority notes, 20% maintenance notes and the rest random
    variety. Empty pools fall back to random notes. Pass ``recommendation``
    to build the quiz from one already shown to the player.
    """
    rng = rng or random.Random()
    rec = recommendation or generate_recommendations(attempts, now, rng)

    priority_count = min(num_questions, math.ceil(num_questions * Cfg.QUIZ_PRIORITY_SHARE))
    maintenance_count = min(num_questions - priority_count,
                            math.ceil(num_questions * Cfg.QUIZ_MAINTENANCE_SHARE))
    variety_count = num_questions - priority_count - maintenance_count

    def pick(pool: List[str], index: int) -> str:
        return pool[index % len(pool)] if pool else rng.choice(ALL_NOTES)

    priority_mode = 'find-any' if rec.difficulty_level == 'beginner' else rec.recommended_mode

    sequence = [QuizQuestionDTO(pick(rec.priority_notes, i), priority_mode) for i in range(priority_count)]
    sequence += [QuizQuestionDTO(pick(rec.maintenance_notes, i), 'find-any') for i in range(maintenance_count)]
    sequence += [QuizQuestionDTO(rng.choice(ALL_NOTES), rec.recommended_mode) for _ in range(variety_count)]

    rng.shuffle(sequence)
    return sequence
