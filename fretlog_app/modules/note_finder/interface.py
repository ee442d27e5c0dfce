# modules/note_finder/interface.py
import random
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from fretlog_app.models import NoteFinderAttempt
from .logics import fretboard, recommendations
from .schemas import NotePerformanceDTO, NoteRecommendationDTO, QuizQuestionDTO


class NoteFinderInterface:
    """
    Entry point of the note finder module.
    ``seed`` makes the random parts (mode choice, quiz order) repeatable.
    """

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def get_performance(attempts: Sequence[NoteFinderAttempt],
                        now: Optional[datetime] = None) -> List[NotePerformanceDTO]:
        return recommendations.analyze_note_performance(attempts, now or NoteFinderInterface._now())

    @staticmethod
    def get_recommendations(attempts: Sequence[NoteFinderAttempt], seed: Optional[int] = None,
                            now: Optional[datetime] = None) -> NoteRecommendationDTO:
        return recommendations.generate_recommendations(
            attempts, now or NoteFinderInterface._now(), random.Random(seed)
        )

    @staticmethod
    def get_quiz(attempts: Sequence[NoteFinderAttempt], num_questions: int, seed: Optional[int] = None,
                 now: Optional[datetime] = None,
                 recommendation: Optional[NoteRecommendationDTO] = None) -> List[QuizQuestionDTO]:
        """Quiz for ``attempts``; reuses ``recommendation`` so its mode and notes match."""
        return recommendations.generate_quiz_sequence(
            attempts, now or NoteFinderInterface._now(), num_questions, random.Random(seed),
            recommendation=recommendation,
        )

    @staticmethod
    def get_fretboard(max_fret: int) -> List[List[str]]:
        return fretboard.fretboard_grid(max_fret)

    @staticmethod
    def get_positions(note: str, max_fret: int) -> List[dict]:
        return [{'string': string_index + 1, 'fret': fret}
                for string_index, fret in fretboard.positions_for(note, max_fret)]
