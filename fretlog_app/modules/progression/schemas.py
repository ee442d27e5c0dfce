from dataclasses import dataclass, field
from typing import List

from fretlog_app.models import PracticeRecord


@dataclass(frozen=True)
class ProgressionSummary:
    """Timeline of the sessions that touched one song or technique."""
    total_sessions: int = 0
    total_minutes: int = 0
    sessions: List[PracticeRecord] = field(default_factory=list)
    focus: str = ''

    @property
    def is_empty(self) -> bool:
        return self.total_sessions == 0

    def to_dict(self) -> dict:
        from .logics.aggregation import format_practice_time

        return {
            'focus': self.focus,
            'total_sessions': self.total_sessions,
            'total_minutes': self.total_minutes,
            'total_practice': format_practice_time(self.total_minutes),
            'sessions': [s.to_dict() for s in self.sessions],
        }


@dataclass(frozen=True)
class PracticeTotals:
    total_sessions: int = 0
    total_minutes: int = 0
