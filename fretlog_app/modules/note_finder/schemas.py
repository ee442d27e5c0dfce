from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class NotePerformanceDTO:
    note: str
    accuracy: float = 0.0  # 0-1
    avg_time_ms: float = 0.0
    total_attempts: int = 0
    last_practiced: Optional[datetime] = None
    difficulty_score: float = 0.0  # 0-1, higher = harder for this player
    needs_practice: bool = True

    def to_dict(self) -> dict:
        return {
            'note': self.note,
            'accuracy': round(self.accuracy, 4),
            'avg_time_ms': round(self.avg_time_ms, 1),
            'total_attempts': self.total_attempts,
            'last_practiced': self.last_practiced.isoformat() if self.last_practiced else None,
            'difficulty_score': round(self.difficulty_score, 4),
            'needs_practice': self.needs_practice,
        }


@dataclass
class NoteRecommendationDTO:
    priority_notes: List[str] = field(default_factory=list)
    maintenance_notes: List[str] = field(default_factory=list)
    difficulty_level: str = 'beginner'
    max_frets: int = 5
    recommended_mode: str = 'find-any'
    reasoning: str = ''
    average_accuracy: float = 0.0
    total_attempts: int = 0


@dataclass(frozen=True)
class QuizQuestionDTO:
    note: str
    mode: str  # find-any | find-all | find-on-string
