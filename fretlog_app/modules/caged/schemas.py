from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class DrillAttempt:
    """One timed run through the CAGED shapes."""
    shapes: List[str] = field(default_factory=list)
    accuracy: int = 1  # 1 = many mistakes, 5 = none
    time_seconds: int = 0


@dataclass(frozen=True)
class DrillScore:
    value: int
    shape_coverage: float = 0.0
    accuracy_score: float = 0.0
    speed_score: float = 0.0
    raw: float = 0.0

    def breakdown(self) -> dict:
        return {
            'shape_coverage': round(self.shape_coverage, 4),
            'accuracy_score': round(self.accuracy_score, 4),
            'speed_score': round(self.speed_score, 4),
            'raw': round(self.raw, 4),
        }


@dataclass
class DrillStatsDTO:
    """Averages and personal bests over a list of drill sessions."""
    avg_score: int
    avg_time: int
    best_score: int
    best_time: int


@dataclass
class ShapePerformanceDTO:
    shape: str
    total_attempts: int = 0
    accuracy_rate: float = 0.0  # 0-1
    avg_time: float = 0.0
    avg_score: float = 0.0
    last_practiced: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            'shape': self.shape,
            'total_attempts': self.total_attempts,
            'accuracy_rate': round(self.accuracy_rate, 4),
            'avg_time': round(self.avg_time, 2),
            'avg_score': round(self.avg_score, 2),
            'last_practiced': self.last_practiced.isoformat() if self.last_practiced else None,
        }


@dataclass
class PerformanceSummaryDTO:
    total_sessions: int = 0
    avg_score: int = 0
    strongest_shape: Optional[ShapePerformanceDTO] = None
    weakest_shape: Optional[ShapePerformanceDTO] = None

    def to_dict(self) -> dict:
        return {
            'total_sessions': self.total_sessions,
            'avg_score': self.avg_score,
            'strongest_shape': self.strongest_shape.to_dict() if self.strongest_shape else None,
            'weakest_shape': self.weakest_shape.to_dict() if self.weakest_shape else None,
        }
