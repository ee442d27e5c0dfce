"""
Practice records supplied by the host application.

A practice record is either a free practice session or a timed drill
session (CAGED). The two variants share ``date`` and ``notes`` and are told
apart by the ``kind`` discriminant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Literal, Optional, Union


class Mood(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    OKAY = "Okay"
    CHALLENGING = "Challenging"
    FRUSTRATED = "Frustrated"


@dataclass(frozen=True)
class PracticeSessionRecord:
    date: date
    duration_minutes: int
    songs: tuple[str, ...] = ()
    techniques: tuple[str, ...] = ()
    notes: str = ""
    id: Optional[str] = None
    mood: Optional[Mood] = None
    tags: tuple[str, ...] = ()
    link: Optional[str] = None
    kind: Literal["practice"] = field(default="practice", init=False)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "id": self.id,
            "date": self.date.isoformat(),
            "duration_minutes": self.duration_minutes,
            "songs": list(self.songs),
            "techniques": list(self.techniques),
            "notes": self.notes,
            "mood": self.mood.value if self.mood else None,
            "tags": list(self.tags),
            "link": self.link,
        }


@dataclass(frozen=True)
class DrillSessionRecord:
    """A scored CAGED drill. ``accuracy``/``time_seconds`` may be absent on old rows."""

    date: date
    shapes: tuple[str, ...] = ()
    score: int = 0
    notes: str = ""
    id: Optional[str] = None
    accuracy: Optional[int] = None
    time_seconds: Optional[int] = None
    kind: Literal["drill"] = field(default="drill", init=False)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "id": self.id,
            "date": self.date.isoformat(),
            "shapes": list(self.shapes),
            "score": self.score,
            "notes": self.notes,
            "accuracy": self.accuracy,
            "time_seconds": self.time_seconds,
        }


PracticeRecord = Union[PracticeSessionRecord, DrillSessionRecord]
