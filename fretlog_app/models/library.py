"""Repertoire, goals and note-finder attempts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional


# Chromatic vocabulary, starting from A as the fretboard tools do
ALL_NOTES = ("A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#")


class Difficulty(Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class GoalStatus(Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"


class GoalCategory(Enum):
    TECHNIQUE = "Technique"
    SONG = "Song"
    THEORY = "Theory"
    PERFORMANCE = "Performance"


@dataclass(frozen=True)
class RepertoireItem:
    title: str
    artist: str = ""
    difficulty: Difficulty = Difficulty.BEGINNER
    mastery: int = 0  # 0-100
    last_practiced: Optional[date] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class Goal:
    title: str
    status: GoalStatus = GoalStatus.ACTIVE
    progress: int = 0  # 0-100
    category: GoalCategory = GoalCategory.TECHNIQUE
    description: str = ""
    target_date: Optional[date] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class NoteFinderAttempt:
    note: str
    correct: bool
    time_seconds: float
    created_at: datetime
    string_num: Optional[int] = None
    fret_num: Optional[int] = None
