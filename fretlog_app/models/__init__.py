"""Domain records shared by the feature modules.

These are plain frozen dataclasses; the host application owns persistence
and hands snapshots of them to the pure logic layer.
"""

from .library import ALL_NOTES, Difficulty, Goal, GoalCategory, GoalStatus, NoteFinderAttempt, RepertoireItem
from .practice import DrillSessionRecord, Mood, PracticeRecord, PracticeSessionRecord

__all__ = [
    "ALL_NOTES",
    "Difficulty",
    "DrillSessionRecord",
    "Goal",
    "GoalCategory",
    "GoalStatus",
    "Mood",
    "NoteFinderAttempt",
    "PracticeRecord",
    "PracticeSessionRecord",
    "RepertoireItem",
]
