"""Wire schemas for JSON payloads.

The browser client historically sent camelCase keys (``timeSeconds``,
``sessionDate``); both spellings are accepted. Each payload converts into the
frozen dataclasses from ``fretlog_app.models``.
"""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator

from .models import (
    ALL_NOTES,
    Difficulty,
    DrillSessionRecord,
    Goal,
    GoalCategory,
    GoalStatus,
    Mood,
    NoteFinderAttempt,
    PracticeRecord,
    PracticeSessionRecord,
    RepertoireItem,
)


def _calendar_date(value: Any) -> Any:
    # "2024-03-01T18:30:00Z" -> "2024-03-01"
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, str) and len(value.strip()) > 10:
        return value.strip()[:10]
    return value


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DrillAttemptPayload(_Payload):
    shapes: List[str] = Field(default_factory=list)
    accuracy: int = Field(ge=1, le=5)
    time_seconds: int = Field(ge=0, validation_alias=AliasChoices("time_seconds", "timeSeconds"))


class PracticeSessionPayload(_Payload):
    kind: Literal["practice"] = "practice"
    id: Optional[str] = None
    date: dt.date = Field(validation_alias=AliasChoices("date", "session_date", "sessionDate"))
    duration_minutes: int = Field(
        default=0, ge=0, validation_alias=AliasChoices("duration_minutes", "durationMinutes", "duration")
    )
    songs: List[str] = Field(default_factory=list)
    techniques: List[str] = Field(default_factory=list)
    notes: str = ""
    mood: Optional[Mood] = None
    tags: List[str] = Field(default_factory=list)
    link: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return _calendar_date(value)

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, value):
        return value or ""

    def to_record(self) -> PracticeSessionRecord:
        return PracticeSessionRecord(
            id=self.id,
            date=self.date,
            duration_minutes=self.duration_minutes,
            songs=tuple(self.songs),
            techniques=tuple(self.techniques),
            notes=self.notes,
            mood=self.mood,
            tags=tuple(self.tags),
            link=self.link,
        )


class DrillSessionPayload(_Payload):
    kind: Literal["drill"] = "drill"
    id: Optional[str] = None
    date: dt.date = Field(validation_alias=AliasChoices("date", "session_date", "sessionDate"))
    shapes: List[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0, le=100)
    notes: str = ""
    accuracy: Optional[int] = Field(default=None, ge=1, le=5)
    time_seconds: Optional[int] = Field(
        default=None, ge=0, validation_alias=AliasChoices("time_seconds", "timeSeconds")
    )

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return _calendar_date(value)

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, value):
        return value or ""

    def to_record(self) -> DrillSessionRecord:
        return DrillSessionRecord(
            id=self.id,
            date=self.date,
            shapes=tuple(self.shapes),
            score=self.score,
            notes=self.notes,
            accuracy=self.accuracy,
            time_seconds=self.time_seconds,
        )


def _record_kind(value: Any) -> str:
    # Rows without a discriminant are plain practice sessions
    if isinstance(value, dict):
        return value.get("kind", "practice")
    return getattr(value, "kind", "practice")


RecordPayload = Annotated[
    Union[
        Annotated[PracticeSessionPayload, Tag("practice")],
        Annotated[DrillSessionPayload, Tag("drill")],
    ],
    Discriminator(_record_kind),
]


class RecordsPayload(_Payload):
    records: List[RecordPayload] = Field(default_factory=list)

    def to_records(self) -> list[PracticeRecord]:
        return [record.to_record() for record in self.records]


class ProgressionPayload(RecordsPayload):
    focus: str = ""

    @field_validator("focus", mode="before")
    @classmethod
    def default_focus(cls, value):
        return value or ""


class FocusOptionsPayload(RecordsPayload):
    repertoire_titles: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("repertoire_titles", "repertoireTitles")
    )


class DrillSessionsPayload(_Payload):
    sessions: List[DrillSessionPayload] = Field(default_factory=list)

    def to_records(self) -> list[DrillSessionRecord]:
        return [session.to_record() for session in self.sessions]


class RepertoireItemPayload(_Payload):
    id: Optional[str] = None
    title: str
    artist: str = ""
    difficulty: Difficulty = Difficulty.BEGINNER
    mastery: int = Field(default=0, ge=0, le=100)
    last_practiced: Optional[dt.date] = Field(
        default=None, validation_alias=AliasChoices("last_practiced", "lastPracticed")
    )

    @field_validator("last_practiced", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return _calendar_date(value)

    def to_record(self) -> RepertoireItem:
        return RepertoireItem(
            id=self.id,
            title=self.title,
            artist=self.artist,
            difficulty=self.difficulty,
            mastery=self.mastery,
            last_practiced=self.last_practiced,
        )


class GoalPayload(_Payload):
    id: Optional[str] = None
    title: str
    status: GoalStatus = GoalStatus.ACTIVE
    progress: int = Field(default=0, ge=0, le=100)
    category: GoalCategory = GoalCategory.TECHNIQUE
    description: str = ""
    target_date: Optional[dt.date] = Field(default=None, validation_alias=AliasChoices("target_date", "targetDate"))

    @field_validator("target_date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return _calendar_date(value)

    def to_record(self) -> Goal:
        return Goal(
            id=self.id,
            title=self.title,
            status=self.status,
            progress=self.progress,
            category=self.category,
            description=self.description,
            target_date=self.target_date,
        )


class FocusSuggestionPayload(RecordsPayload):
    goals: List[GoalPayload] = Field(default_factory=list)
    repertoire: List[RepertoireItemPayload] = Field(default_factory=list)
    today: Optional[dt.date] = None

    @field_validator("today", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return _calendar_date(value)


class NoteFinderAttemptPayload(_Payload):
    note: str = Field(validation_alias=AliasChoices("note", "note_name", "noteName"))
    correct: bool
    time_seconds: float = Field(ge=0, validation_alias=AliasChoices("time_seconds", "timeSeconds"))
    created_at: dt.datetime = Field(validation_alias=AliasChoices("created_at", "createdAt"))
    string_num: Optional[int] = Field(default=None, ge=1, le=6)
    fret_num: Optional[int] = Field(default=None, ge=0, le=24)

    @field_validator("note")
    @classmethod
    def known_note(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in ALL_NOTES:
            raise ValueError(f"unknown note {value!r}")
        return value

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: dt.datetime) -> dt.datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value

    def to_record(self) -> NoteFinderAttempt:
        return NoteFinderAttempt(
            note=self.note,
            correct=self.correct,
            time_seconds=self.time_seconds,
            created_at=self.created_at,
            string_num=self.string_num,
            fret_num=self.fret_num,
        )


class NoteRecommendationPayload(_Payload):
    attempts: List[NoteFinderAttemptPayload] = Field(default_factory=list)
    seed: Optional[int] = None

    def to_records(self) -> list[NoteFinderAttempt]:
        return [attempt.to_record() for attempt in self.attempts]
