"""
"Today's focus" suggestions for the dashboard.
Pure functions, no database dependencies.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Sequence

from fretlog_app.models import Goal, GoalStatus, PracticeRecord, PracticeSessionRecord, RepertoireItem

from ..config import DashboardDefaultConfig
from ..schemas import FocusSuggestionDTO


def goal_suggestion(goals: Sequence[Goal]) -> Optional[FocusSuggestionDTO]:
    """First active goal, in the order the host listed them."""
    for goal in goals:
        if goal.status == GoalStatus.ACTIVE:
            return FocusSuggestionDTO(
                type='goal',
                title=goal.title,
                description=f"You're at {goal.progress}% on this goal. Let's keep the momentum going!",
                topic=goal.title,
            )
    return None


def stale_repertoire_suggestion(
    repertoire: Sequence[RepertoireItem],
    today: date,
    stale_after_days: int = DashboardDefaultConfig.STALE_AFTER_DAYS,
) -> Optional[FocusSuggestionDTO]:
    """The least recently practiced song not touched within ``stale_after_days``."""
    cutoff = today - timedelta(days=stale_after_days)
    # Never practiced sorts first
    stale = [item for item in repertoire
             if item.last_practiced is None or item.last_practiced < cutoff]
    if not stale:
        return None

    item = min(stale, key=lambda i: i.last_practiced or date.min)
    title = f'{item.title} by {item.artist}' if item.artist else item.title
    return FocusSuggestionDTO(
        type='repertoire',
        title=title,
        description="Feeling rusty? You haven't practiced this in over a week.",
        topic=item.title,
    )


def recent_technique_suggestion(records: Sequence[PracticeRecord]) -> Optional[FocusSuggestionDTO]:
    """First technique of the most recent practice session, if it has any."""
    sessions = [r for r in records if isinstance(r, PracticeSessionRecord)]
    if not sessions:
        return None

    latest = max(sessions, key=lambda s: s.date)
    if not latest.techniques:
        return None

    technique = latest.techniques[0]
    return FocusSuggestionDTO(
        type='technique',
        title=f'Technique: {technique}',
        description="You worked on this in your last session. Let's build on that progress.",
        topic=technique,
    )


def suggest_focus(
    goals: Sequence[Goal],
    repertoire: Sequence[RepertoireItem],
    records: Sequence[PracticeRecord],
    today: date,
    limit: int = DashboardDefaultConfig.MAX_SUGGESTIONS,
) -> List[FocusSuggestionDTO]:
    """Goal, stale song, recent technique - whichever apply, at most ``limit``."""
    candidates = (
        goal_suggestion(goals),
        stale_repertoire_suggestion(repertoire, today),
        recent_technique_suggestion(records),
    )
    return [c for c in candidates if c is not None][:limit]
