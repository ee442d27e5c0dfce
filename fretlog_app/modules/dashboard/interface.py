from datetime import date, datetime, timezone
from typing import List, Optional, Sequence

from fretlog_app.models import Goal, PracticeRecord, RepertoireItem
from .logics.focus import suggest_focus
from .schemas import FocusSuggestionDTO


def get_focus_suggestions(
    goals: Sequence[Goal],
    repertoire: Sequence[RepertoireItem],
    records: Sequence[PracticeRecord],
    today: Optional[date] = None,
) -> List[FocusSuggestionDTO]:
    """Suggestions for today; ``today`` defaults to the current UTC date."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return suggest_focus(goals, repertoire, records, today)
