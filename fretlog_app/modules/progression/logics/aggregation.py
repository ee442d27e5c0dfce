"""
Practice timeline aggregation - pure logic.

Filters the journal down to the records relevant to a free-text focus
(a song title or technique name) and totals them. Nothing here keeps state
between calls; the host passes a fresh snapshot of records every time.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from fretlog_app.models import DrillSessionRecord, PracticeRecord, PracticeSessionRecord

from ..schemas import PracticeTotals, ProgressionSummary


def matches_focus(record: PracticeRecord, focus: str) -> bool:
    """
    Case-insensitive substring match against songs and techniques.

    ``focus`` must already be lower-cased. Drill sessions carry neither
    field and never match.
    """
    if isinstance(record, PracticeSessionRecord):
        return (any(focus in song.lower() for song in record.songs)
                or any(focus in technique.lower() for technique in record.techniques))
    if isinstance(record, DrillSessionRecord):
        return False
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def _record_minutes(record: PracticeRecord) -> int:
    if isinstance(record, PracticeSessionRecord):
        return record.duration_minutes
    return 0  # drills have no duration


def summarize(focus: str, records: Sequence[PracticeRecord]) -> ProgressionSummary:
    """
    Build the progression timeline for ``focus``.

    An empty focus means "nothing selected" and yields an empty summary
    rather than matching everything. Matches are ordered most recent first;
    records sharing a date keep their input order.
    """
    if not focus:
        return ProgressionSummary(focus=focus or '')

    needle = focus.lower()
    matched = [record for record in records if matches_focus(record, needle)]
    # sorted() is stable, including with reverse=True
    matched = sorted(matched, key=lambda record: record.date, reverse=True)

    return ProgressionSummary(
        total_sessions=len(matched),
        total_minutes=sum(_record_minutes(record) for record in matched),
        sessions=matched,
        focus=focus,
    )


def distinct_focus_options(
    repertoire_titles: Iterable[str],
    records: Iterable[PracticeRecord],
) -> List[str]:
    """Repertoire titles plus every non-empty technique, deduplicated and sorted."""
    options = set(repertoire_titles)
    for record in records:
        if isinstance(record, PracticeSessionRecord):
            options.update(t for t in record.techniques if t)
    return sorted(options)


def overall_totals(records: Iterable[PracticeRecord]) -> PracticeTotals:
    """Session count and minutes across all practice sessions (no focus)."""
    sessions = [r for r in records if isinstance(r, PracticeSessionRecord)]
    return PracticeTotals(
        total_sessions=len(sessions),
        total_minutes=sum(s.duration_minutes for s in sessions),
    )


def format_practice_time(total_minutes: int) -> str:
    """Timeline header format: 135 -> '2h 15m'."""
    hours, minutes = divmod(total_minutes, 60)
    return f'{hours}h {minutes}m'
