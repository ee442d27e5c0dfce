from typing import Iterable, List, Sequence

from fretlog_app.models import PracticeRecord
from .logics.aggregation import distinct_focus_options, overall_totals, summarize
from .schemas import PracticeTotals, ProgressionSummary


def get_progression(focus: str, records: Sequence[PracticeRecord]) -> ProgressionSummary:
    """Timeline for one song or technique."""
    return summarize(focus, records)


def get_focus_options(repertoire_titles: Iterable[str], records: Iterable[PracticeRecord]) -> List[str]:
    return distinct_focus_options(repertoire_titles, records)


def get_overall_totals(records: Iterable[PracticeRecord]) -> PracticeTotals:
    return overall_totals(records)
