"""Fretboard note arithmetic for standard tuning."""

from __future__ import annotations

from typing import List, Tuple

from fretlog_app.models import ALL_NOTES

from ..config import NoteFinderDefaultConfig

TUNING = NoteFinderDefaultConfig.TUNING


def note_at(string_index: int, fret: int) -> str:
    """
    Note sounding on a string at a fret.

    Args:
        string_index: 0 = high E ... 5 = low E
        fret: 0 = open string
    """
    open_note = TUNING[string_index]
    return ALL_NOTES[(ALL_NOTES.index(open_note) + fret) % len(ALL_NOTES)]


def positions_for(note: str, max_fret: int = NoteFinderDefaultConfig.FRET_COUNT) -> List[Tuple[int, int]]:
    """Every (string_index, fret) up to ``max_fret`` where ``note`` is found."""
    if note not in ALL_NOTES:
        return []
    return [
        (string_index, fret)
        for string_index in range(len(TUNING))
        for fret in range(max_fret + 1)
        if note_at(string_index, fret) == note
    ]


def fretboard_grid(max_fret: int = NoteFinderDefaultConfig.FRET_COUNT) -> List[List[str]]:
    """Rows of note names, one row per string, high E first."""
    return [[note_at(s, f) for f in range(max_fret + 1)] for s in range(len(TUNING))]
