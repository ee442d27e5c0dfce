from dataclasses import asdict

from flask import request

from fretlog_app.core.error_handlers import ValidationError, success_response
from fretlog_app.models import ALL_NOTES
from fretlog_app.modules.shared.utils.payload import parse_payload
from fretlog_app.schemas import NoteRecommendationPayload
from .. import blueprint
from ..config import NoteFinderDefaultConfig
from ..interface import NoteFinderInterface


def _int_arg(name: str, default: int, minimum: int, maximum: int) -> int:
    raw = request.args.get(name)
    if raw is None:
        return default
    message = f'"{name}" must be an integer between {minimum} and {maximum}'
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(message, errors={name: raw})
    if not minimum <= value <= maximum:
        raise ValidationError(message, errors={name: raw})
    return value


@blueprint.route('/recommendations', methods=['POST'])
def note_recommendations():
    """Weak/strong notes, suggested difficulty and a quiz built from them."""
    payload = parse_payload(NoteRecommendationPayload, limited=('attempts',))
    attempts = payload.to_records()
    num_questions = _int_arg('questions', NoteFinderDefaultConfig.QUIZ_LENGTH, 1, 100)

    performance = NoteFinderInterface.get_performance(attempts)
    recommendation = NoteFinderInterface.get_recommendations(attempts, seed=payload.seed)
    quiz = NoteFinderInterface.get_quiz(attempts, num_questions, seed=payload.seed,
                                       recommendation=recommendation)

    return success_response(data={
        'recommendation': asdict(recommendation),
        'performance': [p.to_dict() for p in performance],
        'quiz': [asdict(q) for q in quiz],
    })


@blueprint.route('/fretboard', methods=['GET'])
def fretboard_notes():
    max_fret = _int_arg('frets', NoteFinderDefaultConfig.FRET_COUNT, 0, 24)
    return success_response(data={
        'tuning': list(NoteFinderDefaultConfig.TUNING),
        'frets': max_fret,
        'strings': NoteFinderInterface.get_fretboard(max_fret),
    })


@blueprint.route('/positions/<note>', methods=['GET'])
def note_positions(note):
    """Every place a note sounds, strings numbered 1 (high E) to 6."""
    note = note.strip().upper()
    if note not in ALL_NOTES:
        raise ValidationError(f'Unknown note "{note}"', errors={'note': note})
    max_fret = _int_arg('frets', NoteFinderDefaultConfig.FRET_COUNT, 0, 24)
    return success_response(data={
        'note': note,
        'positions': NoteFinderInterface.get_positions(note, max_fret),
    })
