from fretlog_app.core.error_handlers import success_response
from fretlog_app.modules.progression.interface import get_overall_totals
from fretlog_app.modules.shared.utils.payload import parse_payload
from fretlog_app.schemas import FocusSuggestionPayload
from .. import blueprint
from ..interface import get_focus_suggestions


@blueprint.route('/focus', methods=['POST'])
def todays_focus():
    """Focus cards plus overall practice totals."""
    payload = parse_payload(FocusSuggestionPayload, limited=('records', 'goals', 'repertoire'))

    records = payload.to_records()
    suggestions = get_focus_suggestions(
        goals=[g.to_record() for g in payload.goals],
        repertoire=[r.to_record() for r in payload.repertoire],
        records=records,
        today=payload.today,
    )
    totals = get_overall_totals(records)

    return success_response(data={
        'suggestions': [s.to_dict() for s in suggestions],
        'totals': {
            'total_sessions': totals.total_sessions,
            'total_minutes': totals.total_minutes,
        },
    })
