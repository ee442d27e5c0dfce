from flask import current_app

from fretlog_app.core.error_handlers import success_response
from fretlog_app.core.signals import progression_viewed
from fretlog_app.modules.shared.utils.payload import parse_payload
from fretlog_app.schemas import FocusOptionsPayload, ProgressionPayload
from .. import blueprint
from ..interface import get_focus_options, get_overall_totals, get_progression


@blueprint.route('/summary', methods=['POST'])
def progression_summary():
    """
    Timeline for the selected focus.

    With no focus the response carries an empty timeline plus the overall
    totals the page shows while nothing is selected.
    """
    payload = parse_payload(ProgressionPayload, limited=('records',))
    records = payload.to_records()

    summary = get_progression(payload.focus, records)
    data = summary.to_dict()

    if not payload.focus:
        totals = get_overall_totals(records)
        data['overall'] = {
            'total_sessions': totals.total_sessions,
            'total_minutes': totals.total_minutes,
        }
    else:
        progression_viewed.send(
            current_app._get_current_object(),
            focus=payload.focus,
            total_sessions=summary.total_sessions,
            total_minutes=summary.total_minutes,
        )
        current_app.logger.debug(
            "Progression for %r: %s sessions, %s min",
            payload.focus, summary.total_sessions, summary.total_minutes,
        )

    return success_response(data=data)


@blueprint.route('/focus-options', methods=['POST'])
def focus_options():
    payload = parse_payload(FocusOptionsPayload,
                            limited=('records', 'repertoire_titles', 'repertoireTitles'))
    options = get_focus_options(payload.repertoire_titles, payload.to_records())
    return success_response(data={'options': options})
