from flask import current_app

from fretlog_app.core.error_handlers import success_response
from fretlog_app.core.signals import drill_scored
from fretlog_app.modules.shared.utils.payload import parse_payload
from fretlog_app.schemas import DrillAttemptPayload, DrillSessionsPayload
from .. import blueprint
from ..interface import CagedInterface
from ..schemas import DrillAttempt


@blueprint.route('/score', methods=['POST'])
def score_attempt():
    """Score a finished drill attempt."""
    payload = parse_payload(DrillAttemptPayload)
    attempt = DrillAttempt(
        shapes=payload.shapes,
        accuracy=payload.accuracy,
        time_seconds=payload.time_seconds,
    )
    score = CagedInterface.get_engine().compute(attempt)

    drill_scored.send(current_app._get_current_object(), attempt=attempt, score=score)

    return success_response(data=CagedInterface.describe_score(attempt, score))


@blueprint.route('/labels', methods=['GET'])
def accuracy_labels():
    labels = CagedInterface.get_accuracy_labels()
    return success_response(data={str(k): v for k, v in labels.items()})


@blueprint.route('/analytics', methods=['POST'])
def drill_analytics():
    """Stats, per-shape performance and summary for logged drill sessions."""
    payload = parse_payload(DrillSessionsPayload, limited=('sessions',))
    return success_response(data=CagedInterface.analyze_sessions(payload.to_records()))
