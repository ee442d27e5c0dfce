from flask import current_app

from fretlog_app.core.error_handlers import success_response
from . import blueprint


@blueprint.route('/health', methods=['GET'])
def health():
    """Liveness probe."""
    return success_response(data={
        'status': 'ok',
        'modules': sorted(current_app.blueprints.keys()),
    })
