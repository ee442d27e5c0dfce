from flask import Blueprint

blueprint = Blueprint('caged', __name__, url_prefix='/api/caged')

module_metadata = {
    'name': 'CAGED Drills',
    'icon': 'guitar',
    'category': 'Tools',
    'url_prefix': '/api/caged',
    'enabled': True
}


def setup_module(app):
    from .routes import api  # noqa: F401
    from .events import init_events
    init_events(app)
