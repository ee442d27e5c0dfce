from flask import Blueprint

blueprint = Blueprint('note_finder', __name__, url_prefix='/api/notes')

module_metadata = {
    'name': 'Note Finder',
    'icon': 'music',
    'category': 'Tools',
    'url_prefix': '/api/notes',
    'enabled': True
}


def setup_module(app):
    from .routes import api  # noqa: F401
