from flask import Blueprint

blueprint = Blueprint('dashboard', __name__, url_prefix='/api/dashboard')

module_metadata = {
    'name': 'Dashboard',
    'icon': 'house',
    'category': 'Journal',
    'url_prefix': '/api/dashboard',
    'enabled': True
}


def setup_module(app):
    from .routes import api  # noqa: F401
