from flask import Blueprint

blueprint = Blueprint('progression', __name__, url_prefix='/api/progression')

module_metadata = {
    'name': 'Progression Timeline',
    'icon': 'chart-line',
    'category': 'Journal',
    'url_prefix': '/api/progression',
    'enabled': True
}


def setup_module(app):
    from .routes import api  # noqa: F401
