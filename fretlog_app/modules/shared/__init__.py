# File: fretlog_app/modules/shared/__init__.py
# Shared blueprint: health check plus payload helpers used by every module.

from flask import Blueprint

blueprint = Blueprint('shared', __name__)

module_metadata = {
    'name': 'Shared',
    'category': 'System',
    'enabled': True
}


def setup_module(app):
    from . import routes  # noqa: F401
