"""
API Blueprint

Endpoints called from page scripts rather than forms.
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__)

from inkwell.api import routes  # noqa: E402, F401
