"""
API Blueprint - JSON endpoints
Handles: Portfolio create/update and lookup, certificate upload and download
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
