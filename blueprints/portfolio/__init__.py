"""
Portfolio Blueprint - Form and public portfolio views
Handles: Portfolio editing form, shareable view, PDF export, uploaded files
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
