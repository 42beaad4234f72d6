"""
Decorators Module - Shared error handling for API views
"""

from functools import wraps
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


def json_errors(f):
    """Decorator turning unexpected exceptions into a JSON 500 response"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except HTTPException:
            # Left to the app-level error handlers (413, 404, ...)
            raise
        except Exception as e:
            current_app.logger.exception(f"Error in {f.__name__}: {str(e)}")
            return jsonify({'success': False, 'error': str(e) or 'Internal server error'}), 500
    return decorated_function


def error_response(message, status):
    """JSON error body with the success flag clients check"""
    return jsonify({'success': False, 'error': message}), status
