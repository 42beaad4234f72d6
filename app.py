"""
Portfolio Builder - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its configuration,
portfolio store, error handlers and middleware. All route handling is
delegated to blueprints.
"""

import os
from flask import Flask, render_template, request, redirect, url_for, flash, jsonify
from config import get_config
from utils.data import init_store

from blueprints.api import api_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None, test_config=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        test_config (dict): Settings applied over the selected configuration (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(str(app.config.get('LOG_LEVEL') or 'INFO').upper())
    app.json.ensure_ascii = False

    # Upload directory must exist before anything is served from it
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
    app.logger.info(f"Uploads directory: {app.config['UPLOAD_FOLDER']}")

    # Portfolio store (memory or database)
    init_store(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio Builder is running'}, 200

    return app


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)
    app.register_blueprint(portfolio_bp)


def wants_json():
    return request.path.startswith('/api/')


# Endpoints whose request body carries a certificate image
UPLOAD_ENDPOINTS = {'api.upload_certificate', 'portfolio.save_portfolio'}


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        if wants_json():
            return jsonify({'success': False, 'error': e.description or 'Bad request'}), 400
        return render_template('error.html', code=400, message=e.description), 400

    @app.errorhandler(404)
    def page_not_found(e):
        if wants_json():
            return jsonify({'success': False, 'error': 'Not found'}), 404
        return render_template('404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        if wants_json():
            return jsonify({'success': False, 'error': 'Method not allowed'}), 405
        return render_template('error.html', code=405, message='Method not allowed'), 405

    @app.errorhandler(413)
    def file_too_large(e):
        if request.endpoint in UPLOAD_ENDPOINTS:
            limit_mb = app.config['MAX_CERTIFICATE_SIZE'] // (1024 * 1024)
            message = f'File too large. Maximum size is {limit_mb}MB.'
        else:
            message = 'Request body too large.'
        app.logger.warning(f"Request body too large on {request.path}")
        if wants_json():
            return jsonify({'success': False, 'error': message}), 400
        flash(message, 'error')
        return redirect(request.referrer or url_for('portfolio.edit_portfolio'))

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if wants_json():
            return jsonify({'success': False, 'error': 'Internal server error'}), 500
        return render_template('error.html', code=500, message='Internal server error'), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_headers(response):
        """Add security headers to all responses and CORS headers to the API"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        if request.path.startswith('/api/'):
            response.headers['Access-Control-Allow-Origin'] = app.config['CORS_ORIGINS']
            response.headers['Access-Control-Allow-Methods'] = 'GET, POST, OPTIONS'
            response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
