"""
API Routes - JSON endpoints used by the form and view clients
Handles: Portfolio create/update, lookup, listing, certificate upload/download
"""

from flask import request, jsonify, send_from_directory, current_app
from werkzeug.exceptions import NotFound
from utils.data import get_store
from utils.decorators import json_errors, error_response
from utils.schemas import validate_portfolio, PayloadError
from utils.uploads import save_certificate, CertificateUploadError
from . import api_bp


@api_bp.route('/portfolio', methods=['POST'])
@json_errors
def save_portfolio():
    """Create a portfolio, or replace the one named by the body's id"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return error_response('Request body must be a JSON object', 400)

    payload = dict(payload)
    portfolio_id = payload.pop('id', None) or None
    if portfolio_id is not None and not isinstance(portfolio_id, str):
        return error_response('Portfolio id must be a string', 400)

    try:
        data = validate_portfolio(payload)
    except PayloadError as e:
        return error_response(str(e), 400)

    store = get_store()
    current_app.logger.info(f"Saving portfolio with ID: {portfolio_id or '(new)'}; keys: {sorted(data)}")
    portfolio_id = store.put(portfolio_id, data)

    return jsonify({'success': True, 'id': portfolio_id, 'portfolio': store.get(portfolio_id)})


@api_bp.route('/portfolio/<portfolio_id>', methods=['GET'])
@json_errors
def get_portfolio(portfolio_id):
    """Fetch a single portfolio"""
    portfolio = get_store().get(portfolio_id)
    if portfolio is None:
        current_app.logger.info(f"Portfolio not found for ID: {portfolio_id}")
        return error_response('Portfolio not found', 404)
    return jsonify({'success': True, 'portfolio': portfolio})


@api_bp.route('/upload-certificate', methods=['POST'])
@json_errors
def upload_certificate():
    """Store one certificate image sent in the 'certificate' field"""
    try:
        reference = save_certificate(request.files.get('certificate'))
    except CertificateUploadError as e:
        current_app.logger.warning(f"Upload rejected: {str(e)}")
        return error_response(str(e), 400)
    return jsonify({'success': True, 'url': reference['url'], 'filename': reference['filename']})


@api_bp.route('/certificate/<path:filename>', methods=['GET'])
@json_errors
def download_certificate(filename):
    """Send a stored certificate as an attachment"""
    try:
        return send_from_directory(
            current_app.config['UPLOAD_FOLDER'],
            filename,
            as_attachment=True,
            download_name=request.args.get('name') or filename
        )
    except NotFound:
        return error_response('Certificate not found', 404)


@api_bp.route('/portfolios', methods=['GET'])
@json_errors
def list_portfolios():
    """Dump every stored portfolio (administrative)"""
    return jsonify({'success': True, 'portfolios': get_store().list()})
