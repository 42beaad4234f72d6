"""
Portfolio Routes - Form and public portfolio views
Handles: Portfolio form, existence check, shareable view, PDF export, uploads
"""

import io
from flask import (render_template, redirect, url_for, request, flash, send_file,
                   send_from_directory, current_app)
from utils.data import get_store
from utils.forms import empty_portfolio, parse_portfolio_form
from utils.pdf import render_pdf, PdfExportError
from utils.uploads import save_certificate, CertificateUploadError
from . import portfolio_bp


def share_url(portfolio_id):
    """Absolute link to the read-only view of a portfolio"""
    return url_for('portfolio.view_portfolio', portfolio_id=portfolio_id, _external=True)


def render_form(portfolio, portfolio_id=None, status=200):
    return render_template(
        'form.html',
        data=portfolio,
        portfolio_id=portfolio_id,
        share_url=share_url(portfolio_id) if portfolio_id else None,
        max_size=current_app.config['MAX_CERTIFICATE_SIZE'],
        allowed_types=sorted(current_app.config['ALLOWED_MIMETYPES']),
        upload_timeout=current_app.config['UPLOAD_TIMEOUT_MS']
    ), status


@portfolio_bp.route('/', methods=['GET'])
def edit_portfolio():
    """Portfolio form, pre-filled when an id is given"""
    portfolio_id = request.args.get('id')
    if not portfolio_id:
        return render_form(empty_portfolio())

    portfolio = get_store().get(portfolio_id)
    if portfolio is None:
        flash('Portfolio not found. Please save your portfolio again.', 'error')
        return render_form(empty_portfolio())

    data = empty_portfolio()
    data.update(portfolio)
    return render_form(data, portfolio_id)


@portfolio_bp.route('/', methods=['POST'])
def save_portfolio():
    """Save the submitted form, uploading an attached certificate first"""
    portfolio_id = request.form.get('id', '').strip() or None
    portfolio = parse_portfolio_form(request.form)

    certificate = request.files.get('certificate')
    if certificate and certificate.filename:
        try:
            portfolio['certificates'].append(save_certificate(certificate))
        except CertificateUploadError as e:
            flash(str(e), 'error')
            return render_form(portfolio, portfolio_id, status=400)

    try:
        portfolio_id = get_store().put(portfolio_id, portfolio)
    except Exception as e:
        current_app.logger.error(f"Error saving portfolio: {str(e)}")
        flash('Error saving portfolio. Please try again.', 'error')
        return render_form(portfolio, portfolio_id, status=500)

    flash('Portfolio saved successfully!', 'success')
    if request.form.get('action') == 'view':
        return redirect(url_for('portfolio.view_portfolio', portfolio_id=portfolio_id))
    return redirect(url_for('portfolio.edit_portfolio', id=portfolio_id))


@portfolio_bp.route('/open')
def open_portfolio():
    """Check that a portfolio exists before navigating to its view"""
    portfolio_id = request.args.get('id', '').strip()
    if not portfolio_id:
        flash('Please save your portfolio first!', 'error')
        return redirect(url_for('portfolio.edit_portfolio'))

    if portfolio_id not in get_store():
        flash('Portfolio not found. Please save your portfolio again.', 'error')
        return redirect(url_for('portfolio.edit_portfolio'))

    return redirect(url_for('portfolio.view_portfolio', portfolio_id=portfolio_id))


@portfolio_bp.route('/portfolio/<portfolio_id>')
def view_portfolio(portfolio_id):
    """Public read-only view of a portfolio"""
    portfolio = get_store().get(portfolio_id)
    if portfolio is None:
        return render_template('404.html', message='Portfolio not found'), 404

    return render_template('view.html',
                           data=portfolio,
                           portfolio_id=portfolio_id,
                           share_url=share_url(portfolio_id),
                           refresh_seconds=current_app.config['VIEW_REFRESH_SECONDS'])


@portfolio_bp.route('/portfolio/<portfolio_id>/pdf')
def download_pdf(portfolio_id):
    """Export the rendered view as a paginated PDF"""
    portfolio = get_store().get(portfolio_id)
    if portfolio is None:
        return render_template('404.html', message='Portfolio not found'), 404

    html_content = render_template('view.html', data=portfolio, portfolio_id=portfolio_id,
                                   pdf_mode=True)
    try:
        pdf_bytes = render_pdf(html_content, base_url=request.url_root)
    except PdfExportError as e:
        flash(str(e), 'error')
        return redirect(url_for('portfolio.view_portfolio', portfolio_id=portfolio_id))

    full_name = (portfolio.get('personalInfo') or {}).get('fullName') or 'Portfolio'
    filename = full_name.replace(' ', '_')
    return send_file(io.BytesIO(pdf_bytes),
                     mimetype='application/pdf',
                     as_attachment=True,
                     download_name=f'{filename}_Portfolio.pdf')


@portfolio_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Serve stored certificate images inline"""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
