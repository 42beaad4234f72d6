"""
PDF Module - Renders the portfolio view HTML into a paginated PDF
WeasyPrint is tried first, wkhtmltopdf through pdfkit is the fallback.
"""

import io
import shutil
from flask import current_app


class PdfExportError(RuntimeError):
    """Raised when no PDF backend could render the document"""


def render_with_weasyprint(html_content, base_url):
    import weasyprint
    pdf_buffer = io.BytesIO()
    weasyprint.HTML(string=html_content, base_url=base_url).write_pdf(pdf_buffer)
    return pdf_buffer.getvalue()


def render_with_pdfkit(html_content):
    import pdfkit
    wkhtml_path = shutil.which('wkhtmltopdf')
    config = pdfkit.configuration(wkhtmltopdf=wkhtml_path) if wkhtml_path else None
    pdf_bytes = pdfkit.from_string(html_content, False, configuration=config,
                                   options={'page-size': 'A4'})
    if not isinstance(pdf_bytes, bytes):
        raise PdfExportError('pdfkit failed to generate PDF bytes')
    return pdf_bytes


def render_pdf(html_content, base_url=None):
    """
    Render HTML to PDF bytes with graceful fallbacks

    Raises:
        PdfExportError: With a message suitable for showing to the user
    """
    try:
        return render_with_weasyprint(html_content, base_url)
    except ImportError as ie:
        current_app.logger.warning('WeasyPrint not installed: %s', str(ie))
    except OSError as ose:
        # Missing GTK/Pango runtime libraries surface as OSError from ctypes
        current_app.logger.error('WeasyPrint runtime error: %s', str(ose))
    except Exception as e:
        current_app.logger.error('WeasyPrint unexpected error: %s', str(e))

    try:
        return render_with_pdfkit(html_content)
    except ImportError:
        current_app.logger.warning('pdfkit not installed; no fallback available')
        raise PdfExportError(
            'PDF generation library not available. Install WeasyPrint, '
            'or wkhtmltopdf and pdfkit as an alternative.')
    except OSError as ose:
        current_app.logger.error('wkhtmltopdf not found or failed: %s', str(ose))
        raise PdfExportError(
            'wkhtmltopdf not found. Install wkhtmltopdf and ensure it is on the PATH, '
            'or install WeasyPrint.')
    except PdfExportError:
        raise
    except Exception as e:
        current_app.logger.error('PDF fallback error: %s', str(e))
        raise PdfExportError(f'Error generating PDF: {str(e)}')


__all__ = ['PdfExportError', 'render_pdf']
