"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import json_errors, error_response
from .data import (
    PortfolioStore,
    MemoryPortfolioStore,
    DatabasePortfolioStore,
    init_store,
    get_store
)
from .uploads import CertificateUploadError, allowed_file, save_certificate
from .schemas import PayloadError, validate_portfolio
from .forms import empty_portfolio, parse_portfolio_form
from .pdf import PdfExportError, render_pdf

__all__ = [
    # Decorators
    'json_errors',
    'error_response',

    # Data
    'PortfolioStore',
    'MemoryPortfolioStore',
    'DatabasePortfolioStore',
    'init_store',
    'get_store',

    # Uploads
    'CertificateUploadError',
    'allowed_file',
    'save_certificate',

    # Schemas
    'PayloadError',
    'validate_portfolio',

    # Forms
    'empty_portfolio',
    'parse_portfolio_form',

    # PDF
    'PdfExportError',
    'render_pdf'
]
