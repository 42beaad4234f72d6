"""
Uploads Module - Validation and storage of certificate images
"""

import os
import uuid
from flask import current_app
from werkzeug.utils import secure_filename


class CertificateUploadError(ValueError):
    """Raised when an uploaded certificate is rejected"""


def allowed_file(filename):
    """Check if file extension is allowed"""
    allowed_extensions = current_app.config.get('ALLOWED_EXTENSIONS', {'png', 'jpg', 'jpeg', 'gif', 'webp'})
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed_extensions


def allowed_mimetype(mimetype):
    """Check the declared content type against the image allow-list"""
    allowed = current_app.config.get('ALLOWED_MIMETYPES', set())
    return (mimetype or '').lower() in allowed


def get_file_size(file):
    """Size in bytes of an uploaded file, leaving the stream at the start"""
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def unique_filename(filename):
    """Build a collision-free storage name that keeps the original name readable"""
    safe_name = secure_filename(filename)
    if '.' not in safe_name:
        extension = filename.rsplit('.', 1)[1].lower()
        safe_name = f"certificate.{extension}"
    return f"{uuid.uuid4()}-{safe_name}"


def validate_certificate(file, max_size=None):
    """Raise CertificateUploadError unless the file is an acceptable image"""
    if file is None or not file.filename:
        raise CertificateUploadError('No file uploaded')

    if not (allowed_mimetype(file.mimetype) and allowed_file(file.filename)):
        raise CertificateUploadError('Only image files are allowed!')

    max_size = max_size or current_app.config['MAX_CERTIFICATE_SIZE']
    if get_file_size(file) > max_size:
        raise CertificateUploadError(
            f'File too large. Maximum size is {max_size // (1024 * 1024)}MB.')


def save_certificate(file, upload_folder=None):
    """
    Validate and store a certificate image

    Args:
        file (FileStorage): Uploaded file from request.files
        upload_folder (str, optional): Target directory, defaults to UPLOAD_FOLDER

    Returns:
        dict: Reference with display name, fetchable url and stored filename
    """
    validate_certificate(file)

    upload_folder = upload_folder or current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)

    filename = unique_filename(file.filename)
    file.save(os.path.join(upload_folder, filename))
    current_app.logger.info(f"Certificate uploaded successfully: {filename}")

    return {
        'name': file.filename,
        'url': f"/uploads/{filename}",
        'filename': filename
    }


__all__ = [
    'CertificateUploadError',
    'allowed_file',
    'allowed_mimetype',
    'get_file_size',
    'unique_filename',
    'validate_certificate',
    'save_certificate'
]
