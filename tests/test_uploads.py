"""
Tests for certificate upload validation and storage.
"""
import io
import pytest
from werkzeug.datastructures import FileStorage

from utils.uploads import (CertificateUploadError, allowed_file, allowed_mimetype,
                           save_certificate, unique_filename, validate_certificate)


def storage(name="cert.png", content_type="image/png", data=b"image-bytes"):
    return FileStorage(stream=io.BytesIO(data), filename=name, content_type=content_type)


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.mark.parametrize("filename,expected", [
    ("cert.png", True),
    ("CERT.JPG", True),
    ("photo.jpeg", True),
    ("anim.gif", True),
    ("modern.webp", True),
    ("doc.pdf", False),
    ("noextension", False),
])
def test_allowed_file(ctx, filename, expected):
    """Test the extension allow-list."""
    assert allowed_file(filename) is expected


@pytest.mark.parametrize("mimetype,expected", [
    ("image/png", True),
    ("image/jpeg", True),
    ("image/jpg", True),
    ("image/gif", True),
    ("image/webp", True),
    ("application/pdf", False),
    ("text/html", False),
    (None, False),
])
def test_allowed_mimetype(ctx, mimetype, expected):
    """Test the content type allow-list."""
    assert allowed_mimetype(mimetype) is expected


def test_missing_file_rejected(ctx):
    """Test an absent or nameless file is refused."""
    with pytest.raises(CertificateUploadError, match="No file uploaded"):
        validate_certificate(None)
    with pytest.raises(CertificateUploadError, match="No file uploaded"):
        validate_certificate(storage(name=""))


def test_disallowed_type_rejected_and_not_stored(ctx, upload_dir):
    """Test a disallowed content type never reaches the upload folder."""
    with pytest.raises(CertificateUploadError, match="Only image files are allowed!"):
        save_certificate(storage(name="evil.png", content_type="text/html"))
    assert list(upload_dir.iterdir()) == []


def test_image_type_with_wrong_extension_rejected(ctx, upload_dir):
    """Test both the content type and the extension must be images."""
    with pytest.raises(CertificateUploadError):
        save_certificate(storage(name="script.sh", content_type="image/png"))
    assert list(upload_dir.iterdir()) == []


def test_oversized_file_rejected(ctx, app, upload_dir):
    """Test files over the size limit are refused before saving."""
    app.config['MAX_CERTIFICATE_SIZE'] = 1024 * 1024
    big = storage(data=b"0" * (1024 * 1024 + 1))
    with pytest.raises(CertificateUploadError, match="File too large. Maximum size is 1MB."):
        save_certificate(big)
    assert list(upload_dir.iterdir()) == []


def test_file_at_limit_accepted(ctx, app):
    """Test a file exactly at the limit is accepted."""
    app.config['MAX_CERTIFICATE_SIZE'] = 1024
    validate_certificate(storage(data=b"0" * 1024))


def test_save_certificate_returns_reference(ctx, upload_dir):
    """Test a valid image is stored under a unique name."""
    reference = save_certificate(storage(name="My Cert.png", data=b"png-data"))

    assert reference["name"] == "My Cert.png"
    assert reference["filename"].endswith("-My_Cert.png")
    assert reference["url"] == f"/uploads/{reference['filename']}"
    assert (upload_dir / reference["filename"]).read_bytes() == b"png-data"


def test_same_name_uploads_do_not_collide(ctx, upload_dir):
    """Test two uploads with one original name are both kept."""
    first = save_certificate(storage(data=b"one"))
    second = save_certificate(storage(data=b"two"))
    assert first["filename"] != second["filename"]
    assert len(list(upload_dir.iterdir())) == 2


def test_unique_filename_keeps_extension_for_unsafe_names(ctx):
    """Test names reduced to nothing by secure_filename still get an extension."""
    filename = unique_filename("证书.png")
    assert filename.endswith(".png")
