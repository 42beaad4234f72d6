"""
Pytest fixtures for the portfolio builder.
"""
import io
import pytest

from app import create_app


@pytest.fixture
def upload_dir(tmp_path):
    """Temporary directory receiving uploaded certificates."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def app(upload_dir):
    """Application using the in-memory store."""
    return create_app('testing', {'UPLOAD_FOLDER': str(upload_dir)})


@pytest.fixture
def db_app(upload_dir):
    """Application using the SQLAlchemy-backed store on in-memory SQLite."""
    return create_app('testing', {
        'UPLOAD_FOLDER': str(upload_dir),
        'PORTFOLIO_STORE': 'database',
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    """Store attached to the app, used inside an app context."""
    with app.app_context():
        yield app.extensions['portfolio_store']


@pytest.fixture
def sample_portfolio():
    """A fully populated portfolio payload."""
    return {
        "personalInfo": {
            "fullName": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0000",
            "address": "London",
            "linkedin": "https://linkedin.com/in/ada",
            "github": "https://github.com/ada",
            "website": "https://ada.dev"
        },
        "summary": "Analyst of engines.",
        "experience": [
            {"title": "Analyst", "company": "Analytical Engine Co", "startDate": "1842",
             "endDate": "1843", "description": "Wrote the first program."}
        ],
        "education": [{"degree": "Mathematics", "institution": "Private tutoring", "year": "1835"}],
        "skills": ["Mathematics", "Programming"],
        "certificates": [],
        "projects": [{"name": "Note G", "link": "https://example.com/note-g", "description": "Bernoulli numbers."}]
    }


def make_image(name="certificate.png", content_type="image/png", size=128):
    """In-memory file suitable for the 'certificate' multipart field."""
    return (io.BytesIO(b"\x89PNG\r\n\x1a\n" + b"0" * size), name, content_type)


@pytest.fixture
def image_file():
    """Factory building certificate uploads."""
    return make_image
