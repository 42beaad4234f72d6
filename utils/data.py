"""
Data Management Module - Handles storing and loading portfolio records
Records are kept behind a small store interface so the API layer does not
care whether they live in process memory or in the database.
"""

import copy
import uuid
from datetime import datetime, timezone
from flask import current_app
from extensions import db
from models import PortfolioRecord


def utc_timestamp():
    """Current UTC time as an ISO-8601 string with millisecond precision"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def build_record(portfolio_id, data):
    """Stamp a payload with its id and update time"""
    record = copy.deepcopy(dict(data))
    record['id'] = portfolio_id
    record['updatedAt'] = utc_timestamp()
    return record


class PortfolioStore:
    """
    Identifier-keyed portfolio storage.

    put() replaces the whole record at an id, there is no field merge.
    No schema is enforced here; any JSON-like mapping is stored as-is.
    """

    def put(self, portfolio_id, data):
        raise NotImplementedError

    def get(self, portfolio_id):
        raise NotImplementedError

    def list(self):
        raise NotImplementedError

    def __contains__(self, portfolio_id):
        return self.get(portfolio_id) is not None

    def new_id(self):
        """Generate an id that is not used by any stored record"""
        portfolio_id = str(uuid.uuid4())
        while portfolio_id in self:
            portfolio_id = str(uuid.uuid4())
        return portfolio_id


class MemoryPortfolioStore(PortfolioStore):
    """Process-lifetime store; everything is lost on restart"""

    def __init__(self):
        self._portfolios = {}

    def put(self, portfolio_id, data):
        portfolio_id = portfolio_id or self.new_id()
        self._portfolios[portfolio_id] = build_record(portfolio_id, data)
        current_app.logger.info(
            f"Portfolio saved: {portfolio_id}. Total portfolios: {len(self._portfolios)}")
        return portfolio_id

    def get(self, portfolio_id):
        record = self._portfolios.get(portfolio_id)
        return copy.deepcopy(record) if record is not None else None

    def list(self):
        return copy.deepcopy(self._portfolios)

    def __len__(self):
        return len(self._portfolios)


class DatabasePortfolioStore(PortfolioStore):
    """Store backed by the portfolios table through Flask-SQLAlchemy"""

    def put(self, portfolio_id, data):
        portfolio_id = portfolio_id or self.new_id()
        record = build_record(portfolio_id, data)
        try:
            row = db.session.get(PortfolioRecord, portfolio_id)
            if row is None:
                row = PortfolioRecord(id=portfolio_id)
                db.session.add(row)
            row.data = record
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info(f"Portfolio saved to database: {portfolio_id}")
        return portfolio_id

    def get(self, portfolio_id):
        row = db.session.get(PortfolioRecord, portfolio_id)
        return copy.deepcopy(row.data) if row is not None else None

    def list(self):
        return {row.id: copy.deepcopy(row.data) for row in PortfolioRecord.query.all()}


STORE_BACKENDS = {
    'memory': MemoryPortfolioStore,
    'database': DatabasePortfolioStore,
}


def init_store(app):
    """Create the configured store and attach it to the app"""
    backend = app.config.get('PORTFOLIO_STORE', 'memory')
    if backend not in STORE_BACKENDS:
        raise ValueError(f"Unknown PORTFOLIO_STORE backend: {backend}")

    if backend == 'database':
        db.init_app(app)
        with app.app_context():
            db.create_all()
        app.logger.info("✓ Database portfolio store initialized")
    else:
        app.logger.info("✓ In-memory portfolio store initialized")

    store = STORE_BACKENDS[backend]()
    app.extensions['portfolio_store'] = store
    return store


def get_store():
    """Store attached to the current app"""
    return current_app.extensions['portfolio_store']


__all__ = [
    'utc_timestamp',
    'build_record',
    'PortfolioStore',
    'MemoryPortfolioStore',
    'DatabasePortfolioStore',
    'init_store',
    'get_store',
]
