from extensions import db
from datetime import datetime
from sqlalchemy import JSON


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class PortfolioRecord(db.Model):
    __tablename__ = 'portfolios'
    id = db.Column(db.String(64), primary_key=True)
    # Full record document, including its own id and updatedAt keys
    data = db.Column(SafeJSON, nullable=False, default={})
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<PortfolioRecord {self.id}>'
