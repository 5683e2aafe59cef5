"""Database Infrastructure — SQLAlchemy declarative Base for the key-value table."""
