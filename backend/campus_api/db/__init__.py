"""Database Infrastructure — SQLAlchemy declarative Base for the housing tables."""
