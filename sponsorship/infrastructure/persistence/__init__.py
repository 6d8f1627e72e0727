"""Persistence: SQLAlchemy engine/session, ORM table models, row mapper, repositories."""
