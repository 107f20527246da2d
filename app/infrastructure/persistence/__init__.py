"""Persistence: SQLAlchemy async engine, models, repositories and migrations."""
