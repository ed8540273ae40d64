"""Database metadata — SQLAlchemy declarative base shared by ORM models."""
