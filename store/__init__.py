"""Relational persistence for harvested records (SQLAlchemy, async)."""
