"""
Backend package for the markdown todo API.

This package provides a FastAPI application over a small todo repository
abstraction, with an in-memory backend for development/tests and a
SQLAlchemy-backed backend for Postgres.
"""
