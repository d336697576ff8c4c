"""Packaged Alembic migration environment for CLINICFLOW."""
