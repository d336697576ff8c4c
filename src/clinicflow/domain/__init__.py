"""Domain layer for CLINICFLOW.

Contains business rules: aggregates, value objects and the error taxonomy.
This package is deliberately technology-agnostic.

Dependency rule: do not import from `clinicflow.adapters` or `clinicflow.entrypoints`.
"""
