"""Service layer for CLINICFLOW.

Implements application use-cases: command handlers, orchestration, and
transaction boundaries. Calls domain objects and the ports defined in
`clinicflow.interfaces`, and returns read-only views.

Dependency rule: may import `clinicflow.domain` and `clinicflow.interfaces`,
but not `clinicflow.adapters` or `clinicflow.entrypoints`.
"""
