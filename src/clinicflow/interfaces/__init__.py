"""Interfaces (application boundary) for CLINICFLOW.

Defines framework-free application contracts: repository ports, the unit of
work, ID generators and clocks. Business rules stay out of this package.

Dependency rule: this package may reference `clinicflow.domain` types but
must not import `clinicflow.service_layer`, `clinicflow.adapters` or
`clinicflow.entrypoints`.
"""
