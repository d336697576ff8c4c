"""Adapters (infrastructure) for CLINICFLOW.

Provide concrete implementations of the ports in `clinicflow.interfaces`
(in-memory and SQL repositories, units of work, id generators, clocks), plus
persistence mapping and related wiring (engines, metadata, migrations).

Dependency rule: may import `clinicflow.domain` and `clinicflow.interfaces`;
neither may import this package.
"""
