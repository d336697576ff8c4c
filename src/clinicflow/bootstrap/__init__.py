"""Bootstrap (composition root) for CLINICFLOW.

Assembles the application at runtime: wires concrete adapters to service-layer
handlers, composes shared services (message bus, unit of work, id generator,
clock) and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `clinicflow.adapters`, `clinicflow.service_layer`,
  `clinicflow.interfaces`, `clinicflow.domain`, and `clinicflow.config`.
- Inner layers must not import `clinicflow.bootstrap`.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_message_bus,
    build_write_uow,
    inject_dependencies,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_message_bus",
    "build_write_uow",
    "inject_dependencies",
]
