"""Entrypoints (inbound adapters) for CLINICFLOW.

Expose the application to the outside world: CLI commands today, HTTP routes
later. Parse and validate inputs, call the service layer through the message
bus, and present results.

Dependency rule: may import `clinicflow.bootstrap` and `clinicflow.service_layer`;
avoid importing `clinicflow.adapters` directly.
"""
