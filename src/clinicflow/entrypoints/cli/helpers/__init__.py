"""CLI helpers for CLINICFLOW.

Utilities used by the command-line interface: URL sanitization for safe display,
OSC-8 terminal hyperlinks when supported, message emitters that write to
stderr with emoji→ASCII fallbacks, and the bridge from commands to the
message bus.
"""

from .db_url import sanitize_url
from .dispatch import dispatch
from .hyperlinks import hyperlink
from .messages import error, success, warn

__all__ = ["dispatch", "error", "hyperlink", "sanitize_url", "success", "warn"]
