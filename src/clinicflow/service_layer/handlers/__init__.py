"""Service layer handlers."""

from collections.abc import Callable

from .clinic_handlers import COMMAND_HANDLERS as CLINIC_COMMAND_HANDLERS
from .patient_handlers import COMMAND_HANDLERS as PATIENT_COMMAND_HANDLERS
from .sample_handlers import COMMAND_HANDLERS as SAMPLE_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **CLINIC_COMMAND_HANDLERS,
    **PATIENT_COMMAND_HANDLERS,
    **SAMPLE_COMMAND_HANDLERS,
}
