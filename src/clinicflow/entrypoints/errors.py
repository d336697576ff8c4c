"""Boundary contract mapping domain failures and outcomes to status codes.

Any transport (HTTP, CLI, jobs) translates domain errors through this module.
Only the error's `kind` is consulted, never its message.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from clinicflow.domain.errors import DomainError, ErrorKind
from clinicflow.service_layer import commands


@dataclass(frozen=True)
class ErrorResponse:
    """Transport-neutral error payload."""

    status: int
    code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Return the body to send back to the client."""
        return {"error": self.code, "message": self.message}


ERROR_STATUS: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.VALIDATION: (HTTPStatus.BAD_REQUEST, "VALIDATION_ERROR"),
    ErrorKind.NOT_FOUND: (HTTPStatus.NOT_FOUND, "NOT_FOUND"),
    ErrorKind.CONFLICT: (HTTPStatus.CONFLICT, "CONFLICT"),
}

CLI_EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 3,
    ErrorKind.NOT_FOUND: 4,
    ErrorKind.CONFLICT: 5,
}

_CREATED = HTTPStatus.CREATED
_OK = HTTPStatus.OK
_NO_CONTENT = HTTPStatus.NO_CONTENT

SUCCESS_STATUS: dict[type[commands.Command], int] = {
    # clinics
    commands.CreateClinic: _CREATED,
    commands.GetClinic: _OK,
    commands.ListClinics: _OK,
    commands.UpdateClinic: _OK,
    commands.DeleteClinic: _NO_CONTENT,
    commands.ActivateClinic: _OK,
    commands.DeactivateClinic: _OK,
    # patients
    commands.CreatePatient: _CREATED,
    commands.GetPatient: _OK,
    commands.ListPatientsByClinic: _OK,
    commands.UpdatePatient: _OK,
    commands.DeletePatient: _NO_CONTENT,
    commands.ActivatePatient: _OK,
    commands.DeactivatePatient: _OK,
    # samples
    commands.CreateSample: _CREATED,
    commands.GetSample: _OK,
    commands.ListSamplesByPatient: _OK,
    commands.ListSamplesByClinic: _OK,
    commands.UpdateSampleNotes: _OK,
    commands.ChangeSampleType: _OK,
    commands.StartSampleProcessing: _OK,
    commands.CompleteSample: _OK,
    commands.RejectSample: _OK,
    commands.DeleteSample: _NO_CONTENT,
}


def to_error_response(exc: DomainError) -> ErrorResponse:
    """Translate a domain error into its boundary status, code and message."""
    status, code = ERROR_STATUS[exc.kind]
    return ErrorResponse(status=int(status), code=code, message=str(exc))


def success_status(cmd: commands.Command) -> int:
    """Return the status code reported when `cmd` succeeds."""
    return int(SUCCESS_STATUS[type(cmd)])


def exit_code_for(exc: DomainError) -> int:
    """Return the CLI exit code for a domain error."""
    return CLI_EXIT_CODES[exc.kind]
