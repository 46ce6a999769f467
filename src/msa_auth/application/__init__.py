"""Application layer: commands, outcomes and the authentication service."""

from msa_auth.application.commands import LoginCommand, RegisterCommand
from msa_auth.application.outcomes import (
    AuthFailure,
    AuthOutcome,
    AuthSuccess,
    ErrorKind,
)
from msa_auth.application.services import AuthenticationService

__all__ = [
    "AuthFailure",
    "AuthOutcome",
    "AuthSuccess",
    "AuthenticationService",
    "ErrorKind",
    "LoginCommand",
    "RegisterCommand",
]
