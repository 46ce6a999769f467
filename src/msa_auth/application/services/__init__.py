"""Application services."""

from msa_auth.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AuthenticationService"]
