"""Identity service boundary adapter."""

from thumbnail_studio.boundary.identity.identity_client import (
    IdentityClient,
    IdentityVerificationError,
    VerifiedUser,
)

__all__ = ["IdentityClient", "IdentityVerificationError", "VerifiedUser"]
