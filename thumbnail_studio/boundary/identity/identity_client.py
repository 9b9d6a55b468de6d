"""
Identity service client.

Exchanges a caller's bearer token for a verified user identity by calling the
backend service's ``/auth/v1/user`` endpoint.

Dependencies: httpx, pydantic
System role: Bearer token verification adapter
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class VerifiedUser(BaseModel):
    """User identity returned by the identity service."""

    model_config = ConfigDict(extra="ignore")

    id: str
    email: str | None = None


class IdentityVerificationError(Exception):
    """Raised when a bearer token cannot be verified."""


class IdentityClient:
    """Async client for the identity service user endpoint."""

    USER_ENDPOINT = "/auth/v1/user"

    def __init__(
        self,
        base_url: str,
        public_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize identity client.

        Args:
            base_url: Backend service base URL
            public_key: Public API key sent as the apikey header
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self._public_key = public_key
        self._timeout = timeout
        self._transport = transport

    async def get_user(self, token: str) -> VerifiedUser:
        """
        Verify a bearer token and return the caller identity.

        Args:
            token: Caller-supplied bearer token

        Returns:
            VerifiedUser: Verified identity

        Raises:
            IdentityVerificationError: If the service rejects the token,
                is unreachable, or returns no user id
        """
        headers = {
            "apikey": self._public_key,
            "Authorization": f"Bearer {token}",
        }

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            ) as client:
                response = await client.get(self.USER_ENDPOINT, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"{__name__}:get_user - transport error {type(e).__name__}: {e}")
            raise IdentityVerificationError(str(e)) from e

        if response.status_code != 200:
            logger.info(f"{__name__}:get_user - rejected status={response.status_code}")
            raise IdentityVerificationError(
                f"Identity service returned {response.status_code}"
            )

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise IdentityVerificationError("Identity service returned invalid JSON") from e

        if not isinstance(payload, dict) or not payload.get("id"):
            raise IdentityVerificationError("Identity service returned no user id")

        return VerifiedUser.model_validate(payload)
