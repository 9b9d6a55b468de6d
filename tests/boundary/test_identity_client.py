"""
Test suite for IdentityClient.

Uses httpx.MockTransport to stand in for the identity service.

System role: Verification of bearer token verification adapter
"""

import httpx
import pytest

from thumbnail_studio.boundary.identity.identity_client import (
    IdentityClient,
    IdentityVerificationError,
)


def _client(handler) -> IdentityClient:
    return IdentityClient(
        base_url="https://identity.example.test/",
        public_key="public-key",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_returns_verified_user():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["apikey"] = request.headers.get("apikey")
        seen["authorization"] = request.headers.get("authorization")
        return httpx.Response(200, json={"id": "user-1", "email": "a@example.test", "role": "authenticated"})

    user = await _client(handler).get_user("token-123")

    assert user.id == "user-1"
    assert user.email == "a@example.test"
    assert seen == {
        "url": "https://identity.example.test/auth/v1/user",
        "apikey": "public-key",
        "authorization": "Bearer token-123",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 403, 500])
async def test_rejected_status(status_code):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"msg": "invalid JWT"})

    with pytest.raises(IdentityVerificationError):
        await _client(handler).get_user("bad")


@pytest.mark.asyncio
async def test_missing_user_id():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"email": "a@example.test"})

    with pytest.raises(IdentityVerificationError):
        await _client(handler).get_user("token")


@pytest.mark.asyncio
async def test_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>", headers={"content-type": "text/html"})

    with pytest.raises(IdentityVerificationError):
        await _client(handler).get_user("token")


@pytest.mark.asyncio
async def test_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(IdentityVerificationError):
        await _client(handler).get_user("token")
