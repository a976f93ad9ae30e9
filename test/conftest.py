"""
Pytest configuration and fixtures for testing.
"""
import base64
import hashlib
import hmac

import pytest

from gip_auth import GIPAuth


TEST_APP_ID = "test_app_id"
TEST_APP_SECRET = "test_app_secret"
TEST_UID = "test_user_123"


def b64url(data: bytes) -> str:
    """Base64url-encode without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


@pytest.fixture
def app_id():
    return TEST_APP_ID


@pytest.fixture
def app_secret():
    return TEST_APP_SECRET


@pytest.fixture
def uid():
    return TEST_UID


@pytest.fixture
def auth(app_id, app_secret):
    """Create a GIPAuth instance for the test application."""
    return GIPAuth(app_id, app_secret)


@pytest.fixture
def forge_token():
    """
    Build a correctly signed token around an arbitrary raw payload.

    The signature is computed independently of the codec: base64url of the
    hex HMAC-SHA256 digest over ``header.payload``.
    """
    def _forge(payload: bytes, secret: str = TEST_APP_SECRET, payload_segment: str = None) -> str:
        header = b64url(b'{"alg":"HS256","typ":"JWT"}')
        if payload_segment is None:
            payload_segment = b64url(payload)
        signing_input = f"{header}.{payload_segment}"
        digest = hmac.new(secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256)
        return f"{signing_input}.{b64url(digest.hexdigest().encode('ascii'))}"

    return _forge
