# tests/jwt_helpers.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import jwt

TEST_SECRET = "test-secret-key-12345"


def make_token(
    owner_id: str | None,
    secret: str = TEST_SECRET,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Mint a token the way the external identity service would."""
    now = datetime.now(timezone.utc)
    payload = {"iat": now, "exp": now + expires_in}
    if owner_id is not None:
        payload["sub"] = owner_id
    return jwt.encode(payload, secret, algorithm="HS256")
