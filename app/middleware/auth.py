"""
API Key Auth Middleware

Management routes (dashboard, agents, projects, drafts, analytics) accept
an X-API-Key header. When no API_KEY is configured the routes are open,
which is the local development default. Inbound automation webhooks are
never key-protected.
"""
import hmac
from typing import Optional
from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader
from app.config import settings

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def keys_match(provided: str, expected: str) -> bool:
    return hmac.compare_digest(provided.encode(), expected.encode())


async def verify_api_key(api_key: Optional[str] = Security(api_key_header)) -> dict:
    """
    Verify the API key and return caller context.

    Returns dict with: role, authenticated
    """
    expected = settings.API_KEY
    if not expected:
        return {"role": "anonymous", "authenticated": False}

    if not api_key:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "API key required")
    if not keys_match(api_key, expected):
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Invalid API key")

    return {"role": "client", "authenticated": True}
