"""
Middleware modules for authentication
"""

from app.middleware.auth import (
    verify_api_key,
    api_key_header,
)

__all__ = [
    "verify_api_key",
    "api_key_header",
]
