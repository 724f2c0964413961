"""OAuth2 authentication backend for Django REST Framework.

Bearer tokens are validated in one of two modes:
1. Token introspection against the auth service (results cached briefly)
2. Local JWT validation with the shared secret
"""

import hashlib
from typing import Any, cast
from uuid import UUID

from django.conf import settings
from django.core.cache import cache

import jwt
import requests
import structlog
from rest_framework import authentication, exceptions

logger = structlog.get_logger(__name__)

JWT_ALGORITHMS = ["HS256", "HS384", "HS512"]


def _parse_scopes(token_data: dict[str, Any]) -> list[str]:
    """Accept both a ``scopes`` list and an RFC 7662 ``scope`` string."""
    scopes = token_data.get("scopes")
    if scopes is None:
        scopes = str(token_data.get("scope") or "").split()
    return list(scopes)


class OAuth2Principal:
    """Caller identity built from validated token claims.

    Not a Django user; only carries what the admin API needs.
    """

    is_authenticated = True

    def __init__(self, user_id: str, client_id: str, scopes: list[str]):
        self.user_id = user_id
        self.client_id = client_id
        self.scopes = scopes

    def has_scope(self, scope: str) -> bool:
        return scope in self.scopes

    @property
    def is_admin(self) -> bool:
        """Whether the caller may use the admin dashboard API."""
        return self.has_scope(settings.OAUTH2_ADMIN_SCOPE)

    @property
    def uuid(self) -> UUID | None:
        """The subject as a profile id, or None for client credentials."""
        try:
            return UUID(str(self.user_id))
        except ValueError:
            return None

    def __str__(self):
        return f"OAuth2Principal(user_id={self.user_id}, client_id={self.client_id})"


class OAuth2Authentication(authentication.BaseAuthentication):
    """Authenticate requests carrying ``Authorization: Bearer <token>``."""

    def authenticate(self, request):
        """Return ``(principal, token)``, or None when no token was sent.

        Raises:
            AuthenticationFailed: If a token was sent but is invalid.
        """
        if not settings.OAUTH2_SERVICE_ENABLED:
            return None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")
        token = parts[1]

        if settings.OAUTH2_INTROSPECTION_ENABLED:
            token_data = self._validate_via_introspection(token)
        else:
            token_data = self._validate_via_jwt(token)

        principal = OAuth2Principal(
            user_id=token_data.get("sub") or token_data.get("client_id") or "unknown",
            client_id=token_data.get("client_id") or "unknown",
            scopes=_parse_scopes(token_data),
        )
        return (principal, token)

    def _validate_via_introspection(self, token: str) -> dict[str, Any]:
        """Validate a token with the auth service's introspection endpoint.

        Raises:
            AuthenticationFailed: If the token is inactive or the endpoint
                cannot be reached.
        """
        digest = hashlib.sha256(token.encode()).hexdigest()
        cache_key = f"{settings.OAUTH2_TOKEN_CACHE_PREFIX}{digest}"
        cached_data = cache.get(cache_key)
        if cached_data:
            return cast("dict[str, Any]", cached_data)

        try:
            response = requests.post(
                settings.OAUTH2_INTROSPECT_URL,
                data={"token": token, "token_type_hint": "access_token"},
                auth=(settings.OAUTH2_CLIENT_ID, settings.OAUTH2_CLIENT_SECRET),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=5,
            )
        except requests.RequestException as e:
            logger.error("token_introspection_request_failed", error=str(e))
            raise exceptions.AuthenticationFailed(
                "Token validation service unavailable"
            ) from e

        if response.status_code != 200:
            logger.warning("token_introspection_failed", status_code=response.status_code)
            raise exceptions.AuthenticationFailed("Token introspection failed")

        data = response.json()
        if not data.get("active", False):
            logger.info("token_inactive")
            raise exceptions.AuthenticationFailed("Token is not active")

        cache.set(cache_key, data, timeout=settings.OAUTH2_TOKEN_CACHE_TTL)
        return cast("dict[str, Any]", data)

    def _validate_via_jwt(self, token: str) -> dict[str, Any]:
        """Validate a JWT access token with the shared secret.

        Raises:
            AuthenticationFailed: If the signature, expiry or token type is
                invalid.
        """
        if not settings.JWT_SECRET:
            logger.error("jwt_secret_not_configured")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=JWT_ALGORITHMS,
                options={"verify_signature": True, "verify_exp": True},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("jwt_expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("jwt_invalid", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        token_type = payload.get("type")
        if token_type != "access_token":
            logger.warning("jwt_wrong_type", token_type=token_type)
            raise exceptions.AuthenticationFailed(f"Invalid token type: {token_type}")

        return {
            "active": True,
            "sub": payload.get("sub"),
            "client_id": payload.get("client_id"),
            "scopes": _parse_scopes(payload),
        }

    def authenticate_header(self, _request):
        """Return WWW-Authenticate header value for 401 responses."""
        return "Bearer"
