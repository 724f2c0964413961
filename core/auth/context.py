"""Security context for the authenticated administrator.

Held in a ``ContextVar`` so dispatch worker threads started with
``copy_context()`` see the same principal as the request thread.
"""

from contextvars import ContextVar

from rest_framework.exceptions import AuthenticationFailed

from core.auth.oauth2 import OAuth2Principal

_current_principal: ContextVar[OAuth2Principal | None] = ContextVar(
    "current_principal", default=None
)


def set_current_principal(principal: OAuth2Principal) -> None:
    _current_principal.set(principal)


def get_current_principal() -> OAuth2Principal | None:
    return _current_principal.get()


def require_current_principal() -> OAuth2Principal:
    """Return the authenticated principal.

    Raises:
        AuthenticationFailed: If no principal is set for this request.
    """
    principal = get_current_principal()
    if principal is None:
        raise AuthenticationFailed("Authentication required")
    return principal


def clear_current_principal() -> None:
    _current_principal.set(None)
