"""DRF permission classes for the admin API."""

import structlog
from rest_framework.permissions import BasePermission

from core.auth.context import set_current_principal
from core.auth.oauth2 import OAuth2Principal

logger = structlog.get_logger(__name__)


class IsDashboardAdmin(BasePermission):
    """Allow callers holding the admin dashboard scope.

    On success the principal is published to the security context for the
    rest of the request.
    """

    message = "Requires the admin dashboard scope"

    def has_permission(self, request, view) -> bool:
        principal = request.user
        if not isinstance(principal, OAuth2Principal):
            return False
        if not principal.is_admin:
            logger.warning(
                "admin_scope_missing",
                user_id=principal.user_id,
                scopes=principal.scopes,
                path=request.path,
            )
            return False
        set_current_principal(principal)
        return True
