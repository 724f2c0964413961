"""Tests for OAuth2 authentication and the admin permission."""

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock, patch
from uuid import uuid4

from django.core.cache import cache
from django.test import RequestFactory, SimpleTestCase, override_settings

import jwt
import requests
from rest_framework.exceptions import AuthenticationFailed

from core.auth.context import (
    clear_current_principal,
    get_current_principal,
    require_current_principal,
)
from core.auth.oauth2 import OAuth2Authentication, OAuth2Principal
from core.auth.permissions import IsDashboardAdmin

SECRET = "test-secret-key-with-at-least-32-bytes!"


def _token(**claims):
    payload = {
        "sub": str(uuid4()),
        "client_id": "dashboard",
        "scopes": ["admin:dashboard"],
        "type": "access_token",
        "exp": datetime.now(UTC) + timedelta(minutes=5),
    }
    payload.update(claims)
    return jwt.encode(payload, SECRET, algorithm="HS256")


@override_settings(
    OAUTH2_SERVICE_ENABLED=True,
    OAUTH2_INTROSPECTION_ENABLED=False,
    JWT_SECRET=SECRET,
)
class TestJwtAuthentication(SimpleTestCase):
    """Test cases for local JWT validation."""

    def setUp(self):
        self.factory = RequestFactory()
        self.auth = OAuth2Authentication()

    def _authenticate(self, header):
        return self.auth.authenticate(
            self.factory.get("/", HTTP_AUTHORIZATION=header)
        )

    def test_valid_token(self):
        user_id = uuid4()

        principal, token = self._authenticate(f"Bearer {_token(sub=str(user_id))}")

        self.assertEqual(principal.uuid, user_id)
        self.assertEqual(principal.client_id, "dashboard")
        self.assertTrue(principal.is_admin)
        self.assertTrue(token)

    def test_space_separated_scope_claim(self):
        principal, _ = self._authenticate(
            f"Bearer {_token(scopes=None, scope='openid admin:dashboard')}"
        )

        self.assertEqual(principal.scopes, ["openid", "admin:dashboard"])

    def test_no_header_is_anonymous(self):
        self.assertIsNone(self.auth.authenticate(self.factory.get("/")))

    def test_malformed_header(self):
        with self.assertRaises(AuthenticationFailed):
            self._authenticate("Token abc")

    def test_expired_token(self):
        expired = _token(exp=datetime.now(UTC) - timedelta(minutes=1))
        with self.assertRaisesMessage(AuthenticationFailed, "Token has expired"):
            self._authenticate(f"Bearer {expired}")

    def test_bad_signature(self):
        forged = jwt.encode(
            {"sub": "x", "type": "access_token"},
            "another-secret-key-with-at-least-32-bytes",
            algorithm="HS256",
        )
        with self.assertRaisesMessage(AuthenticationFailed, "Invalid token"):
            self._authenticate(f"Bearer {forged}")

    def test_refresh_token_is_rejected(self):
        with self.assertRaises(AuthenticationFailed):
            self._authenticate(f"Bearer {_token(type='refresh_token')}")

    @override_settings(JWT_SECRET="")
    def test_missing_secret(self):
        with self.assertRaisesMessage(AuthenticationFailed, "JWT validation not configured"):
            self._authenticate(f"Bearer {_token()}")

    @override_settings(OAUTH2_SERVICE_ENABLED=False)
    def test_disabled(self):
        self.assertIsNone(self._authenticate(f"Bearer {_token()}"))


@override_settings(
    OAUTH2_SERVICE_ENABLED=True,
    OAUTH2_INTROSPECTION_ENABLED=True,
    OAUTH2_INTROSPECT_URL="https://auth.example.com/introspect",
)
class TestIntrospectionAuthentication(SimpleTestCase):
    """Test cases for token introspection."""

    def setUp(self):
        self.factory = RequestFactory()
        self.auth = OAuth2Authentication()
        cache.clear()

    def _authenticate(self):
        return self.auth.authenticate(
            self.factory.get("/", HTTP_AUTHORIZATION="Bearer opaque-token")
        )

    @patch("core.auth.oauth2.requests.post")
    def test_active_token_is_cached(self, mock_post):
        mock_post.return_value = MagicMock(
            status_code=200,
            json=MagicMock(
                return_value={
                    "active": True,
                    "sub": "svc",
                    "client_id": "cron",
                    "scope": "admin:dashboard",
                }
            ),
        )

        principal, _ = self._authenticate()
        self._authenticate()

        mock_post.assert_called_once()
        self.assertTrue(principal.is_admin)
        self.assertIsNone(principal.uuid)

    @patch("core.auth.oauth2.requests.post")
    def test_inactive_token(self, mock_post):
        mock_post.return_value = MagicMock(
            status_code=200, json=MagicMock(return_value={"active": False})
        )

        with self.assertRaisesMessage(AuthenticationFailed, "Token is not active"):
            self._authenticate()

    @patch("core.auth.oauth2.requests.post")
    def test_service_unreachable(self, mock_post):
        mock_post.side_effect = requests.ConnectionError()

        with self.assertRaises(AuthenticationFailed):
            self._authenticate()


class TestIsDashboardAdmin(SimpleTestCase):
    """Test cases for IsDashboardAdmin and the security context."""

    def setUp(self):
        self.permission = IsDashboardAdmin()
        clear_current_principal()
        self.addCleanup(clear_current_principal)

    def _request(self, user):
        return MagicMock(user=user, path="/api/v1/admin/notifications")

    def test_admin_scope_is_allowed_and_published(self):
        principal = OAuth2Principal(str(uuid4()), "dashboard", ["admin:dashboard"])

        self.assertTrue(self.permission.has_permission(self._request(principal), None))
        self.assertIs(get_current_principal(), principal)
        self.assertIs(require_current_principal(), principal)

    def test_missing_scope_is_denied(self):
        principal = OAuth2Principal(str(uuid4()), "app", ["user:read"])

        self.assertFalse(self.permission.has_permission(self._request(principal), None))
        self.assertIsNone(get_current_principal())

    def test_anonymous_is_denied(self):
        self.assertFalse(self.permission.has_permission(self._request(None), None))
        with self.assertRaises(AuthenticationFailed):
            require_current_principal()
