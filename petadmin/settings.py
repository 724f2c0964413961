"""Django settings for the pet community admin service.

Every value that differs between environments is read from the process
environment. The relational schema is owned by the hosted backend, so the
models in ``core`` are unmanaged and no migrations are shipped.
"""

import os
from pathlib import Path

from core.logging import setup_logging

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-local-development-key")

DEBUG = os.getenv("DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "django_rq",
    "core",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "core.middleware.RequestContextMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "petadmin.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "petadmin.wsgi.application"

# Hosted Postgres backend (schema owned externally)
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("POSTGRES_DB", "postgres"),
        "USER": os.getenv("POSTGRES_USER", "postgres"),
        "PASSWORD": os.getenv("POSTGRES_PASSWORD", ""),
        "HOST": os.getenv("POSTGRES_HOST", "localhost"),
        "PORT": os.getenv("POSTGRES_PORT", "5432"),
        "CONN_MAX_AGE": int(os.getenv("POSTGRES_CONN_MAX_AGE", "60")),
        "OPTIONS": {
            "options": f"-c search_path={os.getenv('POSTGRES_SCHEMA', 'public')}",
        },
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": (
            f"redis://{os.getenv('REDIS_HOST', 'localhost')}:"
            f"{os.getenv('REDIS_PORT', '6379')}/{os.getenv('REDIS_CACHE_DB', '1')}"
        ),
    }
}

RQ_QUEUES = {
    "default": {
        "HOST": os.getenv("REDIS_HOST", "localhost"),
        "PORT": int(os.getenv("REDIS_PORT", "6379")),
        "DB": int(os.getenv("REDIS_DB", "0")),
        "PASSWORD": os.getenv("REDIS_PASSWORD") or None,
        "DEFAULT_TIMEOUT": 300,
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": ["core.auth.oauth2.OAuth2Authentication"],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.IsAuthenticated"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "EXCEPTION_HANDLER": "core.exceptions.handlers.custom_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

# OAuth2 / JWT
OAUTH2_SERVICE_ENABLED = os.getenv("OAUTH2_SERVICE_ENABLED", "true").lower() == "true"
OAUTH2_INTROSPECTION_ENABLED = (
    os.getenv("OAUTH2_INTROSPECTION_ENABLED", "false").lower() == "true"
)
OAUTH2_INTROSPECT_URL = os.getenv(
    "OAUTH2_INTROSPECT_URL", "http://localhost:8080/api/v1/auth/oauth2/introspect"
)
OAUTH2_CLIENT_ID = os.getenv("OAUTH2_CLIENT_ID", "pet-admin-service")
OAUTH2_CLIENT_SECRET = os.getenv("OAUTH2_CLIENT_SECRET", "")
OAUTH2_TOKEN_CACHE_PREFIX = "oauth2_token:"
OAUTH2_TOKEN_CACHE_TTL = int(os.getenv("OAUTH2_TOKEN_CACHE_TTL", "300"))
OAUTH2_ADMIN_SCOPE = "admin:dashboard"
JWT_SECRET = os.getenv("JWT_SECRET", "")

# SMTP
EMAIL_HOST = os.getenv("EMAIL_HOST", "localhost")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", "587"))
EMAIL_HOST_USER = os.getenv("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.getenv("EMAIL_HOST_PASSWORD", "")
EMAIL_USE_TLS = os.getenv("EMAIL_USE_TLS", "true").lower() == "true"
DEFAULT_FROM_EMAIL = os.getenv("DEFAULT_FROM_EMAIL", "no-reply@petcommunity.app")

# Downstream gateways
SMS_GATEWAY_URL = os.getenv("SMS_GATEWAY_URL", "http://localhost:9000/api/v1/sms")
SMS_GATEWAY_API_KEY = os.getenv("SMS_GATEWAY_API_KEY", "")
SMS_SENDER_ID = os.getenv("SMS_SENDER_ID", "PetCommunity")
PUSH_GATEWAY_URL = os.getenv(
    "PUSH_GATEWAY_URL", "http://localhost:54321/functions/v1/send_notification"
)
PUSH_GATEWAY_API_KEY = os.getenv("PUSH_GATEWAY_API_KEY", "")

# Notification dispatch
DISPATCH_MAX_WORKERS = int(os.getenv("DISPATCH_MAX_WORKERS", "4"))
NOTIFICATION_MAX_SEND_ATTEMPTS = int(os.getenv("NOTIFICATION_MAX_SEND_ATTEMPTS", "3"))
NOTIFICATION_RETRY_BASE_DELAY_SECONDS = float(
    os.getenv("NOTIFICATION_RETRY_BASE_DELAY_SECONDS", "30")
)
NOTIFICATION_RETRY_MAX_DELAY_SECONDS = float(
    os.getenv("NOTIFICATION_RETRY_MAX_DELAY_SECONDS", "900")
)
# Inline enqueue retries run inside the request, so they stay short
DISPATCH_ENQUEUE_RETRY_BASE_DELAY_SECONDS = float(
    os.getenv("DISPATCH_ENQUEUE_RETRY_BASE_DELAY_SECONDS", "0.5")
)
DISPATCH_ENQUEUE_RETRY_MAX_DELAY_SECONDS = float(
    os.getenv("DISPATCH_ENQUEUE_RETRY_MAX_DELAY_SECONDS", "2")
)

TEST_MODE = False

setup_logging()
