"""URL configuration for the pet community admin service."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/admin/", include("core.urls")),
]
