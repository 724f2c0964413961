"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    LivenessCheckView,
    NotificationCancelScheduleView,
    NotificationDetailView,
    NotificationListView,
    NotificationScheduleView,
    NotificationSendView,
    NotificationStatsView,
    NotificationTrackClickView,
    NotificationTrackOpenView,
    ReadinessCheckView,
    ReportDetailView,
    ReportListView,
    ReportModerateView,
    ReportStatsView,
    ReportStatusView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Notifications (fixed routes before <uuid:...>)
    path("notifications", NotificationListView.as_view(), name="notification-list"),
    path(
        "notifications/stats",
        NotificationStatsView.as_view(),
        name="notification-stats",
    ),
    path(
        "notifications/<uuid:notification_id>",
        NotificationDetailView.as_view(),
        name="notification-detail",
    ),
    path(
        "notifications/<uuid:notification_id>/send",
        NotificationSendView.as_view(),
        name="notification-send",
    ),
    path(
        "notifications/<uuid:notification_id>/schedule",
        NotificationScheduleView.as_view(),
        name="notification-schedule",
    ),
    path(
        "notifications/<uuid:notification_id>/cancel-schedule",
        NotificationCancelScheduleView.as_view(),
        name="notification-cancel-schedule",
    ),
    path(
        "notifications/<uuid:notification_id>/track-open",
        NotificationTrackOpenView.as_view(),
        name="notification-track-open",
    ),
    path(
        "notifications/<uuid:notification_id>/track-click",
        NotificationTrackClickView.as_view(),
        name="notification-track-click",
    ),
    # Reports and moderation
    path("reports", ReportListView.as_view(), name="report-list"),
    path("reports/stats", ReportStatsView.as_view(), name="report-stats"),
    path(
        "reports/<uuid:report_id>",
        ReportDetailView.as_view(),
        name="report-detail",
    ),
    path(
        "reports/<uuid:report_id>/status",
        ReportStatusView.as_view(),
        name="report-status",
    ),
    path(
        "reports/<uuid:report_id>/moderate",
        ReportModerateView.as_view(),
        name="report-moderate",
    ),
]
