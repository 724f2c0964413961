"""API views for the admin dashboard."""

from uuid import UUID

import structlog
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth.context import require_current_principal
from core.auth.oauth2 import OAuth2Authentication
from core.auth.permissions import IsDashboardAdmin
from core.enums import NotificationLifecycle
from core.pagination import AdminPageNumberPagination
from core.schemas.notification import (
    NotificationCreateRequest,
    NotificationDetail,
    NotificationScheduleRequest,
    NotificationUpdateRequest,
)
from core.schemas.report import ModerationRequest, ReportStatusUpdateRequest
from core.services.feedback import CollectingFeedback
from core.services.health_service import health_service
from core.services.moderation_service import moderation_service
from core.services.notification_service import notification_service

logger = structlog.get_logger(__name__)


def _detail(notification) -> dict:
    return NotificationDetail.model_validate(notification).model_dump()


class LivenessCheckView(APIView):
    """Liveness probe. Exempt from authentication."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe. Exempt from authentication.

    Answers 200 even when a dependency is down; the body reports
    ``degraded``.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(), status=status.HTTP_200_OK)


class AdminAPIView(APIView):
    """Base view requiring a bearer token with the admin dashboard scope."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsDashboardAdmin,)


class NotificationListView(AdminAPIView):
    """GET: paginated notifications, newest first. POST: compose a notification."""

    def get(self, request):
        paginator = AdminPageNumberPagination()
        page = paginator.paginate_queryset(
            notification_service.list_notifications(), request, view=self
        )
        return paginator.get_paginated_response([_detail(n) for n in page or []])

    def post(self, request):
        payload = NotificationCreateRequest.model_validate(request.data)
        notification = notification_service.create_notification(
            payload, sender_id=require_current_principal().uuid
        )
        return Response(_detail(notification), status=status.HTTP_201_CREATED)


class NotificationStatsView(AdminAPIView):
    """Counts by status, channel and type plus open and click rates."""

    def get(self, _request):
        return Response(notification_service.get_stats().model_dump())


class NotificationDetailView(AdminAPIView):
    """GET, PATCH (drafts only) and DELETE a single notification."""

    def get(self, _request, notification_id: UUID):
        return Response(_detail(notification_service.get_notification(notification_id)))

    def patch(self, request, notification_id: UUID):
        payload = NotificationUpdateRequest.model_validate(request.data)
        notification = notification_service.update_notification(notification_id, payload)
        return Response(_detail(notification))

    def delete(self, _request, notification_id: UUID):
        notification_service.delete_notification(notification_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class NotificationSendView(AdminAPIView):
    """Run the send pipeline now.

    Responds 200 whenever the pipeline ran, whether the notification ended
    ``sent`` or ``failed``; 404 when it does not exist; 409 when its status
    does not allow sending. Operator messages are returned under
    ``messages``.
    """

    def post(self, _request, notification_id: UUID):
        feedback = CollectingFeedback()
        outcome = notification_service.send_notification(notification_id, feedback)

        if outcome.dispatched:
            http_status = status.HTTP_200_OK
        elif not outcome.found:
            http_status = status.HTTP_404_NOT_FOUND
        else:
            http_status = status.HTTP_409_CONFLICT

        body = outcome.model_dump()
        body["messages"] = feedback.messages
        return Response(body, status=http_status)


class NotificationScheduleView(AdminAPIView):
    """Schedule or reschedule a notification."""

    def post(self, request, notification_id: UUID):
        payload = NotificationScheduleRequest.model_validate(request.data)
        notification = notification_service.schedule_notification(
            notification_id, payload.scheduled_for
        )
        return Response(_detail(notification))


class NotificationCancelScheduleView(AdminAPIView):
    """Return a scheduled notification to draft."""

    def post(self, _request, notification_id: UUID):
        return Response(_detail(notification_service.cancel_schedule(notification_id)))


class NotificationTrackOpenView(AdminAPIView):
    """Count one open reported by the apps."""

    def post(self, _request, notification_id: UUID):
        notification_service.track_open(notification_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class NotificationTrackClickView(AdminAPIView):
    """Count one click reported by the apps."""

    def post(self, _request, notification_id: UUID):
        notification_service.track_click(notification_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ReportListView(AdminAPIView):
    """Paginated reports, filterable by ``status`` and ``report_type``."""

    def get(self, request):
        reports = moderation_service.list_reports(
            status=request.query_params.get("status"),
            report_type=request.query_params.get("report_type"),
        )
        paginator = AdminPageNumberPagination()
        page = paginator.paginate_queryset(reports, request, view=self)
        return paginator.get_paginated_response(
            [moderation_service.describe(report).model_dump() for report in page or []]
        )


class ReportStatsView(AdminAPIView):
    def get(self, _request):
        return Response(moderation_service.get_stats().model_dump())


class ReportDetailView(AdminAPIView):
    def get(self, _request, report_id: UUID):
        return Response(moderation_service.get_report(report_id).model_dump())


class ReportStatusView(AdminAPIView):
    """Record a review decision; the caller is the default reviewer."""

    def patch(self, request, report_id: UUID):
        payload = ReportStatusUpdateRequest.model_validate(request.data)
        report = moderation_service.update_status(
            report_id, payload, reviewer_id=require_current_principal().uuid
        )
        return Response(report.model_dump())


class ReportModerateView(AdminAPIView):
    """Disable, enable or delete the content a report points at."""

    def post(self, request, report_id: UUID):
        payload = ModerationRequest.model_validate(request.data)
        result = moderation_service.moderate_report(report_id, payload.action)
        return Response(result.model_dump())
