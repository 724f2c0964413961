"""Pagination classes for API endpoints."""

from rest_framework.pagination import PageNumberPagination


class AdminPageNumberPagination(PageNumberPagination):
    """Page-number pagination for the dashboard's notification and report tables."""

    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100
