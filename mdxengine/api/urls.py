"""
URL patterns for the MDX editor API.

Endpoints:
- /api/documents, /api/documents/<id> - Document store
- /api/documents/<id>/preview|outline|export - Rendering
- /api/shortcodes - Shortcode library
- /api/responses, /api/responses/<doc>/<question>/counts - Response store
"""

from django.urls import path

from .views import (
    create_response,
    document_detail,
    document_export,
    document_outline,
    document_preview,
    documents,
    response_counts,
    shortcode_library,
)

app_name = "api"

urlpatterns = [
    path("documents", documents, name="documents"),
    path("documents/<str:document_id>", document_detail, name="document-detail"),
    path(
        "documents/<str:document_id>/preview",
        document_preview,
        name="document-preview",
    ),
    path(
        "documents/<str:document_id>/outline",
        document_outline,
        name="document-outline",
    ),
    path(
        "documents/<str:document_id>/export",
        document_export,
        name="document-export",
    ),
    path("shortcodes", shortcode_library, name="shortcode-library"),
    path("responses", create_response, name="responses"),
    path(
        "responses/<str:document_id>/<str:question_id>/counts",
        response_counts,
        name="response-counts",
    ),
]
