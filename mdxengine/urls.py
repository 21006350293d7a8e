from django.urls import path

from .views import DocumentDetailView

urlpatterns = [
    path("documents/<str:document_id>/", DocumentDetailView.as_view(), name="document-detail"),
]
