"""Shared pytest fixtures. Settings come from DJANGO_SETTINGS_MODULE in pyproject.toml."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup
from django.test import Client


@pytest.fixture
def soup():
    """Parse rendered HTML for structural assertions."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture
def api_client() -> Client:
    return Client()


@pytest.fixture
def make_document(db):
    """Create documents with sensible defaults."""
    from mdxengine.models import Document

    def _make(title: str = "Notes", content: str = "# Notes", **kwargs) -> Document:
        return Document.objects.create(title=title, content=content, **kwargs)

    return _make
