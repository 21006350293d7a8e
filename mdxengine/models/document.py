"""
Document model for MDX sources edited in the browser.

The rendered HTML is not stored: question ids depend on the whole text, so
the preview, the export and the template filter all render on demand.
"""

import uuid

from django.db import models

from mdxengine.markdown import count_shortcodes, render, render_document
from mdxengine.markdown.config import get_renderer_config

from .base import TimeStampedModel


def generate_document_id():
    return str(uuid.uuid4())


class Document(TimeStampedModel):
    """An MDX document: a title and the raw source text."""

    DEFAULT_ID = "default"

    id = models.CharField(
        primary_key=True,
        max_length=64,
        default=generate_document_id,
        editable=False,
        help_text="Document id; also scopes question widgets and their responses",
    )
    title = models.CharField(max_length=200)
    content = models.TextField(
        blank=True,
        help_text="MDX source: markdown plus [yesno-question] and [interactivesection] shortcodes",
    )

    class Meta:
        ordering = ["-updated_at"]
        verbose_name = "Document"
        verbose_name_plural = "Documents"

    def __str__(self):
        return self.title or self.id

    def export_title(self):
        return self.title or get_renderer_config()["export_default_title"]

    def render_html(self):
        """Full HTML including the activation script, as used by exports."""
        return render(self.content, self.id)

    def render_preview(self, content=None):
        """
        Render ``content`` (or the stored source) for the live preview.

        Returns a RenderedFragment; the caller decides whether to attach the
        activation script.
        """
        return render_document(self.content if content is None else content, self.id)

    def shortcode_counts(self):
        return count_shortcodes(self.content)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
