"""
Document exports shared by the API and the export_document command.

- html: complete standalone page (styles, widgets, activation script)
- mdx:  the raw source, as typed in the editor
"""

import re

from django.template.loader import render_to_string

EXPORT_FORMATS = ("html", "mdx")

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\r\n]+')


def export_filename(title, export_format):
    """File name for a download, e.g. 'My notes.html' ('document.html' if untitled)."""
    base = _UNSAFE_FILENAME_CHARS.sub("-", title or "").strip() or "document"
    return f"{base}.{export_format}"


def render_export_page(document):
    """Complete HTML page for a document, widgets and activation script included."""
    return render_to_string(
        "mdxengine/export.html",
        {
            "title": document.export_title(),
            "body": document.render_html(),
        },
    )


def export_document(document, export_format="html"):
    """Return (filename, text) for ``document`` in the requested format."""
    if export_format not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {export_format!r}")
    if export_format == "mdx":
        return export_filename(document.title, "mdx"), document.content
    return export_filename(document.title, "html"), render_export_page(document)
