# mdxengine/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

from ..config import get_renderer_config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "li",
            # code
            "code",
            # links and widget controls
            "a",
            "button",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title"],
        "a": ["href", "title", "rel", "target"],
        "button": ["type", "disabled"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return allowed_tags, allowed_attrs, allowed_protocols


def _attribute_filter(tag, name, value):
    """Allow configured attributes plus the data-* hooks widgets rely on."""
    _, allowed_attrs, _ = _get_bleach_config()
    if name.startswith(("data-", "aria-")):
        return True
    return name in allowed_attrs["*"] or name in allowed_attrs.get(tag, [])


def sanitize_html(html, context):
    """
    Sanitize rendered HTML using bleach.

    Off unless MDX_SANITIZE_HTML is set (or the render context asks for it):
    by default raw HTML in the source passes through untouched. When enabled,
    it runs right after the islands are restored so widget labels are
    sanitized along with the rest of the document.
    """
    enabled = context.get("sanitize", get_renderer_config()["sanitize_html"])
    if not enabled:
        return html

    allowed_tags, _, allowed_protocols = _get_bleach_config()

    try:
        sanitized = bleach.clean(
            html,
            tags=allowed_tags,
            attributes=_attribute_filter,
            protocols=allowed_protocols,
            strip=False,  # Escape disallowed tags instead of dropping their text
        )
    except Exception as e:
        # Never hand back unsanitized HTML once sanitization was requested
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        raise
    if sanitized != html:
        logger.debug("Sanitizer altered rendered HTML")
    return sanitized
