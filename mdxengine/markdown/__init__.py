# mdxengine/markdown/__init__.py

from .converter import convert_markdown, convert_section_markdown
from .exceptions import RenderInputError
from .outline import extract_outline
from .renderer import RenderedFragment, render, render_document
from .shortcodes import (
    SHORTCODE_LIBRARY,
    ShortcodeKind,
    ShortcodeOccurrence,
    count_shortcodes,
    recognize,
)

__all__ = [
    "RenderInputError",
    "RenderedFragment",
    "SHORTCODE_LIBRARY",
    "ShortcodeKind",
    "ShortcodeOccurrence",
    "convert_markdown",
    "convert_section_markdown",
    "count_shortcodes",
    "extract_outline",
    "recognize",
    "render",
    "render_document",
]
