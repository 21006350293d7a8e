# mdxengine/markdown/shortcodes/__init__.py

from .recognizer import (
    SHORTCODE_LIBRARY,
    ShortcodeKind,
    ShortcodeOccurrence,
    ShortcodeTemplate,
    count_shortcodes,
    recognize,
    top_level,
)
from .widgets import (
    RenderState,
    activation_script,
    render_occurrence,
    render_question,
    render_section,
)

__all__ = [
    "SHORTCODE_LIBRARY",
    "ShortcodeKind",
    "ShortcodeOccurrence",
    "ShortcodeTemplate",
    "count_shortcodes",
    "recognize",
    "top_level",
    "RenderState",
    "activation_script",
    "render_occurrence",
    "render_question",
    "render_section",
]
