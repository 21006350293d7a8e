# mdxengine/markdown/renderer.py

import logging
from dataclasses import dataclass

from .config import get_renderer_config
from .converter import convert_markdown
from .exceptions import RenderInputError
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors
from .shortcodes import RenderState, activation_script

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedFragment:
    """Rendered document HTML and whether its widgets need the activation script."""

    html: str
    requires_activation_script: bool


def _validate(text, document_id):
    if text is None:
        raise RenderInputError("Cannot render None; pass the document text")
    if not isinstance(text, str):
        raise RenderInputError(f"Document text must be a string, got {type(text).__name__}")
    if not isinstance(document_id, str) or not document_id:
        raise RenderInputError("A non-empty document id is required to scope question widgets")


def render_document(text, document_id, context=None):
    """
    Main rendering function with pre/post processing pipeline

    Args:
        text: Raw MDX source
        document_id: Id of the document, used to scope question widgets
        context: Optional dict for processors that need additional data
            (e.g. {"sanitize": True})

    Returns:
        RenderedFragment with the HTML (without the activation script)
    """
    _validate(text, document_id)

    # Copy so the per-call render state never leaks into the caller's dict
    context = dict(context or {})
    state = RenderState(document_id=document_id)
    context["render_state"] = state

    # Pre-processing: shortcodes become islands
    text = apply_preprocessors(text, context)

    # Markdown conversion of everything around the islands
    html = convert_markdown(text)

    # Post-processing: islands restored, optional sanitization
    html = apply_postprocessors(html, context)

    return RenderedFragment(
        html=html,
        requires_activation_script=state.requires_activation_script,
    )


def render(text, document_id, context=None):
    """
    Render MDX source to HTML ready for a standalone page.

    The shared activation script is appended once when the document holds at
    least one question widget.
    """
    fragment = render_document(text, document_id, context)
    if not fragment.requires_activation_script:
        return fragment.html
    return fragment.html + "\n" + activation_script(get_renderer_config())
