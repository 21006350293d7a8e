"""
Preprocessor that expands shortcodes before markdown conversion.

Converts:
    [yesno-question question="Useful?"]         → yes/no widget
    [interactivesection]...[/interactivesection] → highlighted section

Each top-level occurrence is rendered in source order and its span is
replaced by an island marker. The rendered HTML waits in the render state's
stash until the island postprocessor puts it back, so the markdown passes
never see widget markup.
"""

import logging

from ..islands import escape_island_delimiters
from ..shortcodes import recognize, render_occurrence, top_level

logger = logging.getLogger(__name__)


def expand_shortcodes(text: str, context: dict) -> str:
    """
    Replace shortcode spans in ``text`` with island markers.

    Args:
        text: Raw MDX source
        context: Must contain 'render_state' (a RenderState for this call)

    Returns:
        Source text with each recognized shortcode swapped for a marker
    """
    state = context["render_state"]
    # Source text must not be able to forge a marker
    text = escape_island_delimiters(text)
    occurrences = recognize(text)
    if not occurrences:
        return text

    parts = []
    cursor = 0
    for occurrence in top_level(occurrences):
        nested = [o for o in occurrences if occurrence.contains(o)]
        html = render_occurrence(occurrence, state, nested)
        parts.append(text[cursor:occurrence.start])
        parts.append(state.stash.stash(html))
        cursor = occurrence.end
    parts.append(text[cursor:])

    logger.debug(
        f"Expanded {len(occurrences)} shortcode(s) for document "
        f"'{state.document_id}' ({len(state.question_ids)} question(s))"
    )
    return "".join(parts)


def shortcode_expander_default(text: str, context: dict) -> str:
    """
    Default configuration for shortcode_expander.

    Register this in PREPROCESSORS.
    """
    return expand_shortcodes(text, context)
