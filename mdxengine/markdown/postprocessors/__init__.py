# mdxengine/markdown/postprocessors/__init__.py

from .island_restorer import restore_islands
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    restore_islands,  # Put shortcode HTML back before anything inspects it
    sanitize_html,  # Opt-in, see MDX_SANITIZE_HTML
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
