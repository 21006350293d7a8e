# mdxengine/markdown/preprocessors/__init__.py

from .shortcode_expander import shortcode_expander_default

PREPROCESSORS = [
    shortcode_expander_default,  # Must run before markdown conversion
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
