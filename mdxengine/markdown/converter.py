"""
Line-oriented converter for the markdown subset of the MDX dialect.

Supported, in the order the passes run:
    # Heading .. ###### Heading   → <h1> .. <h6>
    **bold**, *italic*            → <strong>, <em>
    `code`                        → <code>
    [label](url)                  → <a href="url">
    - item                        → <li>, one <ul> per run of items
    blank-line separated blocks   → <p>

This is deliberately not a CommonMark engine. Each pass is a plain
substitution over the whole text and none of them recurse. Paragraph wrapping
has to run last so the block-level tags produced by earlier passes are not
wrapped again.
"""

import re

from .islands import contains_island

HEADER_PATTERN = re.compile(r"^(#{1,6}) (.+)$", re.MULTILINE)
STRONG_PATTERN = re.compile(r"\*\*(.+?)\*\*")
EM_PATTERN = re.compile(r"\*(.+?)\*")
CODE_PATTERN = re.compile(r"`(.+?)`")
LINK_PATTERN = re.compile(r"\[([^\[\]\n]+)\]\(([^()\n]+)\)")
LIST_ITEM_PATTERN = re.compile(r"^- (.+)$", re.MULTILINE)
BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n")
BLOCK_LEVEL_TAG = re.compile(r"<(h[1-6]|ul)\b")


def convert_headers(text):
    def replace(match):
        level = len(match.group(1))
        return f"<h{level}>{match.group(2)}</h{level}>"

    return HEADER_PATTERN.sub(replace, text)


def convert_emphasis(text):
    text = STRONG_PATTERN.sub(r"<strong>\1</strong>", text)
    return EM_PATTERN.sub(r"<em>\1</em>", text)


def convert_inline_code(text):
    return CODE_PATTERN.sub(r"<code>\1</code>", text)


def convert_links(text):
    # URL schemes are not checked; enable sanitization if sources are untrusted
    return LINK_PATTERN.sub(r'<a href="\2">\1</a>', text)


def convert_lists(text):
    """Turn "- " lines into list items and wrap each contiguous run in a <ul>."""
    text = LIST_ITEM_PATTERN.sub(r"<li>\1</li>", text)

    lines = []
    in_list = False
    for line in text.split("\n"):
        is_item = line.startswith("<li>") and line.endswith("</li>")
        if is_item and not in_list:
            lines.append("<ul>")
            in_list = True
        elif not is_item and in_list:
            lines.append("</ul>")
            in_list = False
        lines.append(line)
    if in_list:
        lines.append("</ul>")

    return "\n".join(lines)


def wrap_paragraphs(text):
    """
    Wrap blank-line separated blocks in <p>, leaving block-level HTML alone.

    Blocks that hold a heading or list anywhere, or a shortcode island, are
    kept verbatim so block-level tags never end up inside a <p>. Empty blocks
    are dropped.
    """
    blocks = []
    for block in BLOCK_SEPARATOR.split(text):
        stripped = block.strip()
        if not stripped:
            continue
        if BLOCK_LEVEL_TAG.search(stripped) or contains_island(block):
            blocks.append(block.strip("\n"))
            continue
        blocks.append(f"<p>{stripped}</p>")
    return "\n".join(blocks)


MARKDOWN_PASSES = [
    convert_headers,
    convert_emphasis,
    convert_inline_code,
    convert_links,
    convert_lists,
    wrap_paragraphs,  # Must stay last
]

# Section shortcodes only get headings and paragraphs
SECTION_PASSES = [
    convert_headers,
    wrap_paragraphs,
]


def _apply_passes(text, passes):
    text = text.replace("\r\n", "\n")
    for markdown_pass in passes:
        text = markdown_pass(text)
    return text


def convert_markdown(text: str) -> str:
    """Convert MDX markdown (shortcodes already replaced by islands) to HTML."""
    return _apply_passes(text, MARKDOWN_PASSES)


def convert_section_markdown(text: str) -> str:
    """Convert the body of an interactive section: headings and paragraphs only."""
    return _apply_passes(text, SECTION_PASSES)
