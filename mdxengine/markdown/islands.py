"""
Placeholders for HTML produced before markdown conversion.

Shortcode widgets are rendered first and parked in an ``IslandStash``. The
source text only keeps an opaque marker per island, so the markdown passes
never touch the widget markup. Postprocessing swaps the markers back.
"""

from __future__ import annotations

import re
from typing import List, Optional

# Private-use code points, never produced by the markdown passes
ISLAND_OPEN = "\ue000"
ISLAND_CLOSE = "\ue001"
ISLAND_PATTERN = re.compile(ISLAND_OPEN + r"mdx-island-(\d+)" + ISLAND_CLOSE)


def contains_island(text: str) -> bool:
    return ISLAND_PATTERN.search(text) is not None


def escape_island_delimiters(text: str) -> str:
    """Turn marker delimiters already present in the source into character references."""
    return text.replace(ISLAND_OPEN, "&#xe000;").replace(ISLAND_CLOSE, "&#xe001;")


class IslandStash:
    """Per-render store of HTML fragments hidden from the markdown passes."""

    def __init__(self):
        self._fragments: List[str] = []

    def __len__(self):
        return len(self._fragments)

    def stash(self, html: str) -> str:
        """Keep ``html`` aside and return the marker that stands in for it."""
        self._fragments.append(html)
        return f"{ISLAND_OPEN}mdx-island-{len(self._fragments) - 1}{ISLAND_CLOSE}"

    def restore(self, text: str, limit: Optional[int] = None) -> str:
        """
        Replace every marker in ``text`` with its fragment.

        Fragments may hold markers of their own (a section holding a question);
        those always point at earlier fragments and are restored too. Markers
        this stash never issued are left as-is.
        """
        if limit is None:
            limit = len(self._fragments)

        def replace(match):
            index = int(match.group(1))
            if index >= limit:
                return match.group(0)
            return self.restore(self._fragments[index], limit=index)

        return ISLAND_PATTERN.sub(replace, text)
