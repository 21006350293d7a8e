"""
Recognizer for the two shortcodes understood by the MDX dialect.

Recognizes:
    [yesno-question question="Do you like it?"]
    [interactivesection]
    ## Highlighted content
    [/interactivesection]

Recognition is independent of markdown rendering. It only reports where the
shortcodes are and what they carry; turning them into HTML is the job of
``widgets``. Anything that does not match exactly is left alone and ends up
as literal text in the rendered document.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class ShortcodeKind(str, Enum):
    QUESTION = "yesno-question"
    SECTION = "interactivesection"


@dataclass(frozen=True)
class ShortcodeOccurrence:
    """One matched shortcode, with its attributes and position in the source."""

    kind: ShortcodeKind
    span: Tuple[int, int]
    attributes: Mapping[str, str] = field(default_factory=dict)
    inner_content: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def start(self) -> int:
        return self.span[0]

    @property
    def end(self) -> int:
        return self.span[1]

    def contains(self, other: "ShortcodeOccurrence") -> bool:
        """True when ``other`` lies strictly inside this occurrence's span."""
        return other is not self and self.start <= other.start and other.end <= self.end


@dataclass(frozen=True)
class ShortcodeTemplate:
    key: str
    name: str
    description: str
    template: str


# Snippets offered by the editor's shortcode library
SHORTCODE_LIBRARY = (
    ShortcodeTemplate(
        key=ShortcodeKind.QUESTION.value,
        name="Yes/No Question",
        description="Interactive binary choice component",
        template='[yesno-question question="Your question here?"]',
    ),
    ShortcodeTemplate(
        key=ShortcodeKind.SECTION.value,
        name="Interactive Section",
        description="Highlighted content area with animations",
        template="[interactivesection]\nYour content here\n[/interactivesection]",
    ),
)

SECTION_OPEN = "[interactivesection]"
SECTION_CLOSE = "[/interactivesection]"

# The inner content may not contain another opener, so a closing marker always
# pairs with the nearest opener before it. Openers left without a partner stay
# literal text.
SECTION_PATTERN = re.compile(
    r"\[interactivesection\]"
    r"((?:(?!\[interactivesection\]).)*?)"
    r"\[/interactivesection\]",
    re.DOTALL,
)

# Exactly one attribute, double-quoted, on a single line. Backslash escapes
# are allowed inside the value so it can carry a literal quote.
QUESTION_PATTERN = re.compile(
    r'\[yesno-question[ \t]+question="((?:[^"\\\n]|\\[^\n])+)"[ \t]*\]'
)

_ESCAPE_PATTERN = re.compile(r"\\(.)")


def _unescape_attribute(value: str) -> str:
    return _ESCAPE_PATTERN.sub(r"\1", value)


def _find_sections(text: str) -> List[ShortcodeOccurrence]:
    return [
        ShortcodeOccurrence(
            kind=ShortcodeKind.SECTION,
            span=match.span(),
            inner_content=match.group(1),
        )
        for match in SECTION_PATTERN.finditer(text)
    ]


def _find_questions(text: str) -> List[ShortcodeOccurrence]:
    return [
        ShortcodeOccurrence(
            kind=ShortcodeKind.QUESTION,
            span=match.span(),
            attributes={"question": _unescape_attribute(match.group(1))},
        )
        for match in QUESTION_PATTERN.finditer(text)
    ]


def recognize(text: str) -> List[ShortcodeOccurrence]:
    """
    Return every shortcode occurrence in ``text`` ordered by source offset.

    Questions written inside a section are reported as well; their span lies
    within the section's span. Sections sort before questions that start at
    the same offset (which cannot happen for well-formed input).

    Example:
        >>> [o.kind.value for o in recognize('[yesno-question question="Hi?"]')]
        ['yesno-question']
    """
    occurrences = _find_sections(text) + _find_questions(text)
    occurrences.sort(key=lambda o: (o.start, o.kind is ShortcodeKind.QUESTION))
    logger.debug(f"Recognized {len(occurrences)} shortcode occurrence(s)")
    return occurrences


def top_level(occurrences: List[ShortcodeOccurrence]) -> List[ShortcodeOccurrence]:
    """
    Drop occurrences that start inside an earlier kept occurrence.

    Nested questions are rendered by their enclosing section. A question whose
    marker straddles a section boundary is dropped and stays literal text.
    """
    result: List[ShortcodeOccurrence] = []
    for occurrence in occurrences:
        if result and occurrence.start < result[-1].end:
            continue
        result.append(occurrence)
    return result


def count_shortcodes(text: str) -> Dict[str, int]:
    """
    Count shortcodes per kind, e.g. for an editor status bar.

    Only occurrences that render are counted: top-level ones and the
    questions nested inside a section. A question straddling a section
    boundary stays literal text and is not counted.
    """
    counts = {kind.value: 0 for kind in ShortcodeKind}
    occurrences = recognize(text)
    for occurrence in top_level(occurrences):
        counts[occurrence.kind.value] += 1
        for nested in occurrences:
            if occurrence.contains(nested):
                counts[nested.kind.value] += 1
    return counts
