"""
Document outline built from rendered MDX HTML.

The editor shows an outline next to the preview: the heading tree plus the
yes/no questions in the order readers meet them.
"""

from __future__ import annotations

from typing import TypedDict

from bs4 import BeautifulSoup, Tag
from django.utils.text import slugify


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    title_html: str
    in_section: bool
    children: list["HeadingNode"]


class QuestionEntry(TypedDict):
    question_id: str
    label: str
    in_section: bool


class Outline(TypedDict):
    headings: list[HeadingNode]
    questions: list[QuestionEntry]


def _in_section(element: Tag) -> bool:
    return element.find_parent("div", attrs={"data-testid": "interactive-section"}) is not None


def _unique_identifier(text: str, seen: dict[str, int]) -> str:
    base = slugify(text) or "section"
    count = seen.get(base, 0)
    seen[base] = count + 1
    return base if count == 0 else f"{base}-{count + 1}"


def extract_outline(html: str) -> Outline:
    """
    Given rendered HTML, return the heading tree and the question widgets.

    Headings nest by level the way a table of contents would; ids are slugs
    of the heading text, made unique within the document. Questions are listed
    flat in document order.
    """
    soup = BeautifulSoup(html, "html.parser")

    headings: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    seen: dict[str, int] = {}
    for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        text = heading.get_text(separator=" ", strip=True)
        if not text:
            continue

        level = int(heading.name[1])  # "h2" -> 2
        node: HeadingNode = {
            "level": level,
            "id": heading.get("id") or _unique_identifier(text, seen),
            "title": text,
            "title_html": "".join(str(child) for child in heading.contents).strip(),
            "in_section": _in_section(heading),
            "children": [],
        }

        while stack and stack[-1]["level"] >= level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            headings.append(node)

        stack.append(node)

    questions: list[QuestionEntry] = []
    for widget in soup.find_all("div", class_="yesno-question-component"):
        question_id = widget.get("data-question-id", "")
        label = widget.find(attrs={"data-testid": f"question-text-{question_id}"})
        questions.append(
            {
                "question_id": question_id,
                "label": label.get_text(strip=True) if label else "",
                "in_section": _in_section(widget),
            }
        )

    return {"headings": headings, "questions": questions}
