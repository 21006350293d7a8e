"""Tests for the island stash used to shield widget HTML."""

from __future__ import annotations

from mdxengine.markdown.islands import IslandStash, contains_island, escape_island_delimiters


def test_stash_and_restore() -> None:
    stash = IslandStash()
    marker = stash.stash("<div>one</div>")

    assert contains_island(marker)
    assert stash.restore(f"<p>x</p>\n{marker}") == "<p>x</p>\n<div>one</div>"


def test_nested_markers_are_restored() -> None:
    stash = IslandStash()
    inner = stash.stash("<span>inner</span>")
    outer = stash.stash(f"<div>{inner}</div>")

    assert stash.restore(outer) == "<div><span>inner</span></div>"


def test_fragment_cannot_reference_itself_or_later_fragments() -> None:
    stash = IslandStash()
    first = stash.stash("placeholder")
    second = stash.stash("<b>later</b>")
    stash._fragments[0] = f"<i>{first}{second}</i>"

    assert stash.restore(first) == f"<i>{first}{second}</i>"


def test_foreign_markers_are_left_alone() -> None:
    stash = IslandStash()
    foreign = IslandStash()
    foreign.stash("a")
    marker = foreign.stash("b")

    assert stash.restore(marker) == marker


def test_escape_island_delimiters() -> None:
    forged = "\ue000mdx-island-0\ue001"

    assert escape_island_delimiters(forged) == "&#xe000;mdx-island-0&#xe001;"
    assert not contains_island(escape_island_delimiters(forged))
