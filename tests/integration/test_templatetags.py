"""Tests for the mdx template tags and filters."""

from __future__ import annotations

from django.template import Context, Template

SOURCE = '# Title\n\n[yesno-question question="Q?"]'


def _render(template: str, **context) -> str:
    return Template("{% load mdx_tags %}" + template).render(Context(context))


def test_mdx_filter_renders_with_script() -> None:
    html = _render("{{ content|mdx:doc_id }}", content=SOURCE, doc_id="doc")

    assert html.startswith("<h1>Title</h1>")
    assert 'data-testid="yesno-question-q1"' in html
    assert html.count("<script") == 1


def test_mdx_filter_handles_missing_content() -> None:
    assert _render("{{ content|mdx:'doc' }}", content=None) == ""


def test_mdx_preview_has_no_script() -> None:
    html = _render("{% mdx_preview content 'doc' %}", content=SOURCE)

    assert 'data-testid="yesno-question-q1"' in html
    assert "<script" not in html


def test_mdx_preview_sanitize() -> None:
    html = _render(
        "{% mdx_preview content 'doc' sanitize=True %}",
        content='<iframe src="https://example.com"></iframe>',
    )

    assert "<iframe" not in html


def test_shortcode_count() -> None:
    text = '[interactivesection]\n[yesno-question question="Q?"]\n[/interactivesection]'

    assert _render("{{ content|shortcode_count }}", content=text) == "2"
    assert _render("{{ content|shortcode_count:'interactivesection' }}", content=text) == "1"
