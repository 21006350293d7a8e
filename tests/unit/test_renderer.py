"""Tests for the render orchestrator."""

from __future__ import annotations

import importlib
from concurrent.futures import ThreadPoolExecutor

import pytest

from mdxengine.markdown import (
    RenderInputError,
    convert_markdown,
    count_shortcodes,
    render,
    render_document,
)

SHOWCASE = importlib.import_module("mdxengine.migrations.0002_default_document").DEFAULT_CONTENT


def _question_order(soup, html: str) -> list:
    return [
        (widget["data-question-id"], widget.find(class_="yesno-question-text").get_text())
        for widget in soup(html).find_all("div", class_="yesno-question-component")
    ]


class TestInputValidation:
    def test_none_text(self) -> None:
        with pytest.raises(RenderInputError):
            render(None, "doc")

    def test_non_string_text(self) -> None:
        with pytest.raises(RenderInputError):
            render(b"# bytes", "doc")

    @pytest.mark.parametrize("document_id", ["", None, 42])
    def test_document_id_required(self, document_id) -> None:
        with pytest.raises(RenderInputError):
            render("# Title", document_id)

    def test_is_a_value_error(self) -> None:
        assert issubclass(RenderInputError, ValueError)


class TestPlainMarkdown:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "# Title\n\nSome **bold** and *italic* text.",
            "- a\n- b\n\nAfter the list with `code`.",
            "[home](/index.html)\n\n### Small",
        ],
    )
    def test_equals_converter_output(self, text: str) -> None:
        assert render(text, "doc") == convert_markdown(text)

    def test_no_script_without_questions(self) -> None:
        html = render("[interactivesection]\n## Only a section\n[/interactivesection]", "doc")

        assert "<script" not in html
        assert 'data-testid="interactive-section"' in html


class TestQuestions:
    def test_single_question(self, soup) -> None:
        html = render('[yesno-question question="Useful?"]', "doc")

        assert html.count("<script") == 1
        assert _question_order(soup, html) == [("q1", "Useful?")]

    def test_script_emitted_once_for_many_questions(self) -> None:
        text = "\n\n".join(f'[yesno-question question="Q{i}?"]' for i in range(5))

        assert render(text, "doc").count("<script") == 1

    def test_script_follows_the_content(self) -> None:
        html = render('[yesno-question question="Useful?"]', "doc")

        assert html.index("yesno-question-q1") < html.index("<script")

    def test_nested_question_numbered_in_source_order(self, soup) -> None:
        text = (
            '[yesno-question question="First?"]\n\n'
            "[interactivesection]\n"
            "## Inside\n\n"
            '[yesno-question question="Second?"]\n'
            "[/interactivesection]"
        )
        html = render(text, "doc")
        parsed = soup(html)
        section = parsed.find(attrs={"data-testid": "interactive-section"})

        assert _question_order(soup, html) == [("q1", "First?"), ("q2", "Second?")]
        assert section.find(attrs={"data-testid": "yesno-question-q2"}) is not None
        assert section.find(attrs={"data-testid": "yesno-question-q1"}) is None
        assert section.h2.get_text() == "Inside"

    def test_question_before_section_in_text_order(self, soup) -> None:
        text = (
            "[interactivesection]\n"
            '[yesno-question question="A?"]\n'
            "[/interactivesection]\n\n"
            '[yesno-question question="B?"]'
        )

        assert _question_order(soup, render(text, "doc")) == [("q1", "A?"), ("q2", "B?")]

    def test_widgets_scoped_to_document(self, soup) -> None:
        html = render('[yesno-question question="Useful?"]', "doc-42")
        widget = soup(html).find(attrs={"data-testid": "yesno-question-q1"})

        assert widget["data-document-id"] == "doc-42"

    def test_inline_question_keeps_surrounding_text(self) -> None:
        html = render('Before [yesno-question question="Mid?"] after', "doc")

        assert html.startswith("Before <div")
        assert "</div> after" in html


class TestMalformedShortcodes:
    def test_unterminated_section_is_literal(self) -> None:
        html = render("[interactivesection]\nHello", "doc")

        assert html == "<p>[interactivesection]\nHello</p>"

    def test_missing_closing_quote_is_literal(self) -> None:
        html = render('[yesno-question question="Useful?]', "doc")

        assert html == '<p>[yesno-question question="Useful?]</p>'
        assert "<script" not in html

    def test_extra_opener_stays_literal(self, soup) -> None:
        text = "[interactivesection]\nstray\n\n[interactivesection]\ninside\n[/interactivesection]"
        html = render(text, "doc")

        assert html.startswith("<p>[interactivesection]\nstray</p>")
        assert len(soup(html).find_all(attrs={"data-testid": "interactive-section"})) == 1


    def test_question_straddling_section_end_is_literal(self) -> None:
        text = '[interactivesection]\nx [yesno-question question="a[/interactivesection]b"]'
        html = render(text, "doc")

        assert "yesno-question-component" not in html
        assert "<script" not in html
        assert count_shortcodes(text)["yesno-question"] == 0

    def test_source_cannot_forge_island_marker(self) -> None:
        text = "\ue000mdx-island-0\ue001\n\n[yesno-question question=\"Q?\"]"
        html = render(text, "doc")

        assert html.count('data-testid="yesno-question-q1"') == 1
        assert html.startswith("<p>&#xe000;mdx-island-0&#xe001;</p>")


class TestDeterminism:
    def test_same_input_same_output(self) -> None:
        assert render(SHOWCASE, "default") == render(SHOWCASE, "default")

    def test_concurrent_renders_do_not_interfere(self) -> None:
        expected = render(SHOWCASE, "default")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: render(SHOWCASE, "default"), range(32)))

        assert set(results) == {expected}

    def test_caller_context_is_not_modified(self) -> None:
        context = {"sanitize": False}
        render_document('[yesno-question question="Q?"]', "doc", context)

        assert context == {"sanitize": False}


class TestRenderDocument:
    def test_fragment_without_script(self) -> None:
        fragment = render_document('[yesno-question question="Q?"]', "doc")

        assert fragment.requires_activation_script
        assert "<script" not in fragment.html

    def test_fragment_flag_false_without_questions(self) -> None:
        assert not render_document("# Title", "doc").requires_activation_script


class TestSanitization:
    RAW = '<img src="x" onerror="alert(1)">\n\n[yesno-question question="Q?"]'

    def test_off_by_default(self) -> None:
        assert '<img src="x" onerror="alert(1)">' in render(self.RAW, "doc")

    def test_context_enables_sanitizer(self, soup) -> None:
        html = render_document(self.RAW, "doc", {"sanitize": True}).html
        parsed = soup(html)

        assert parsed.find("img") is None
        assert parsed.find(attrs={"data-testid": "yesno-question-q1"}) is not None
        assert parsed.find(attrs={"data-testid": "button-yes-q1"})["data-response"] == "yes"

    def test_setting_enables_sanitizer(self, settings, soup) -> None:
        settings.MDX_SANITIZE_HTML = True

        assert soup(render_document(self.RAW, "doc").html).find("img") is None


def test_showcase_document(soup) -> None:
    html = render(SHOWCASE, "default")
    parsed = soup(html)

    assert parsed.h1.get_text() == "Interactive MDX Showcase"
    assert len(parsed.find_all(attrs={"data-testid": "interactive-section"})) == 1
    assert _question_order(soup, html) == [
        ("q1", "Do you find this platform useful?"),
        ("q2", "Would you like to learn more about MDX?"),
    ]
    assert len(parsed.ul.find_all("li")) == 4
    assert parsed.find("a", href="https://example.com").get_text() == "Links"
    assert html.count("<script") == 1
