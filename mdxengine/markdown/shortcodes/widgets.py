"""
HTML for recognized shortcodes.

Section shortcodes become a highlighted container:

    <div class="interactive-section-highlight" data-testid="interactive-section">
    <h2>Title</h2>
    <p>Body</p>
    </div>

Question shortcodes become a yes/no widget. Every element carries a
``data-testid`` hook built from the question id so browser tests can find it
without depending on layout:

    yesno-question-q1    container (also data-document-id / data-question-id)
    question-text-q1     label
    button-yes-q1        affirmative control
    button-no-q1         negative control
    response-count-q1    live tally placeholder

Widgets do not carry behaviour of their own. A single shared activation
script (``activation_script``) wires up every widget on the page; the
orchestrator emits it at most once per document.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from django.utils.html import escape

from ..converter import convert_section_markdown
from ..islands import IslandStash
from .recognizer import SECTION_OPEN, ShortcodeKind, ShortcodeOccurrence

logger = logging.getLogger(__name__)


@dataclass
class RenderState:
    """
    Mutable state of one render call.

    Created fresh for every call and never shared, so concurrent renders
    cannot disturb each other's question numbering.
    """

    document_id: str
    stash: IslandStash = field(default_factory=IslandStash)
    question_ids: List[str] = field(default_factory=list)

    def next_question_id(self) -> str:
        question_id = f"q{len(self.question_ids) + 1}"
        self.question_ids.append(question_id)
        return question_id

    @property
    def requires_activation_script(self) -> bool:
        return bool(self.question_ids)


QUESTION_TEMPLATE = """<div class="yesno-question-component" data-testid="yesno-question-{qid}" data-document-id="{doc}" data-question-id="{qid}">
<p class="yesno-question-text" data-testid="question-text-{qid}">{label}</p>
<div class="yesno-question-controls">
<button type="button" class="yesno-button yesno-button-yes" data-response="yes" data-testid="button-yes-{qid}">Yes</button>
<button type="button" class="yesno-button yesno-button-no" data-response="no" data-testid="button-no-{qid}">No</button>
</div>
<div class="yesno-question-status">
<span id="response-count-{qid}" data-testid="response-count-{qid}">Loading responses...</span>
</div>
</div>"""

SECTION_TEMPLATE = """<div class="interactive-section-highlight" data-testid="interactive-section">
{body}
</div>"""


def render_question(occurrence: ShortcodeOccurrence, state: RenderState) -> str:
    question_id = state.next_question_id()
    # The label is inserted as written; only the attribute values are escaped
    return QUESTION_TEMPLATE.format(
        qid=question_id,
        doc=escape(state.document_id),
        label=occurrence.attributes["question"],
    )


def render_section(
    occurrence: ShortcodeOccurrence,
    state: RenderState,
    nested: List[ShortcodeOccurrence],
) -> str:
    """
    Render a section and the questions written inside it.

    Nested questions are rendered in source order (so they take the next
    question ids) and parked as islands before the section body goes through
    the heading/paragraph passes.
    """
    content = occurrence.inner_content or ""
    offset = occurrence.start + len(SECTION_OPEN)

    parts = []
    cursor = 0
    for question in nested:
        start, end = question.start - offset, question.end - offset
        parts.append(content[cursor:start])
        parts.append(state.stash.stash(render_question(question, state)))
        cursor = end
    parts.append(content[cursor:])

    body = convert_section_markdown("".join(parts).strip("\n"))
    return SECTION_TEMPLATE.format(body=body)


def render_occurrence(
    occurrence: ShortcodeOccurrence,
    state: RenderState,
    nested: Sequence[ShortcodeOccurrence] = (),
) -> str:
    if occurrence.kind is ShortcodeKind.SECTION:
        return render_section(occurrence, state, list(nested))
    return render_question(occurrence, state)


ACTIVATION_SCRIPT = """<script data-mdx-activation>
(function () {
  if (window.mdxYesNo) {
    window.mdxYesNo.activateAll();
    return;
  }
  var apiBase = __MDX_API_BASE__;
  var sessionKey = __MDX_SESSION_KEY__;

  function countsUrl(documentId, questionId) {
    return apiBase + '/responses/' + encodeURIComponent(documentId) + '/' + encodeURIComponent(questionId) + '/counts';
  }

  function sessionId() {
    var id = window.sessionStorage.getItem(sessionKey);
    if (!id) {
      id = window.crypto && window.crypto.randomUUID ? window.crypto.randomUUID() : String(Date.now()) + Math.random().toString(16).slice(2);
      window.sessionStorage.setItem(sessionKey, id);
    }
    return id;
  }

  function setCount(widget, text) {
    var el = widget.querySelector('[data-testid="response-count-' + widget.dataset.questionId + '"]');
    if (el) {
      el.textContent = text;
    }
  }

  function fetchCounts(widget) {
    return fetch(countsUrl(widget.dataset.documentId, widget.dataset.questionId))
      .then(function (res) { return res.json(); })
      .then(function (data) { return data.yes + data.no; });
  }

  function respond(widget, response) {
    var buttons = widget.querySelectorAll('button[data-response]');
    if (widget.dataset.answered) {
      return;
    }
    widget.dataset.answered = response;
    buttons.forEach(function (button) { button.disabled = true; });

    fetch(apiBase + '/responses', {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify({
        documentId: widget.dataset.documentId,
        questionId: widget.dataset.questionId,
        response: response,
        sessionId: sessionId()
      })
    })
      .then(function (res) { return res.json(); })
      .then(function () { return fetchCounts(widget); })
      .then(function (total) {
        setCount(widget, total + ' responses so far \\u00b7 You answered: ' + response);
      })
      .catch(function (err) {
        console.error('Failed to record response:', err);
      });
  }

  function activate(widget) {
    if (widget.dataset.activated) {
      return;
    }
    widget.dataset.activated = 'true';
    fetchCounts(widget)
      .then(function (total) { setCount(widget, total + ' responses so far'); })
      .catch(function () { setCount(widget, '0 responses so far'); });
    widget.querySelectorAll('button[data-response]').forEach(function (button) {
      button.addEventListener('click', function () {
        respond(widget, button.dataset.response);
      });
    });
  }

  function activateAll() {
    document.querySelectorAll('.yesno-question-component').forEach(activate);
  }

  window.mdxYesNo = { activate: activate, activateAll: activateAll };

  if (document.readyState === 'loading') {
    document.addEventListener('DOMContentLoaded', activateAll);
  } else {
    activateAll();
  }
})();
</script>"""


def activation_script(config: dict) -> str:
    """Return the shared widget script wired to the configured response API."""
    return ACTIVATION_SCRIPT.replace(
        "__MDX_API_BASE__", json.dumps(config["responses_api_base"])
    ).replace("__MDX_SESSION_KEY__", json.dumps(config["session_storage_key"]))
