"""Integration tests for the document and response API."""

from __future__ import annotations

import json

import pytest

from mdxengine.models import Document, QuestionResponse

pytestmark = pytest.mark.django_db


def _post(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


def _put(client, url, payload):
    return client.put(url, data=json.dumps(payload), content_type="application/json")


class TestDocuments:
    def test_list_includes_seeded_document(self, api_client) -> None:
        response = api_client.get("/api/documents")

        assert response.status_code == 200
        assert "default" in [doc["id"] for doc in response.json()]

    def test_create(self, api_client) -> None:
        response = _post(api_client, "/api/documents", {"title": "Draft", "content": "# Hi"})

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Draft"
        assert body["content"] == "# Hi"
        assert body["createdAt"] and body["updatedAt"]
        assert Document.objects.filter(pk=body["id"]).exists()

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"content": "# Hi"}, "title"),
            ({"title": "Draft"}, "content"),
            ({"title": "   ", "content": ""}, "title"),
            ({"title": "Draft", "content": 5}, "content"),
        ],
    )
    def test_create_validation(self, api_client, payload, field) -> None:
        response = _post(api_client, "/api/documents", payload)

        assert response.status_code == 400
        assert field in response.json()["errors"]

    def test_create_rejects_invalid_json(self, api_client) -> None:
        response = api_client.post("/api/documents", data="{", content_type="application/json")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid JSON"

    def test_get(self, api_client) -> None:
        response = api_client.get("/api/documents/default")

        assert response.status_code == 200
        assert response.json()["title"] == "Interactive MDX Showcase"

    def test_get_missing(self, api_client) -> None:
        response = api_client.get("/api/documents/missing")

        assert response.status_code == 404
        assert response.json() == {"message": "Document not found"}

    def test_partial_update(self, api_client, make_document) -> None:
        document = make_document(title="Old", content="old")

        response = _put(api_client, f"/api/documents/{document.pk}", {"content": "new"})

        assert response.status_code == 200
        document.refresh_from_db()
        assert (document.title, document.content) == ("Old", "new")

    def test_update_missing(self, api_client) -> None:
        assert _put(api_client, "/api/documents/missing", {"content": "x"}).status_code == 404

    def test_delete_cascades_to_responses(self, api_client, make_document) -> None:
        document = make_document()
        QuestionResponse.objects.record(document, "q1", "yes")

        response = api_client.delete(f"/api/documents/{document.pk}")

        assert response.status_code == 204
        assert not Document.objects.filter(pk=document.pk).exists()
        assert not QuestionResponse.objects.filter(document_id=document.pk).exists()

    def test_method_not_allowed(self, api_client) -> None:
        assert api_client.patch("/api/documents/default").status_code == 405


class TestRendering:
    def test_preview_of_draft_content(self, api_client) -> None:
        response = _post(
            api_client,
            "/api/documents/default/preview",
            {"content": '# Draft\n\n[yesno-question question="Ok?"]'},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["html"].startswith("<h1>Draft</h1>")
        assert 'data-document-id="default"' in body["html"]
        assert "<script" not in body["html"]
        assert body["requiresActivationScript"] is True
        assert body["activationScript"].startswith("<script data-mdx-activation>")
        assert body["activationScript"].count("<script") == 1
        assert body["shortcodes"] == {"yesno-question": 1, "interactivesection": 0}

    def test_preview_defaults_to_stored_content(self, api_client, make_document) -> None:
        document = make_document(content="# Stored")

        response = _post(api_client, f"/api/documents/{document.pk}/preview", {})

        assert response.json()["html"] == "<h1>Stored</h1>"
        assert response.json()["requiresActivationScript"] is False
        assert response.json()["activationScript"] is None

    def test_preview_rejects_non_string(self, api_client) -> None:
        response = _post(api_client, "/api/documents/default/preview", {"content": ["x"]})

        assert response.status_code == 400

    def test_outline(self, api_client) -> None:
        response = api_client.get("/api/documents/default/outline")

        assert response.status_code == 200
        outline = response.json()
        assert outline["headings"][0]["title"] == "Interactive MDX Showcase"
        assert [q["question_id"] for q in outline["questions"]] == ["q1", "q2"]

    def test_export_html(self, api_client) -> None:
        response = api_client.get("/api/documents/default/export?format=html")

        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/html")
        assert 'filename="Interactive MDX Showcase.html"' in response["Content-Disposition"]
        page = response.content.decode()
        assert page.startswith("<!DOCTYPE html>")
        assert page.count("<script data-mdx-activation>") == 1

    def test_export_mdx(self, api_client) -> None:
        document = Document.objects.get(pk="default")

        response = api_client.get("/api/documents/default/export?format=mdx")

        assert response["Content-Type"].startswith("text/markdown")
        assert response.content.decode() == document.content

    def test_export_unknown_format(self, api_client) -> None:
        assert api_client.get("/api/documents/default/export?format=pdf").status_code == 400

    def test_shortcode_library(self, api_client) -> None:
        library = api_client.get("/api/shortcodes").json()

        assert [entry["key"] for entry in library] == ["yesno-question", "interactivesection"]
        assert library[0]["template"] == '[yesno-question question="Your question here?"]'


class TestResponses:
    def test_record_and_count(self, api_client) -> None:
        for answer in ("yes", "yes", "no"):
            response = _post(
                api_client,
                "/api/responses",
                {"documentId": "default", "questionId": "q1", "response": answer, "sessionId": "s1"},
            )
            assert response.status_code == 201

        counts = api_client.get("/api/responses/default/q1/counts")

        assert counts.status_code == 200
        assert counts.json() == {"yes": 2, "no": 1}

    def test_counts_are_per_question(self, api_client) -> None:
        _post(api_client, "/api/responses", {"documentId": "default", "questionId": "q1", "response": "yes"})

        assert api_client.get("/api/responses/default/q2/counts").json() == {"yes": 0, "no": 0}

    def test_counts_for_unknown_document(self, api_client) -> None:
        assert api_client.get("/api/responses/nope/q1/counts").json() == {"yes": 0, "no": 0}

    def test_response_body(self, api_client) -> None:
        body = _post(
            api_client,
            "/api/responses",
            {"documentId": "default", "questionId": "q2", "response": "no"},
        ).json()

        assert body["documentId"] == "default"
        assert body["questionId"] == "q2"
        assert body["response"] == "no"
        assert body["sessionId"] is None

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"questionId": "q1", "response": "yes"}, "documentId"),
            ({"documentId": "default", "response": "yes"}, "questionId"),
            ({"documentId": "default", "questionId": "q1", "response": "maybe"}, "response"),
            ({"documentId": "default", "questionId": "q" * 33, "response": "yes"}, "questionId"),
            ({"documentId": "default", "questionId": "q1", "response": "yes", "sessionId": 7}, "sessionId"),
        ],
    )
    def test_validation(self, api_client, payload, field) -> None:
        response = _post(api_client, "/api/responses", payload)

        assert response.status_code == 400
        assert field in response.json()["errors"]

    def test_unknown_document(self, api_client) -> None:
        response = _post(
            api_client,
            "/api/responses",
            {"documentId": "missing", "questionId": "q1", "response": "yes"},
        )

        assert response.status_code == 404
