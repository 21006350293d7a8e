"""
API views for the MDX editor and the question widgets.

Endpoints:
- GET    /api/documents                         - List documents
- POST   /api/documents                         - Create a document
- GET    /api/documents/{id}                    - Fetch a document
- PUT    /api/documents/{id}                    - Update title and/or content
- DELETE /api/documents/{id}                    - Delete a document
- POST   /api/documents/{id}/preview            - Render content for the live preview
- GET    /api/documents/{id}/outline            - Headings and questions of a document
- GET    /api/documents/{id}/export?format=html - Download as HTML page or MDX source
- GET    /api/shortcodes                        - Shortcode library for the editor
- POST   /api/responses                         - Record a yes/no response
- GET    /api/responses/{doc}/{question}/counts - Yes/no tally for one question
"""

import json
import logging

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from mdxengine.exports import EXPORT_FORMATS, export_document
from mdxengine.markdown import SHORTCODE_LIBRARY, count_shortcodes, extract_outline
from mdxengine.markdown.config import get_renderer_config
from mdxengine.markdown.shortcodes import activation_script

logger = logging.getLogger(__name__)

DOCUMENT_FIELDS = ("title", "content")
RESPONSE_CHOICES = ("yes", "no")


def _load_json(request):
    """Return the decoded JSON body, or None when it is not a JSON object."""
    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _invalid(message, errors=None):
    logger.warning(f"Rejected API payload: {message} {errors or ''}".rstrip())
    body = {"message": message}
    if errors:
        body["errors"] = errors
    return JsonResponse(body, status=400)


def _not_found():
    return JsonResponse({"message": "Document not found"}, status=404)


def _validate_document_fields(data, partial=False):
    """
    Check title/content in a create or update payload.

    Returns (cleaned_fields, errors).
    """
    cleaned = {}
    errors = {}
    for name in DOCUMENT_FIELDS:
        if name not in data:
            if not partial:
                errors[name] = "This field is required."
            continue
        value = data[name]
        if not isinstance(value, str):
            errors[name] = "Expected a string."
            continue
        cleaned[name] = value

    if "title" in cleaned and not cleaned["title"].strip():
        errors["title"] = "Title may not be blank."
    return cleaned, errors


def _get_document(document_id):
    from mdxengine.models import Document

    try:
        return Document.objects.get(pk=document_id)
    except Document.DoesNotExist:
        return None


@csrf_exempt
@require_http_methods(["GET", "POST"])
def documents(request):
    """
    List or create documents.

    POST /api/documents

    Request body:
    {
        "title": "My document",
        "content": "# Hello\\n\\n[yesno-question question=\\"Useful?\\"]"
    }

    Response (201): the stored document
    """
    from mdxengine.models import Document

    if request.method == "GET":
        return JsonResponse([doc.to_dict() for doc in Document.objects.all()], safe=False)

    data = _load_json(request)
    if data is None:
        return _invalid("Invalid JSON")

    fields, errors = _validate_document_fields(data)
    if errors:
        return _invalid("Invalid document data", errors)

    document = Document.objects.create(**fields)
    logger.info(f"Created document '{document.pk}' ({document.title!r})")
    return JsonResponse(document.to_dict(), status=201)


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def document_detail(request, document_id):
    """
    Fetch, update or delete one document.

    PUT accepts any subset of {"title", "content"}; the editor's auto-save
    sends both after a pause in typing.
    """
    document = _get_document(document_id)
    if document is None:
        return _not_found()

    if request.method == "GET":
        return JsonResponse(document.to_dict())

    if request.method == "DELETE":
        document.delete()
        logger.info(f"Deleted document '{document_id}'")
        return HttpResponse(status=204)

    data = _load_json(request)
    if data is None:
        return _invalid("Invalid JSON")

    fields, errors = _validate_document_fields(data, partial=True)
    if errors:
        return _invalid("Invalid document data", errors)

    for name, value in fields.items():
        setattr(document, name, value)
    document.save()
    logger.info(f"Updated document '{document.pk}' fields: {', '.join(fields) or 'none'}")
    return JsonResponse(document.to_dict())


@csrf_exempt
@require_http_methods(["POST"])
def document_preview(request, document_id):
    """
    Render MDX for the live preview.

    POST /api/documents/{id}/preview

    Request body (content optional, defaults to the stored source):
    {
        "content": "# Draft"
    }

    Response (200):
    {
        "html": "<h1>Draft</h1>",
        "requiresActivationScript": false,
        "activationScript": null,
        "shortcodes": {"yesno-question": 0, "interactivesection": 0}
    }
    """
    document = _get_document(document_id)
    if document is None:
        return _not_found()

    data = _load_json(request)
    if data is None:
        return _invalid("Invalid JSON")

    content = data.get("content", document.content)
    if not isinstance(content, str):
        return _invalid("Invalid preview data", {"content": "Expected a string."})

    fragment = document.render_preview(content)
    script = None
    if fragment.requires_activation_script:
        script = activation_script(get_renderer_config())
    return JsonResponse(
        {
            "html": fragment.html,
            "requiresActivationScript": fragment.requires_activation_script,
            "activationScript": script,
            "shortcodes": count_shortcodes(content),
        }
    )


@require_http_methods(["GET"])
def document_outline(request, document_id):
    """GET /api/documents/{id}/outline - heading tree and question list."""
    document = _get_document(document_id)
    if document is None:
        return _not_found()

    fragment = document.render_preview()
    return JsonResponse(extract_outline(fragment.html))


@require_http_methods(["GET"])
def document_export(request, document_id):
    """
    Download a document.

    GET /api/documents/{id}/export?format=html  - standalone HTML page (default)
    GET /api/documents/{id}/export?format=mdx   - raw MDX source
    """
    document = _get_document(document_id)
    if document is None:
        return _not_found()

    export_format = request.GET.get("format", "html")
    if export_format not in EXPORT_FORMATS:
        return _invalid("Unsupported export format", {"format": "Use 'html' or 'mdx'."})

    filename, text = export_document(document, export_format)
    content_type = "text/markdown" if export_format == "mdx" else "text/html"
    response = HttpResponse(text, content_type=f"{content_type}; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    logger.info(f"Exported document '{document.pk}' as {export_format}")
    return response


@require_http_methods(["GET"])
def shortcode_library(request):
    """GET /api/shortcodes - snippets the editor can insert."""
    return JsonResponse(
        [
            {
                "key": entry.key,
                "name": entry.name,
                "description": entry.description,
                "template": entry.template,
            }
            for entry in SHORTCODE_LIBRARY
        ],
        safe=False,
    )


@csrf_exempt
@require_http_methods(["POST"])
def create_response(request):
    """
    Record a response to a yes/no widget.

    POST /api/responses

    Request body:
    {
        "documentId": "default",
        "questionId": "q1",
        "response": "yes",
        "sessionId": "6f1c..."     // optional
    }

    Response (201): the stored response. Repeated submissions are stored as
    well; the widget only discourages them client-side.
    """
    from mdxengine.models import QuestionResponse

    data = _load_json(request)
    if data is None:
        return _invalid("Invalid JSON")

    errors = {}
    document_id = data.get("documentId")
    question_id = data.get("questionId")
    answer = data.get("response")
    session_id = data.get("sessionId")

    if not isinstance(document_id, str) or not document_id:
        errors["documentId"] = "This field is required."
    if not isinstance(question_id, str) or not question_id:
        errors["questionId"] = "This field is required."
    elif len(question_id) > 32:
        errors["questionId"] = "Ensure this value has at most 32 characters."
    if answer not in RESPONSE_CHOICES:
        errors["response"] = "Expected 'yes' or 'no'."
    if session_id is not None and (not isinstance(session_id, str) or len(session_id) > 64):
        errors["sessionId"] = "Expected a string of at most 64 characters."
    if errors:
        return _invalid("Invalid response data", errors)

    document = _get_document(document_id)
    if document is None:
        return _not_found()

    response = QuestionResponse.objects.record(document, question_id, answer, session_id)
    logger.info(f"Recorded '{answer}' for {document_id}/{question_id}")
    return JsonResponse(response.to_dict(), status=201)


@require_http_methods(["GET"])
def response_counts(request, document_id, question_id):
    """
    GET /api/responses/{documentId}/{questionId}/counts

    Response (200):
    {
        "yes": 3,
        "no": 1
    }

    Unknown documents or questions simply have no responses.
    """
    from mdxengine.models import QuestionResponse

    tally = QuestionResponse.objects.tally(document_id, question_id)
    return JsonResponse(tally.to_dict())
