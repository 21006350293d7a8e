from django.conf import settings


def get_renderer_config():
    """
    Configuration for the MDX renderer and its client-side widgets.

    Values come from Django settings so deployments can move the response API
    or turn on output sanitization without touching the pipeline:

        MDX_RESPONSES_API_BASE   Prefix of the response endpoints the
                                 activation script calls (default "/api").
        MDX_SESSION_STORAGE_KEY  sessionStorage key holding the client
                                 session id (default "sessionId").
        MDX_SANITIZE_HTML        Run the bleach sanitizer over rendered HTML
                                 (default False; raw HTML passes through).
        MDX_EXPORT_DEFAULT_TITLE Title used by exports of untitled documents.
    """
    return {
        "responses_api_base": getattr(settings, "MDX_RESPONSES_API_BASE", "/api").rstrip("/"),
        "session_storage_key": getattr(settings, "MDX_SESSION_STORAGE_KEY", "sessionId"),
        "sanitize_html": getattr(settings, "MDX_SANITIZE_HTML", False),
        "export_default_title": getattr(settings, "MDX_EXPORT_DEFAULT_TITLE", "MDX Document"),
    }
