"""Exceptions raised by the MDX rendering pipeline."""


class RenderInputError(ValueError):
    """
    Raised when the renderer is called with input it cannot accept.

    Malformed shortcode syntax never raises; it degrades to literal text.
    Only contract violations (e.g. ``None`` instead of a string) end up here.
    """
