"""Exception classes for Incipit."""


class IncipitError(Exception):
    """Base exception for all Incipit errors."""

    pass


class ProseRenderError(IncipitError):
    """The Markdown prose renderer could not be built or failed to render.

    The render pipeline catches this and falls back to the raw document.
    """

    pass
