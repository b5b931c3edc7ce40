"""Exceptions raised by the wiki core."""


class WikiError(Exception):
    """Base class for all wiki errors."""


class PageNotFoundError(WikiError, FileNotFoundError):
    """No stored content exists for the requested title."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"page {title!r} does not exist")


class PageSaveError(WikiError, OSError):
    """Writing a page to storage failed."""


class InvalidTitleError(WikiError, ValueError):
    """A page title contains characters outside [A-Za-z0-9]."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"invalid page title: {title!r}")


class TemplateRenderError(WikiError):
    """A page template could not be rendered."""
