"""Data models for FlatWiki."""

import re

from pydantic import BaseModel, field_validator

from flatwiki.core.errors import InvalidTitleError

# Page titles: one or more ASCII letters or digits
TITLE_PATTERN = re.compile(r"[A-Za-z0-9]+")


def validate_title(title: str) -> str:
    """Return ``title`` unchanged, or raise InvalidTitleError."""
    if not TITLE_PATTERN.fullmatch(title):
        raise InvalidTitleError(title)
    return title


class Page(BaseModel):
    """Represents a wiki page.

    ``body`` holds the raw stored bytes: Markdown source with ``[Name]``
    bracket links. It is never rewritten by rendering.
    """

    title: str
    body: bytes = b""

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        return validate_title(value)

    @property
    def text(self) -> str:
        """Return the body decoded as UTF-8 for rendering."""
        return self.body.decode("utf-8", errors="replace")
