"""Markdown rendering for the page view."""

from markdown import Markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

from flatwiki.core.links import bracket_to_html
from flatwiki.core.models import Page

# Pattern for strikethrough: ~~text~~
# Group 2 must contain the text (SimpleTagInlineProcessor expectation)
STRIKETHROUGH_PATTERN = r"(~~)(.*?)~~"


class StrikethroughExtension(Extension):
    """Markdown extension for ~~strikethrough~~ text."""

    def extendMarkdown(self, md: Markdown) -> None:
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "strikethrough",
            50,
        )


def create_renderer() -> Markdown:
    """Create a Markdown converter for page bodies.

    Raw inline HTML is passed through untouched, which is what lets the
    anchors produced by bracket_to_html survive rendering. Nothing is
    sanitized.
    """
    return Markdown(
        extensions=[
            "extra",  # abbreviations, attr_list, def_list, fenced_code, footnotes, md_in_html, tables
            "sane_lists",
            StrikethroughExtension(),
        ]
    )


def render_markdown(text: str) -> str:
    """Convert Markdown source to HTML."""
    return create_renderer().convert(text)


def render_page_body(page: Page) -> str:
    """Run the view pipeline on a page: link translation, then Markdown.

    The page itself is not modified.
    """
    return render_markdown(bracket_to_html(page.text))
