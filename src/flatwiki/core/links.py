"""Conversion between [PageName] bracket links and HTML anchors.

Matching is purely lexical: no Markdown or HTML parser is involved, so any
text shaped like a link is rewritten whether or not it was meant as one.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Bracket link: [PageName], letters only
BRACKET_LINK_PATTERN = r"\[(?P<name>[A-Za-z]+)\]"

# Inline Markdown link: [text](url), consumed whole so its text is never rewritten
MARKDOWN_LINK_PATTERN = r"\[[^\]\n]*\]\([^)\n]*\)"

# A match is left alone when this is found anywhere inside it
SKIP_PATTERN = re.compile(r"(?:__|[*#])|\[(.*?)\]\(.*?\)")

# Markdown links are tried first at each position, then bracket links
LINK_SCAN = re.compile(f"{MARKDOWN_LINK_PATTERN}|{BRACKET_LINK_PATTERN}")

# <a href='/view/PageName'>PageName</a>, visible text equal to the target
HTML_LINK_PATTERN = re.compile(r"<a href='/view/([A-Za-z0-9]+)'>\1</a>")


def page_anchor(name: str) -> str:
    """Return the HTML anchor for a page name."""
    return f"<a href='/view/{name}'>{name}</a>"


def _should_skip(m: re.Match) -> bool:
    return m.group("name") is None or SKIP_PATTERN.search(m.group(0)) is not None


def bracket_to_html(text: str) -> str:
    """Replace each [PageName] in ``text`` with an anchor to /view/PageName.

    Markdown links and anything matching the skip rule are kept verbatim.
    """

    def replace(m: re.Match) -> str:
        if _should_skip(m):
            logger.debug("Skipping match: %s", m.group(0))
            return m.group(0)
        logger.debug("Performing substitution against %s", m.group(0))
        return page_anchor(m.group("name"))

    return LINK_SCAN.sub(replace, text)


def html_to_bracket(text: str) -> str:
    """Replace each exact-form page anchor in ``text`` with [PageName].

    Anchors with other attributes, quoting, targets or visible text are
    left untouched.
    """
    return HTML_LINK_PATTERN.sub(r"[\1]", text)


def extract_bracket_links(text: str) -> list[str]:
    """Return the page names bracket_to_html would link, in order."""
    return [m.group("name") for m in LINK_SCAN.finditer(text) if not _should_skip(m)]
