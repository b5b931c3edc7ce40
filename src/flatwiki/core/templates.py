"""Template registry for the page views."""

import logging
from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from flatwiki.core.errors import TemplateRenderError

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """The fixed set of page templates, loaded once per application.

    Templates are looked up by short name (``view``, ``edit``) and map to
    ``<name>.html`` inside ``directory``.
    """

    names: tuple[str, ...] = ("view", "edit")

    def __init__(self, directory: Path, **globals_):
        self._templates = Jinja2Templates(directory=str(directory))
        self._templates.env.globals.update(globals_)
        # Fail at startup rather than on first request
        self._files = {
            name: self._templates.get_template(f"{name}.html").name
            for name in self.names
        }

    def render(self, request: Request, name: str, **context) -> HTMLResponse:
        """Render template ``name`` to a response.

        Raises KeyError for an unknown name and TemplateRenderError if
        Jinja2 fails while rendering.
        """
        filename = self._files[name]
        try:
            return self._templates.TemplateResponse(request, filename, context)
        except TemplateError as e:
            logger.exception("Error rendering template %s", filename)
            raise TemplateRenderError(str(e)) from e
