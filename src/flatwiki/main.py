"""FlatWiki FastAPI application."""

import logging
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from flatwiki.config import Settings, settings as default_settings
from flatwiki.core.errors import (
    InvalidTitleError,
    PageNotFoundError,
    PageSaveError,
    TemplateRenderError,
)
from flatwiki.core.models import Page, validate_title
from flatwiki.core.renderer import render_page_body
from flatwiki.core.storage import FileStorage, Storage
from flatwiki.core.templates import TemplateRegistry

logger = logging.getLogger(__name__)


def get_storage(request: Request) -> Storage:
    """Page store configured for this application."""
    return request.app.state.storage


def get_templates(request: Request) -> TemplateRegistry:
    """Template registry configured for this application."""
    return request.app.state.templates


def valid_title(title: str) -> str:
    """Path parameter check: titles must match [A-Za-z0-9]+."""
    return validate_title(title)


Title = Annotated[str, Depends(valid_title)]
StorageDep = Annotated[Storage, Depends(get_storage)]
TemplatesDep = Annotated[TemplateRegistry, Depends(get_templates)]


async def invalid_title_handler(request: Request, exc: InvalidTitleError):
    logger.debug("Rejected %s: %s", request.url.path, exc)
    return PlainTextResponse("404 page not found", status_code=404)


async def template_error_handler(request: Request, exc: TemplateRenderError):
    return PlainTextResponse(str(exc), status_code=500)


async def front_page(request: Request):
    """Redirect / to the front page."""
    return RedirectResponse(
        url=f"/view/{request.app.state.settings.front_page}", status_code=302
    )


async def view_page(
    request: Request, title: Title, storage: StorageDep, templates: TemplatesDep
):
    """View a wiki page."""
    try:
        page = await storage.load_page(title)
    except PageNotFoundError:
        # Page doesn't exist - redirect to edit to create it
        return RedirectResponse(url=f"/edit/{title}", status_code=302)

    return templates.render(
        request, "view", page=page, body_html=render_page_body(page)
    )


async def edit_page(
    request: Request, title: Title, storage: StorageDep, templates: TemplatesDep
):
    """Edit page form, empty for a new page."""
    try:
        page = await storage.load_page(title)
    except PageNotFoundError:
        page = Page(title=title)

    return templates.render(request, "edit", page=page)


async def save_page(title: Title, storage: StorageDep, body: str = Form("")):
    """Save page content and redirect to the view."""
    page = Page(title=title, body=body.encode("utf-8"))
    try:
        await storage.save_page(page.title, page.body)
    except PageSaveError as e:
        return PlainTextResponse(str(e), status_code=500)

    return RedirectResponse(url=f"/view/{title}", status_code=302)


def create_app(
    settings: Settings | None = None,
    storage: Storage | None = None,
    templates: TemplateRegistry | None = None,
) -> FastAPI:
    """Build the wiki application from explicit collaborators.

    Anything not given is built from ``settings``.
    """
    settings = settings or default_settings
    if storage is None:
        storage = FileStorage(
            settings.data_dir,
            dir_mode=settings.dir_mode,
            file_mode=settings.file_mode,
        )
    if templates is None:
        templates = TemplateRegistry(settings.templates_dir, app_title=settings.app_title)

    app = FastAPI(title=settings.app_title, debug=settings.debug)
    app.state.settings = settings
    app.state.storage = storage
    app.state.templates = templates

    app.add_exception_handler(InvalidTitleError, invalid_title_handler)
    app.add_exception_handler(TemplateRenderError, template_error_handler)

    app.add_api_route("/", front_page, methods=["GET"])
    app.add_api_route(
        "/view/{title}", view_page, methods=["GET"], response_class=HTMLResponse
    )
    app.add_api_route(
        "/edit/{title}", edit_page, methods=["GET"], response_class=HTMLResponse
    )
    app.add_api_route("/save/{title}", save_page, methods=["POST"])
    return app


app = create_app()


def run() -> None:
    """Serve the wiki with uvicorn."""
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level,
    )


if __name__ == "__main__":
    run()
