from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from core.exceptions import handle_exception
from core.utils import current_timestamp, render_markdown
from wiki.services.page import EMPTY_PAGE_MARKDOWN, PageStore


router = APIRouter()


def get_page_store(request: Request) -> PageStore:
    return request.app.state.page_store


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def server_error(e: Exception, message: str) -> Response:
    """Log the failure and answer an opaque 500"""
    handle_exception(e, message, source="web")
    return HTMLResponse(content="Internal Server Error", status_code=500)


def page_location(name: str) -> str:
    # Names may hold "#", "?" or "%"
    return "/wiki/" + quote(name, safe="")


def see_other(location: str) -> RedirectResponse:
    return RedirectResponse(url=location, status_code=303)


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    store: PageStore = Depends(get_page_store),
    templates: Jinja2Templates = Depends(get_templates),
):
    """List every page, sorted by name"""
    try:
        pages = sorted(await store.list_names())
        return templates.TemplateResponse(
            request, "index.html", {"title": "Wiki home", "pages": pages}
        )
    except Exception as e:
        return server_error(e, "Failed to render index")


@router.get("/wiki/{name}", response_class=HTMLResponse)
async def show_page(
    request: Request,
    name: str,
    store: PageStore = Depends(get_page_store),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Show a page with its editor; an unknown name opens a draft"""
    try:
        page = await store.get_by_name(name)
        raw_content = page.content if page else EMPTY_PAGE_MARKDOWN

        context = {
            "title": name,
            "page_id": page.id if page else "",
            "new_page": page is None,
            "raw_content": raw_content,
            "content": render_markdown(raw_content),
            "timestamp": current_timestamp(),
        }
        return templates.TemplateResponse(request, "page.html", context)
    except Exception as e:
        return server_error(e, f"Failed to render page {name!r}")


@router.post("/create")
async def create_page(name: str = Form("")):
    """Send the client to the editor of the named page"""
    return see_other(page_location(name) if name else "/")


@router.post("/save")
async def save_page(
    page_id: str = Form("", alias="id"),
    title: str = Form(""),
    markdown: str = Form(""),
    new_page: str = Form("", alias="newPage"),
    store: PageStore = Depends(get_page_store),
):
    try:
        if new_page == "yes":
            await store.insert(title, markdown)
        else:
            await store.update(int(page_id), markdown)
    except Exception as e:
        return server_error(e, f"Failed to save page {title!r}")

    return see_other(page_location(title))


@router.post("/delete")
async def delete_page(
    page_id: str = Form("", alias="id"),
    store: PageStore = Depends(get_page_store),
):
    try:
        await store.delete(int(page_id))
    except Exception as e:
        return server_error(e, f"Failed to delete page id={page_id!r}")

    return see_other("/")
