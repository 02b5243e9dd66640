from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncEngine

from core.exceptions import handle_exception
from wiki.handlers.pages import router as pages_router
from wiki.services.page import PageStore
from wiki.utils.templating import templates as default_templates


def create_app(
    engine: Optional[AsyncEngine] = None,
    templates: Optional[Jinja2Templates] = None,
) -> FastAPI:
    """Build the wiki application around its own page store"""
    if engine is None:
        from core.db import engine

    store = PageStore(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Handlers must not run before the table exists
        try:
            await store.ensure_schema()
        except Exception as e:
            handle_exception(e, "Database preparation error", source="startup")
            raise

        yield  # Application runs here until shutdown

        await store.dispose()

    app = FastAPI(lifespan=lifespan, openapi_url=None)
    app.state.page_store = store
    app.state.templates = templates or default_templates
    app.include_router(pages_router)
    return app


app = create_app()
