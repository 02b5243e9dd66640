from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from core import logging
from model.page import Page


EMPTY_PAGE_MARKDOWN = "# A new page\n\nFeel free to write in Markdown!\n"


class PageStore:
    """Persistence of wiki pages over a pooled async engine.

    Every call checks one connection out of the pool through its own
    session and gives it back when the ``async with`` block exits,
    whether the statement succeeded or raised.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    def _session(self) -> AsyncSession:
        return AsyncSession(self.engine, expire_on_commit=False)

    async def ensure_schema(self):
        """Create the pages table if it does not exist yet"""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logging.info("Database schema ready")

    async def list_names(self) -> List[str]:
        """Get all page names, unordered"""
        async with self._session() as session:
            result = await session.exec(select(Page.name))
            return list(result.all())

    async def get_by_name(self, name: str) -> Optional[Page]:
        async with self._session() as session:
            result = await session.exec(select(Page).where(Page.name == name))
            return result.first()

    async def insert(self, name: str, content: str) -> int:
        """Insert a page and return its id; a taken name raises IntegrityError"""
        async with self._session() as session:
            page = Page(name=name, content=content)
            session.add(page)
            await session.commit()
            logging.info(f"Page created: {name} (id={page.id})")
            return page.id

    async def update(self, page_id: int, content: str) -> bool:
        """Replace the content of a page, return False if no such page"""
        async with self._session() as session:
            page = await session.get(Page, page_id)
            if page is None:
                logging.warning(f"Update skipped, no page with id={page_id}")
                return False

            page.content = content
            session.add(page)
            await session.commit()
            logging.info(f"Page updated: {page.name} (id={page_id})")
            return True

    async def delete(self, page_id: int) -> bool:
        """Delete a page, return False if no such page"""
        async with self._session() as session:
            page = await session.get(Page, page_id)
            if page is None:
                logging.warning(f"Delete skipped, no page with id={page_id}")
                return False

            await session.delete(page)
            await session.commit()
            logging.info(f"Page deleted: {page.name} (id={page_id})")
            return True

    async def dispose(self):
        await self.engine.dispose()
