from wiki.handlers.pages import router
from wiki.services.page import EMPTY_PAGE_MARKDOWN, PageStore


__all__ = [
    "router",
    "PageStore",
    "EMPTY_PAGE_MARKDOWN",
]
