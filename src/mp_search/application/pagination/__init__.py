"""Application pagination – page primitives."""
from mp_search.application.pagination.page_request import MAX_PAGE_SIZE, PageRequest
from mp_search.application.pagination.page import Page

__all__ = ["MAX_PAGE_SIZE", "Page", "PageRequest"]
