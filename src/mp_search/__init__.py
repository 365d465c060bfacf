"""
mp_search – typed conversion of full-text search engine responses.

Import path convention::

    from mp_search.kernel.errors import IdentifierNotFoundError
    from mp_search.application.search import ResponseMapper, SearchQuery
    from mp_search.application.pagination import Page, PageRequest
    from mp_search.config.settings import EnvSettingsLoader, SearchSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
