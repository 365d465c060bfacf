"""Config settings – SearchSettings for the response mapper."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_search.config.settings.base import Settings
from mp_search.config.validation import InvalidSettingValueError

MAX_FACET_PAGE_SIZE = 1000


@dataclasses.dataclass
class SearchSettings(Settings):
    """Defaults applied when facet options are built without explicit values.

    Loaded from ``MP_SEARCH_FACET_PAGE_SIZE``, ``MP_SEARCH_FACET_MIN_COUNT``
    and ``MP_SEARCH_LOG_LEVEL``.
    """

    _prefix: ClassVar[str] = "MP_SEARCH"

    facet_page_size: int = 10
    facet_min_count: int = 1
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not 1 <= self.facet_page_size <= MAX_FACET_PAGE_SIZE:
            raise InvalidSettingValueError(
                "facet_page_size", self.facet_page_size, f"must be between 1 and {MAX_FACET_PAGE_SIZE}"
            )
        if self.facet_min_count < 0:
            raise InvalidSettingValueError("facet_min_count", self.facet_min_count, "must be >= 0")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["MAX_FACET_PAGE_SIZE", "SearchSettings"]
