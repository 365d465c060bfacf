"""Config settings – 12-factor env-based configuration."""
from mp_search.config.settings.base import Settings
from mp_search.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_search.config.settings.search import MAX_FACET_PAGE_SIZE, SearchSettings

__all__ = ["MAX_FACET_PAGE_SIZE", "EnvSettingsLoader", "SearchSettings", "Settings", "SettingsLoader"]
