"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field, fields
from typing import ClassVar

import pytest

from mp_search.application.search import FacetOptions, FacetSort, Field
from mp_search.config.settings import EnvSettingsLoader, SearchSettings, Settings
from mp_search.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


_SEARCH_KEYS = ("MP_SEARCH_FACET_PAGE_SIZE", "MP_SEARCH_FACET_MIN_COUNT", "MP_SEARCH_LOG_LEVEL")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in _SEARCH_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000

    def test_loads_bool_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            settings = EnvSettingsLoader().load(AppSettings)
            assert settings.debug is True

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com,http://b.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_unparsable_int_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(ConfigError, match="APP_PORT"):
            EnvSettingsLoader().load(AppSettings)

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import dataclasses

        @dataclass
        class StrictSettings(Settings):
            _prefix: ClassVar[str] = "STRICT"
            required_field: str = dataclasses.field()

        monkeypatch.delenv("STRICT_REQUIRED_FIELD", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(StrictSettings)
        assert "STRICT_REQUIRED_FIELD" in str(exc_info.value)


# ---------------------------------------------------------------------------
# SearchSettings
# ---------------------------------------------------------------------------


class TestSearchSettings:
    def test_env_key(self) -> None:
        assert SearchSettings.env_key("facet_page_size") == "MP_SEARCH_FACET_PAGE_SIZE"
        assert AppSettings.env_key("host") == "APP_HOST"

    def test_as_dict(self) -> None:
        assert SearchSettings().as_dict() == {"facet_page_size": 10, "facet_min_count": 1, "log_level": "INFO"}

    def test_prefix_is_not_a_field(self, clean_env: pytest.MonkeyPatch) -> None:
        assert [f.name for f in fields(SearchSettings)] == ["facet_page_size", "facet_min_count", "log_level"]
        assert SearchSettings(25).facet_page_size == 25
        assert SearchSettings._prefix == "MP_SEARCH"
        clean_env.setenv("MP_SEARCH__PREFIX", "OTHER")
        assert EnvSettingsLoader().load(SearchSettings)._prefix == "MP_SEARCH"

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = EnvSettingsLoader().load(SearchSettings)
        assert settings.facet_page_size == 10
        assert settings.facet_min_count == 1
        assert settings.log_level == "INFO"

    def test_env_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MP_SEARCH_FACET_PAGE_SIZE", "50")
        clean_env.setenv("MP_SEARCH_FACET_MIN_COUNT", "0")
        clean_env.setenv("MP_SEARCH_LOG_LEVEL", "debug")
        settings = EnvSettingsLoader().load(SearchSettings)
        assert settings.facet_page_size == 50
        assert settings.facet_min_count == 0
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == 10

    def test_page_size_out_of_range(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MP_SEARCH_FACET_PAGE_SIZE", "0")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(SearchSettings)
        assert exc_info.value.setting_name == "facet_page_size"

    def test_negative_min_count(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SearchSettings(facet_min_count=-1)

    def test_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="log_level"):
            SearchSettings(log_level="chatty")

    def test_facet_options_from_settings(self) -> None:
        settings = SearchSettings(facet_page_size=25, facet_min_count=3)
        options = FacetOptions.from_settings(settings, fields=("category",), page=2, sort=FacetSort.INDEX)
        assert options.fields == (Field("category"),)
        assert options.page_request.size == 25
        assert options.page_request.page == 2
        assert options.min_count == 3
        assert options.sort is FacetSort.INDEX


# ---------------------------------------------------------------------------
# ConfigErrors
# ---------------------------------------------------------------------------


class TestConfigErrors:
    def test_missing_required_setting_stores_name(self) -> None:
        err = MissingRequiredSettingError("MP_SEARCH_URL")
        assert err.setting_name == "MP_SEARCH_URL"
        assert "MP_SEARCH_URL" in str(err)

    def test_invalid_value_stores_reason(self) -> None:
        err = InvalidSettingValueError("facet_page_size", 0, "too small")
        assert err.value == 0
        assert err.reason == "too small"
        assert err.code == "invalid_setting_value"

    def test_is_config_error(self) -> None:
        assert isinstance(MissingRequiredSettingError("X"), ConfigError)

    def test_detail_is_structured(self) -> None:
        err = InvalidSettingValueError("facet_page_size", 0, "too small")
        assert err.to_dict()["detail"] == {"setting": "facet_page_size", "value": 0, "reason": "too small"}
        assert MissingRequiredSettingError("X").detail == {"setting": "X"}
