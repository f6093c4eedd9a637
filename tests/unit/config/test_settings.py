"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from xunscout.config.settings import Settings, XunsearchSettings


class TestSettingsDefaults:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.xunsearch.fuzzy is False
        assert settings.xunsearch.hosts.index == "127.0.0.1:8383"
        assert settings.xunsearch.hosts.search == "127.0.0.1:8384"
        assert settings.xunsearch.per_page == 15
        assert settings.xunsearch.client_factory is None
        assert settings.observability.log_level == "info"

    def test_invalid_factory_path(self) -> None:
        with pytest.raises(ValidationError, match="package.module:callable"):
            XunsearchSettings(client_factory="not_a_path")

    def test_per_page_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            XunsearchSettings(per_page=0)


class TestSettingsEnvironment:
    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XUNSCOUT_XUNSEARCH__FUZZY", "true")
        monkeypatch.setenv("XUNSCOUT_XUNSEARCH__HOSTS__INDEX", "search.internal:8383")
        monkeypatch.setenv("XUNSCOUT_XUNSEARCH__CLIENT_FACTORY", "myapp.xs:connect")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.xunsearch.fuzzy is True
        assert s.xunsearch.hosts.index == "search.internal:8383"
        assert s.xunsearch.hosts.search == "127.0.0.1:8384"
        assert s.xunsearch.client_factory == "myapp.xs:connect"


class TestSettingsYaml:
    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "xunscout.yaml"
        config.write_text(
            "xunsearch:\n"
            "  fuzzy: true\n"
            "  per_page: 30\n"
            "  hosts:\n"
            "    index: 8383\n"
            "    search: 10.1.1.1:8384\n"
            "observability:\n"
            "  log_format: console\n"
        )

        s = Settings.from_yaml(config)

        assert s.xunsearch.fuzzy is True
        assert s.xunsearch.per_page == 30
        assert s.xunsearch.hosts.index == "8383"
        assert s.xunsearch.hosts.search == "10.1.1.1:8384"
        assert s.observability.log_format == "console"

    def test_empty_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert Settings.from_yaml(config).xunsearch.fuzzy is False

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "missing.yaml")
