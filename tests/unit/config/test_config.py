# pyright: reportAny=false
from pathlib import Path

import pytest

from podrepo.config import (
    MASTER_REPO_URLS,
    Config,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from podrepo.exceptions import ConfigLoadError, ConfigValidationError


class TestConfigDefaults:
    def test_default_sections(self) -> None:
        config = Config.from_dict({})

        assert config.logging.level is LogLevel.INFO
        assert config.logging.format is LogFormat.JSON
        assert config.sources.repos_dir == "~/.cocoapods/repos"
        assert config.sources.protected_urls == MASTER_REPO_URLS
        assert config.lint.command == ""
        assert config.lint.timeout_ms == 600_000

    def test_repos_path_expands_home(self) -> None:
        config = Config.from_dict({})
        assert config.sources.repos_path == Path("~/.cocoapods/repos").expanduser()

    def test_constructor_without_data_uses_defaults(self) -> None:
        assert Config().get("sources.repos_dir") == "~/.cocoapods/repos"


class TestConfigFromDict:
    def test_overrides_merge_with_defaults(self) -> None:
        config = Config.from_dict({"lint": {"command": "pod spec lint"}})
        assert config.lint.command == "pod spec lint"
        assert config.lint.timeout_ms == 600_000

    def test_protected_urls_list_becomes_tuple(self) -> None:
        config = Config.from_dict({"sources": {"protected_urls": ["https://x/y.git"]}})
        assert config.sources.protected_urls == ("https://x/y.git",)

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ConfigValidationError) as exc:
            _ = Config.from_dict({"logging": {"level": "loud"}})
        assert exc.value.key == "logging.level"

    def test_non_positive_timeout_raises(self) -> None:
        with pytest.raises(ConfigValidationError, match="lint.timeout_ms"):
            _ = Config.from_dict({"lint": {"timeout_ms": 0}})

    def test_invalid_section_falls_back_without_validation(self) -> None:
        config = Config.from_dict({"logging": {"level": "loud"}}, validate=False)
        assert config.logging.level is LogLevel.INFO

    def test_unknown_keys_are_ignored(self) -> None:
        config = Config.from_dict({"sources": {"mirror": "x"}, "extra": {"a": 1}})
        assert config.get("extra.a") == 1
        assert config.sources.repos_dir == "~/.cocoapods/repos"


class TestConfigFromFile:
    def test_loads_valid_toml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        _ = path.write_text(
            """
[logging]
level = "debug"
format = "text"

[sources]
repos_dir = "/srv/repos"
"""
        )

        config = Config.from_file(path)

        assert config.logging.level is LogLevel.DEBUG
        assert config.logging.format is LogFormat.TEXT
        assert config.sources.repos_path == Path("/srv/repos")
        assert [s.name for s in config.config_sources] == [ConfigSourceName.USER]

    def test_raises_file_not_found_for_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            _ = Config.from_file(tmp_path / "missing.toml")

    def test_raises_config_load_error_for_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.toml"
        _ = path.write_text('[section\nkey = "unclosed bracket"\n')

        with pytest.raises(ConfigLoadError):
            _ = Config.from_file(path)

    def test_validation_error_names_the_file(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid_value.toml"
        _ = path.write_text('[logging]\nformat = "xml"\n')

        with pytest.raises(ConfigValidationError) as exc:
            _ = Config.from_file(path)

        assert exc.value.source == str(path)
        assert str(path) in str(exc.value)


class TestConfigLoad:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("PODREPO_LOGGING__LEVEL", "PODREPO_SOURCES__REPOS_DIR"):
            monkeypatch.delenv(name, raising=False)

    def test_precedence_cli_over_env_over_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "config.toml"
        _ = path.write_text(
            '[logging]\nlevel = "warning"\n[sources]\nrepos_dir = "/from/file"\n'
        )
        monkeypatch.setenv("PODREPO_SOURCES__REPOS_DIR", "/from/env")

        config = Config.load(
            user_config_path=path, cli_overrides={"logging": {"level": "debug"}}
        )

        assert config.logging.level is LogLevel.DEBUG
        assert config.sources.repos_dir == "/from/env"

    def test_file_value_used_without_overrides(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        _ = path.write_text('[logging]\nlevel = "warning"\n')

        config = Config.load(user_config_path=path, include_env=False)

        assert config.logging.level is LogLevel.WARNING

    def test_missing_user_file_is_skipped(self, tmp_path: Path) -> None:
        config = Config.load(user_config_path=tmp_path / "none.toml")
        assert config.sources.repos_dir == "~/.cocoapods/repos"

    def test_records_sources_highest_precedence_first(self, tmp_path: Path) -> None:
        config = Config.load(
            user_config_path=tmp_path / "none.toml",
            cli_overrides={"lint": {"command": "lint"}},
        )
        assert [s.name for s in config.config_sources] == [
            ConfigSourceName.CLI,
            ConfigSourceName.ENV,
            ConfigSourceName.USER,
            ConfigSourceName.DEFAULT,
        ]

    def test_invalid_env_value_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PODREPO_LOGGING__LEVEL", "loud")
        with pytest.raises(ConfigValidationError):
            _ = Config.load(user_config_path=tmp_path / "none.toml")


class TestConfigAccess:
    def test_get_dotted_key(self) -> None:
        config = Config.from_dict({})
        assert config.get("logging.level") == "info"

    def test_get_missing_key_returns_default(self) -> None:
        config = Config.from_dict({})
        assert config.get("nonexistent", "fallback") == "fallback"
        assert config.get("logging.level.deeper") is None

    def test_to_dict_is_a_copy(self) -> None:
        config = Config.from_dict({})
        data = config.to_dict()
        data["logging"]["level"] = "error"
        assert config.get("logging.level") == "info"

    def test_to_toml_renders_sections(self) -> None:
        text = Config.from_dict({"lint": {"command": "pod spec lint"}}).to_toml()
        assert "[lint]" in text
        assert 'command = "pod spec lint"' in text
