"""Unit tests for TOML configuration loading."""

import pytest

from weekfares.config import CONFIG_ENV_VAR, Config, load_config
from weekfares.exceptions import ConfigError
from weekfares.fanout import DEFAULT_CONCURRENCY_LIMIT


class TestLoadConfig:
    def test_defaults_without_file(self, monkeypatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        config = load_config()
        assert config == Config()
        assert config.concurrency_limit == DEFAULT_CONCURRENCY_LIMIT == 25

    def test_missing_file_uses_defaults(self, tmp_path) -> None:
        assert load_config(tmp_path / "absent.toml") == Config()

    def test_reads_table(self, tmp_path) -> None:
        path = tmp_path / "weekfares.toml"
        path.write_text(
            "[weekfares]\n"
            "timeout = 2.5\n"
            "concurrency_limit = 4\n"
            "usd = true\n"
            "unknown = 'ignored'\n"
        )

        config = load_config(path)

        assert config.timeout == 2.5
        assert config.concurrency_limit == 4
        assert config.usd is True
        assert config.base_url == Config().base_url

    def test_env_var(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "env.toml"
        path.write_text("[weekfares]\nconcurrency_limit = 7\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_config().concurrency_limit == 7

    def test_invalid_toml(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[weekfares\n")
        with pytest.raises(ConfigError):
            load_config(path)

    @pytest.mark.parametrize("line", ["concurrency_limit = 0", "timeout = -1", "usd = 'yes'", "concurrency_limit = 2.5"])
    def test_invalid_values(self, tmp_path, line) -> None:
        path = tmp_path / "bad.toml"
        path.write_text(f"[weekfares]\n{line}\n")
        with pytest.raises(ConfigError):
            load_config(path)
