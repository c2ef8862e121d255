"""Tests for configuration loading."""

from pathlib import Path

from journalon.config import DATA_DIR, DEFAULT_STORE_URL, Config, load_config


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")

        assert config.store_url == DEFAULT_STORE_URL
        assert config.request_timeout is None
        assert config.data_path == DATA_DIR

    def test_parses_values(self, tmp_path):
        conf = tmp_path / "journalon.conf"
        conf.write_text(
            "# Journalon settings\n"
            "\n"
            'STORE_URL="https://store.example.org/" # self-hosted\n'
            "DATA_DIR=~/journals # local index\n"
            "REQUEST_TIMEOUT=10\n"
        )

        config = load_config(conf)

        assert config.store_url == "https://store.example.org"
        assert config.data_dir == "~/journals"
        assert config.data_path == Path.home() / "journals"
        assert config.request_timeout == 10.0

    def test_single_quotes(self, tmp_path):
        conf = tmp_path / "journalon.conf"
        conf.write_text("data_dir='/tmp/with # hash'\n")

        assert load_config(conf).data_dir == "/tmp/with # hash"

    def test_invalid_timeout_ignored(self, tmp_path):
        conf = tmp_path / "journalon.conf"
        conf.write_text("REQUEST_TIMEOUT=soon\n")

        assert load_config(conf).request_timeout is None

    def test_ignores_unknown_and_malformed_lines(self, tmp_path):
        conf = tmp_path / "journalon.conf"
        conf.write_text("no equals sign\nCOLOR=blue\n")

        assert load_config(conf) == Config()
