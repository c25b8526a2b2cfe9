"""Tests for configuration loading and logging setup."""

import json
import logging
import logging.handlers

import pytest

from utils import DEFAULT_CONFIG, load_config, merge_config, make_rng, setup_logging


class TestMergeConfig:
    def test_empty_override_gives_defaults(self):
        assert merge_config({}) == DEFAULT_CONFIG

    def test_nested_keys_are_merged(self):
        merged = merge_config({"carrom": {"body_count": 3}})
        assert merged["carrom"]["body_count"] == 3
        assert merged["carrom"]["friction"] == DEFAULT_CONFIG["carrom"]["friction"]

    def test_defaults_are_not_mutated(self):
        merged = merge_config({"life": {"resolution": 10}})
        merged["carrom"]["body_count"] = 99
        assert DEFAULT_CONFIG["life"]["resolution"] == 20
        assert DEFAULT_CONFIG["carrom"]["body_count"] == 20

    def test_custom_base(self):
        assert merge_config({"a": {"b": 2}}, base={"a": {"b": 1, "c": 3}}) == {"a": {"b": 2, "c": 3}}


class TestLoadConfig:
    def test_loads_and_fills_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"run_control": {"demo": "life"}}))

        config = load_config(str(path))

        assert config["run_control"]["demo"] == "life"
        assert config["life"] == DEFAULT_CONFIG["life"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.json"))

    def test_bad_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_config(str(path))

    def test_shipped_config_is_valid(self, project_root_path):
        config = load_config(str(project_root_path / "config.json"))
        assert config["run_control"]["demo"] in ("carrom", "life")


@pytest.fixture
def restore_root_logger():
    """Puts pytest's own handlers back after setup_logging replaces them."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_setup_logging_creates_log_file(tmp_path, restore_root_logger):
    root = restore_root_logger
    log_file = tmp_path / "logs" / "test.log"

    setup_logging({"logging": {"level": "debug", "log_file": str(log_file)}})
    logging.info("hello")
    for handler in root.handlers:
        handler.flush()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    text = log_file.read_text()
    assert "hello" in text
    # The startup line names the file it writes to.
    assert str(log_file) in text


def test_setup_logging_uses_configured_rotation(tmp_path, restore_root_logger):
    log_file = tmp_path / "sandbox.log"

    file_handler = setup_logging({"logging": {
        "log_file": str(log_file), "max_bytes": 2048, "backup_count": 2,
    }})

    assert isinstance(file_handler, logging.handlers.RotatingFileHandler)
    assert file_handler.maxBytes == 2048
    assert file_handler.backupCount == 2
    assert file_handler in restore_root_logger.handlers


def test_setup_logging_twice_does_not_stack_handlers(tmp_path, restore_root_logger):
    config = {"logging": {"log_file": str(tmp_path / "sandbox.log")}}

    setup_logging(config)
    setup_logging(config)

    assert len(restore_root_logger.handlers) == 2


def test_make_rng_is_seeded():
    assert make_rng(5).uniform() == make_rng(5).uniform()
