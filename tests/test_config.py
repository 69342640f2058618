"""Tests for configuration loading."""

from chalbot import create_app
from chalbot.config import DEFAULT_API_BASE, load_config, missing_keys


def test_load_config_reads_environment():
    config = load_config({
        "DISCORD_APPLICATION_ID": "1",
        "DISCORD_TOKEN": "t",
        "DISCORD_PUBLIC_KEY": "ab",
    })
    assert config["DISCORD_APPLICATION_ID"] == "1"
    assert config["DISCORD_TOKEN"] == "t"
    assert config["DISCORD_PUBLIC_KEY"] == "ab"
    assert config["DISCORD_API_BASE"] == DEFAULT_API_BASE
    assert config["LOG_LEVEL"] == "INFO"
    assert missing_keys(config) == []


def test_missing_keys():
    config = load_config({"DISCORD_TOKEN": "t"})
    assert missing_keys(config) == ["DISCORD_APPLICATION_ID", "DISCORD_PUBLIC_KEY"]


def test_create_app_applies_overrides(monkeypatch):
    monkeypatch.setenv("DISCORD_TOKEN", "from-env")
    app = create_app({"DISCORD_PUBLIC_KEY": "override"})
    assert app.config["DISCORD_TOKEN"] == "from-env"
    assert app.config["DISCORD_PUBLIC_KEY"] == "override"
