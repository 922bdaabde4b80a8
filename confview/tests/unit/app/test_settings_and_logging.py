from __future__ import annotations

import logging

import pytest

from confview.app.main import main
from confview.app.settings import ClientSettings, load_settings, settings_to_dict
from confview.utils import logging as logging_utils


def test_load_settings_defaults():
    assert load_settings(env={}) == ClientSettings()


def test_load_settings_coerces_flat_keys():
    settings = load_settings(
        {"log_level": "debug", "debug_logging": "yes", "audio_route_picker": False},
        env={},
    )

    assert settings.log_level == "DEBUG"
    assert settings.debug_logging is True
    assert settings.audio_route_picker == "off"
    assert settings_to_dict(settings) == {
        "log_level": "DEBUG",
        "debug_logging": True,
        "audio_route_picker": "off",
    }


def test_load_settings_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unsupported settings keys"):
        load_settings({"theme": "dark"}, env={})


@pytest.mark.parametrize("payload", [{"log_level": "LOUD"}, {"audio_route_picker": "maybe"}, ["log_level"]])
def test_load_settings_rejects_bad_values(payload):
    with pytest.raises(ValueError):
        load_settings(payload, env={})


def test_env_overrides_picker_mode():
    settings = load_settings({"audio_route_picker": "auto"}, env={"CONFVIEW_AUDIO_ROUTE_PICKER": "off"})

    assert settings.audio_route_picker == "off"


def test_env_overrides_log_level_and_debug():
    settings = load_settings(
        {"log_level": "ERROR"},
        env={"CONFVIEW_LOG_LEVEL": "warning", "CONFVIEW_DEBUG": "1"},
    )

    assert settings.log_level == "WARNING"
    assert settings.debug_logging is True


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield root
    root.setLevel(previous)


def test_configure_logging_applies_configured_level(restore_root_level):
    settings = load_settings({"log_level": "WARNING"}, env={})

    assert logging_utils.configure_logging(settings) == logging.WARNING
    assert restore_root_level.level == logging.WARNING


def test_configure_logging_debug_flag_wins(restore_root_level):
    settings = ClientSettings(log_level="ERROR", debug_logging=True)

    assert logging_utils.configure_logging(settings) == logging.DEBUG
    assert restore_root_level.level == logging.DEBUG


def test_main_keeps_configured_log_level(restore_root_level):
    main(load_settings({"log_level": "WARNING", "audio_route_picker": "off"}, env={}))

    assert restore_root_level.level == logging.WARNING


@pytest.mark.parametrize(
    ("value", "expected"),
    [("info", logging.INFO), ("WARN", logging.WARNING), ("15", 15), ("", logging.ERROR), ("LOUD", logging.ERROR)],
)
def test_coerce_level(value, expected):
    assert logging_utils.coerce_level(value, logging.ERROR) == expected
