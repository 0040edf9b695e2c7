import pytest

from akari_editor.config import (
    EditorSettings,
    load_settings,
    load_telemetry_settings,
)
from akari_editor.errors import ConfigError


def test_defaults_without_environment() -> None:
    assert load_settings({}) == EditorSettings()


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "AKARI_EDITOR_HISTORY_LIMIT": "10",
            "AKARI_EDITOR_INDENT_WIDTH": "4",
            "AKARI_EDITOR_LOCALE": "EN",
            "AKARI_EDITOR_VIEW_MODE": "Editor",
            "AKARI_EDITOR_DARK": "off",
        }
    )

    assert settings.history_limit == 10
    assert settings.indent_unit == "    "
    assert settings.locale == "en"
    assert settings.view_mode == "editor"
    assert settings.dark is False


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AKARI_EDITOR_PREVIEW_DELAY_MS", "0")

    assert load_settings().preview_delay_ms == 0


@pytest.mark.parametrize(
    "name,value",
    [
        ("AKARI_EDITOR_HISTORY_LIMIT", "many"),
        ("AKARI_EDITOR_HISTORY_LIMIT", "0"),
        ("AKARI_EDITOR_VIEW_MODE", "tabs"),
        ("AKARI_EDITOR_DARK", "maybe"),
    ],
)
def test_invalid_values_raise(name: str, value: str) -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_settings({name: value})

    assert excinfo.value.name == name


def test_telemetry_console_switch() -> None:
    quiet = load_telemetry_settings({"AKARI_EDITOR_DISABLE_CONSOLE": "1"})
    loud = load_telemetry_settings({"AKARI_EDITOR_LOG_LEVEL": "debug"})

    assert quiet.console is False
    assert quiet.colored is False
    assert loud.console is True
    assert loud.level == "DEBUG"
