import pytest

from akari_editor.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")


def test_presets_are_named() -> None:
    assert sorted(telemetry.PRESETS) == ["development", "performance", "production"]
