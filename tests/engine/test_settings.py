from __future__ import annotations

import json

from engine.configs.settings import Settings


def test_load_applies_known_keys_and_ignores_unknown(tmp_path) -> None:
    config_file = tmp_path / "settings" / "user_settings.json"
    config_file.parent.mkdir()
    config_file.write_text(
        json.dumps({"LOG_LEVEL": "DEBUG", "PHOTO_THUMBNAIL_SIZE": 96, "OBSOLETE_KEY": 1}),
        encoding="utf-8",
    )
    settings = Settings()
    settings.set_config_path(tmp_path)

    settings.load()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.PHOTO_THUMBNAIL_SIZE == 96
    assert not hasattr(settings, "OBSOLETE_KEY")


def test_environment_overrides_file_values(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GROUND_TOAST_POPUP_ENABLED", "false")
    monkeypatch.setenv("GROUND_TOAST_DURATION_MS", "500")
    settings = Settings()
    settings.set_config_path(tmp_path)

    settings.load()

    assert settings.TOAST_POPUP_ENABLED is False
    assert settings.TOAST_DURATION_MS == 500


def test_save_then_load_in_fresh_instance(tmp_path) -> None:
    settings = Settings()
    settings.set_config_path(tmp_path)
    settings.LOG_LEVEL = "WARNING"
    settings.save()

    reloaded = Settings()
    reloaded.set_config_path(tmp_path)
    reloaded.load()

    assert reloaded.LOG_LEVEL == "WARNING"
    reloaded.reset()
    assert reloaded.LOG_LEVEL == "INFO"
