import pytest

from change_highlight.config import (
    DEFAULT_TARGET_COMMANDS,
    HighlightSettings,
    HighlightStyle,
    SettingsError,
)


def test_defaults() -> None:
    settings = HighlightSettings()

    assert {"undo", "redo", "undo-only", "undo-redo"} <= settings.target_commands
    assert settings.minimum_edit_size == 2
    assert settings.flash_duration == pytest.approx(0.02)
    assert settings.delete_style.name == "delete"
    assert settings.insert_style.name == "insert"


def test_target_commands_are_frozen() -> None:
    settings = HighlightSettings(target_commands=["undo", "vundo"])

    assert settings.target_commands == frozenset({"undo", "vundo"})


def test_from_env_reads_prefixed_values() -> None:
    settings = HighlightSettings.from_env(
        {
            "CHANGE_HIGHLIGHT_TARGET_COMMANDS": "undo, vundo ,,",
            "CHANGE_HIGHLIGHT_MIN_EDIT_SIZE": "4",
            "CHANGE_HIGHLIGHT_FLASH_DURATION": "0.01",
            "CHANGE_HIGHLIGHT_FADE_DURATION": "1.5",
        }
    )

    assert settings.target_commands == frozenset({"undo", "vundo"})
    assert settings.minimum_edit_size == 4
    assert settings.flash_duration == pytest.approx(0.01)
    assert settings.fade_duration == pytest.approx(1.5)


def test_from_env_defaults_when_unset() -> None:
    settings = HighlightSettings.from_env({})

    assert settings.target_commands == DEFAULT_TARGET_COMMANDS
    assert settings == HighlightSettings()


@pytest.mark.parametrize(
    ("key", "value", "setting"),
    [
        ("CHANGE_HIGHLIGHT_MIN_EDIT_SIZE", "two", "minimum_edit_size"),
        ("CHANGE_HIGHLIGHT_MIN_EDIT_SIZE", "-1", "minimum_edit_size"),
        ("CHANGE_HIGHLIGHT_FLASH_DURATION", "soon", "flash_duration"),
        ("CHANGE_HIGHLIGHT_FLASH_DURATION", "inf", "flash_duration"),
        ("CHANGE_HIGHLIGHT_FLASH_DURATION", "nan", "flash_duration"),
        ("CHANGE_HIGHLIGHT_FADE_DURATION", "inf", "fade_duration"),
        ("CHANGE_HIGHLIGHT_FADE_DURATION", "-inf", "fade_duration"),
        ("CHANGE_HIGHLIGHT_TARGET_COMMANDS", " , ", "target_commands"),
    ],
)
def test_from_env_rejects_bad_values(key: str, value: str, setting: str) -> None:
    with pytest.raises(SettingsError) as info:
        HighlightSettings.from_env({key: value})

    assert info.value.setting == setting


def test_with_overrides_validates() -> None:
    settings = HighlightSettings()

    assert settings.with_overrides(flash_duration=0.03).flash_duration == pytest.approx(
        0.03
    )
    with pytest.raises(SettingsError):
        settings.with_overrides(flash_duration=-0.1)


def test_style_renders_rich_markup() -> None:
    style = HighlightStyle("x", foreground="white", background="red", bold=True)

    assert style.rich_style == "bold white on red"
    assert HighlightStyle("plain").rich_style == "none"
