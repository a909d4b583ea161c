"""Tests for the key-value preference stores."""

import pytest

from abajiang.io import InMemoryPreferences, QSettingsPreferences


@pytest.fixture
def ini_path(tmp_path):
    return tmp_path / "prefs.ini"


@pytest.fixture(params=["memory", "qsettings"])
def preferences(request, ini_path):
    """Run the shared contract against both implementations."""
    if request.param == "memory":
        return InMemoryPreferences()
    return QSettingsPreferences("TranslatorAppPrefs", file_path=ini_path)


class TestPreferencesContract:

    def test_missing_key_is_none(self, preferences):
        assert preferences.get_string("background_uri") is None

    def test_put_then_get(self, preferences):
        preferences.put_string("background_uri", "file:///tmp/a.png")
        assert preferences.get_string("background_uri") == "file:///tmp/a.png"

    def test_last_write_wins(self, preferences):
        preferences.put_string("background_uri", "file:///tmp/a.png")
        preferences.put_string("background_uri", "file:///tmp/b.png")
        assert preferences.get_string("background_uri") == "file:///tmp/b.png"

    def test_remove(self, preferences):
        preferences.put_string("background_uri", "file:///tmp/a.png")
        preferences.remove("background_uri")
        assert preferences.get_string("background_uri") is None

    def test_remove_missing_key_does_not_raise(self, preferences):
        preferences.remove("background_uri")


class TestQSettingsPersistence:

    def test_value_survives_new_instance(self, ini_path):
        QSettingsPreferences("TranslatorAppPrefs", file_path=ini_path).put_string(
            "background_uri", "/photos/sky.jpg"
        )

        reopened = QSettingsPreferences("TranslatorAppPrefs", file_path=ini_path)
        assert reopened.get_string("background_uri") == "/photos/sky.jpg"

    def test_values_are_grouped_under_namespace(self, ini_path):
        QSettingsPreferences("TranslatorAppPrefs", file_path=ini_path).put_string(
            "background_uri", "/photos/sky.jpg"
        )

        content = ini_path.read_text(encoding="utf-8")
        assert "[TranslatorAppPrefs]" in content
        assert "background_uri" in content

    def test_namespaces_are_isolated(self, ini_path):
        QSettingsPreferences("TranslatorAppPrefs", file_path=ini_path).put_string(
            "background_uri", "/photos/sky.jpg"
        )

        other = QSettingsPreferences("OtherPrefs", file_path=ini_path)
        assert other.get_string("background_uri") is None
