from datetime import time

from clinic.config import Settings
from clinic.main import build_manager


def test_settings_defaults():
    s = Settings()
    assert s.OPENING_TIME == time(8, 0)
    assert s.CLOSING_TIME == time(19, 0)
    assert s.CASCADE_ON_REMOVE is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("CLOSING_TIME", "17:30")
    monkeypatch.setenv("CASCADE_ON_REMOVE", "true")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")
    s = Settings()
    assert s.CLOSING_TIME == time(17, 30)
    assert s.allowed_origins_list == ["http://a.test", "http://b.test"]

    manager = build_manager(s)
    assert manager.closing_time == time(17, 30)
    assert manager.cascade_on_remove is True


def test_runner_uses_cached_module_settings():
    import clinic.main
    from clinic.config import get_settings

    assert clinic.main.settings is get_settings()
