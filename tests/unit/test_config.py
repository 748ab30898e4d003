from user_registry.core.config import Settings


def test_settings_defaults(monkeypatch):
    for name in ("APP_TITLE", "APP_VERSION", "LOG_LEVEL", "STORE_THREAD_SAFE", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.app_title == "User Registry API"
    assert settings.log_level == "INFO"
    assert settings.store_thread_safe is True
    assert settings.cors_allow_origins == ["*"]


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("STORE_THREAD_SAFE", "0")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.store_thread_safe is False
    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
