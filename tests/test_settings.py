import logging

from todomvc import logging_setup
from todomvc.settings import get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("APP_HOST", "APP_PORT", "LOG_LEVEL", "LOG_FILE", "CORS_ALLOW_ORIGINS"):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.log_level == logging.INFO
        assert settings.log_file is None
        assert settings.cors_allow_origins == ["*"]

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("APP_HOST", "0.0.0.0")
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")

        settings = get_settings()

        assert settings.host == "0.0.0.0"
        assert settings.port == 9000
        assert settings.log_level == logging.DEBUG
        assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("APP_PORT", "not-a-port")
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        settings = get_settings()
        assert settings.port == 8080
        assert settings.log_level == logging.INFO

        monkeypatch.setenv("APP_PORT", "70000")
        assert get_settings().port == 8080


class TestLoggingSetup:
    def test_setup_is_idempotent_and_writes_file(self, tmp_path, monkeypatch):
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level
        monkeypatch.setattr(root, "_todomvc_logging_configured", False, raising=False)
        log_file = tmp_path / "logs" / "todomvc.log"

        try:
            logging_setup.setup_logging(logging.INFO, str(log_file))
            handlers = list(root.handlers)
            logging_setup.setup_logging(logging.WARNING, str(log_file))

            assert root.handlers == handlers
            assert len(handlers) == 2
            assert all(h.level == logging.WARNING for h in handlers)

            logging.getLogger("todomvc.test").warning("hello log")
            for h in handlers:
                h.flush()
            assert "hello log" in log_file.read_text()
        finally:
            for h in root.handlers:
                h.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
