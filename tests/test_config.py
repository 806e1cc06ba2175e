import importlib

import backend.config as config


def _reload(monkeypatch, **env):
    for key in ("HOST", "PORT", "SEED_ARTICLES", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    # Keep a stray .env from leaking into the assertions
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **kw: False)
    return importlib.reload(config)


class TestConfig:
    def test_defaults(self, monkeypatch):
        cfg = _reload(monkeypatch)
        assert cfg.HOST == "0.0.0.0"
        assert cfg.PORT == 8080
        assert cfg.SEED_ARTICLES is True
        assert cfg.LOG_LEVEL == "INFO"
        assert cfg.CORS_ORIGINS == ["*"]

    def test_overrides(self, monkeypatch):
        cfg = _reload(
            monkeypatch,
            HOST="127.0.0.1",
            PORT="9000",
            SEED_ARTICLES="false",
            LOG_LEVEL="debug",
            CORS_ORIGINS="http://a.test, http://b.test",
        )
        assert cfg.HOST == "127.0.0.1"
        assert cfg.PORT == 9000
        assert cfg.SEED_ARTICLES is False
        assert cfg.LOG_LEVEL == "DEBUG"
        assert cfg.CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def teardown_method(self):
        importlib.reload(config)
