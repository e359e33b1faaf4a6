"""Settings precedence: env > config/starhop.toml > config/starhop.example.toml > defaults."""

from starhop.config.settings import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Settings


def _write(root, name, text):
    cfg = root / "config"
    cfg.mkdir(exist_ok=True)
    (cfg / name).write_text(text)


def _clear_env(monkeypatch):
    for name in ("SWAPI_BASE_URL", "STARHOP_USER_AGENT", "REQUEST_TIMEOUT_SEC"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_files(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    s = Settings(root=tmp_path)
    assert s.SWAPI_BASE_URL == DEFAULT_BASE_URL
    assert s.USER_AGENT == DEFAULT_USER_AGENT
    assert s.REQUEST_TIMEOUT_SEC == 30


def test_local_toml_overrides_example(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    _write(tmp_path, "starhop.example.toml",
           '[SWAPI]\nBASE_URL = "https://example.test/a/"\n[Defaults]\nREQUEST_TIMEOUT_SEC = 10\n')
    _write(tmp_path, "starhop.toml", '[SWAPI]\nBASE_URL = "https://local.test/b/"\n')
    s = Settings(root=tmp_path)
    assert s.SWAPI_BASE_URL == "https://local.test/b/"
    assert s.REQUEST_TIMEOUT_SEC == 10


def test_env_wins(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    _write(tmp_path, "starhop.toml", '[SWAPI]\nBASE_URL = "https://local.test/b/"\n')
    monkeypatch.setenv("SWAPI_BASE_URL", "https://env.test/c/")
    monkeypatch.setenv("REQUEST_TIMEOUT_SEC", "5")
    s = Settings(root=tmp_path)
    assert s.SWAPI_BASE_URL == "https://env.test/c/"
    assert s.REQUEST_TIMEOUT_SEC == 5


def test_bad_timeout_env_falls_back(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("REQUEST_TIMEOUT_SEC", "soon")
    assert Settings(root=tmp_path).REQUEST_TIMEOUT_SEC == 30


def test_broken_toml_ignored(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    _write(tmp_path, "starhop.toml", "[SWAPI\nBASE_URL = ")
    assert Settings(root=tmp_path).SWAPI_BASE_URL == DEFAULT_BASE_URL
