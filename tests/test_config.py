from brokenlinks.core import config
from brokenlinks.core.utils import human_bytes

def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("BROKENLINKS_WORKERS", "7")
    assert config.get_int("BROKENLINKS_WORKERS") == 7

def test_bad_values_fall_back(monkeypatch):
    monkeypatch.setenv("BROKENLINKS_TIMEOUT", "soon")
    assert config.get_float("BROKENLINKS_TIMEOUT", 10.0) == 10.0

def test_builtin_defaults(monkeypatch):
    monkeypatch.delenv("BROKENLINKS_USER_AGENT", raising=False)
    monkeypatch.setattr(config, "ENV", {})
    assert config.get("BROKENLINKS_USER_AGENT").startswith("brokenlinks/")
    assert config.get("UNKNOWN", "x") == "x"

def test_human_bytes():
    assert human_bytes(512) == "512 B"
    assert human_bytes(2048) == "2.0 KB"
    assert human_bytes(3 * 1024 * 1024) == "3.0 MB"
