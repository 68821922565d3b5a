import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real config dir, token and .env."""
    monkeypatch.setenv("ASSET_CONF_HOME", str(tmp_path / "conf"))
    monkeypatch.setenv("_ASSET_CONF_ENV_LOADED", "1")
    for var in ("ASSET_CONF_AUTH_TOKEN", "ASSET_CONF_DEMO", "ASSET_CONF_API_URL", "ASSET_CONF_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path
