import os

import pytest
import yaml

from asset_conf.cli import main
from asset_conf.utils.env_tools import env_flag, get_config_dir, load_env_once, load_settings
from asset_conf.utils import token_store


def test_config_dir_override(isolated_env):
    assert get_config_dir() == isolated_env / "conf"


def test_xdg_config_home(tmp_path, monkeypatch):
    monkeypatch.delenv("ASSET_CONF_HOME")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    assert get_config_dir() == tmp_path / "xdg" / "asset_conf"


def test_env_flag(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "yes")
    assert env_flag("SOME_FLAG") is True
    monkeypatch.setenv("SOME_FLAG", "0")
    assert env_flag("SOME_FLAG") is False
    monkeypatch.delenv("SOME_FLAG")
    assert env_flag("SOME_FLAG", default="true") is True


def test_load_env_once_does_not_override(tmp_path, monkeypatch):
    env = tmp_path / ".env"
    env.write_text("DOTENV_ONLY_VAR=from-dotenv\nOTHER_VAR=kept\n")
    monkeypatch.delenv("_ASSET_CONF_ENV_LOADED")
    monkeypatch.setenv("OTHER_VAR", "from-env")
    # register DOTENV_ONLY_VAR with monkeypatch so teardown removes it again
    monkeypatch.setenv("DOTENV_ONLY_VAR", "placeholder")
    monkeypatch.delenv("DOTENV_ONLY_VAR")
    load_env_once(str(env))
    assert os.environ["DOTENV_ONLY_VAR"] == "from-dotenv"
    assert os.environ["OTHER_VAR"] == "from-env"


def test_settings_defaults():
    s = load_settings()
    assert s["api"]["base_url"] == "https://rest.jp.stork-oracle.network"
    assert s["generate"]["fallback_period_sec"] == 60
    assert s["generate"]["percent_change_threshold"] == 1.0
    assert s["search"]["limit"] == 5


def test_settings_file_backfills(isolated_env, monkeypatch):
    path = isolated_env / "conf" / "settings.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(yaml.safe_dump({"generate": {"fallback_period_sec": 120}}))
    monkeypatch.setenv("ASSET_CONF_TIMEOUT", "7")
    s = load_settings()
    assert s["generate"]["fallback_period_sec"] == 120
    assert s["generate"]["percent_change_threshold"] == 1.0
    assert s["api"]["timeout"] == 7.0


class TestTokenStore:
    def test_no_token(self):
        assert token_store.get_token() is None

    def test_set_then_get(self):
        path = token_store.set_token("abc123")
        assert path.exists()
        assert token_store.get_token() == "abc123"
        assert token_store.load_auth_config() == {"auth_token": "abc123"}

    def test_env_wins(self, monkeypatch):
        token_store.set_token("stored")
        monkeypatch.setenv("ASSET_CONF_AUTH_TOKEN", "env-token")
        assert token_store.get_token() == "env-token"

    def test_corrupt_file_is_ignored(self):
        path = token_store.get_auth_config_path()
        path.parent.mkdir(parents=True)
        path.write_text("{broken")
        assert token_store.load_auth_config() == {}
        assert token_store.get_token() is None


class TestBrokenSettings:
    def _write(self, isolated_env, text):
        path = isolated_env / "conf" / "settings.yaml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    def test_null_section_uses_defaults(self, isolated_env):
        self._write(isolated_env, "generate: null\nsearch: 3\n")
        s = load_settings()
        assert s["generate"]["fallback_period_sec"] == 60
        assert s["search"]["limit"] == 5

    @pytest.mark.parametrize("text", ["- just\n- a list\n", "plain string\n", "api: [unclosed\n"])
    def test_bad_file_uses_defaults(self, isolated_env, text):
        self._write(isolated_env, text)
        assert load_settings()["api"]["timeout"] == 30

    def test_bad_numeric_values_use_defaults(self, isolated_env):
        self._write(isolated_env, yaml.safe_dump(
            {"generate": {"fallback_period_sec": "soon", "percent_change_threshold": -1}}
        ))
        s = load_settings()
        assert s["generate"]["fallback_period_sec"] == 60
        assert s["generate"]["percent_change_threshold"] == 1.0

    def test_non_numeric_timeout_env(self, monkeypatch):
        monkeypatch.setenv("ASSET_CONF_TIMEOUT", "fast")
        assert load_settings()["api"]["timeout"] == 30

    def test_cli_survives_broken_settings(self, isolated_env, capsys):
        self._write(isolated_env, "generate: null\n")
        assert main(["encode", "BTCUSD"]) == 0
        assert capsys.readouterr().out.startswith("BTCUSD: 0x7404e3d1")
