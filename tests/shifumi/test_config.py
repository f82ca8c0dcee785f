from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path

import pytest

from shifumi.exceptions.config import InvalidEnvVar


def _load_config_fresh(monkeypatch, tmp_name: str = "shifumi_config_under_test"):
    """Charge src/shifumi/config.py sous un nom unique pour isoler les effets d'import."""
    # Empêche la .env locale de polluer les tests (sinon load_dotenv remet des vars)
    import dotenv
    monkeypatch.setattr(dotenv, "load_dotenv", lambda *a, **k: False)

    sys.modules.pop(tmp_name, None)

    cfg_path = Path(__file__).resolve().parents[2] / "src" / "shifumi" / "config.py"
    spec = importlib.util.spec_from_file_location(tmp_name, cfg_path)
    assert spec and spec.loader
    mod = importlib.util.module_from_spec(spec)
    sys.modules[tmp_name] = mod
    spec.loader.exec_module(mod)  # type: ignore[arg-type]
    return mod


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("SHIFUMI_DB_PATH", "SHIFUMI_MODE_FLAG", "SHIFUMI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_config_defaults(monkeypatch, clean_env):
    mod = _load_config_fresh(monkeypatch, "cfg_defaults")

    assert mod.DB_PATH == "./data/shifumi.db"
    assert mod.MODE_FLAG is False
    assert mod.LOG_LEVEL == logging.INFO


def test_config_reads_environment(monkeypatch, clean_env):
    monkeypatch.setenv("SHIFUMI_DB_PATH", "/tmp/x.db")
    monkeypatch.setenv("SHIFUMI_MODE_FLAG", " Yes ")
    monkeypatch.setenv("SHIFUMI_LOG_LEVEL", "debug")

    mod = _load_config_fresh(monkeypatch, "cfg_env")

    assert mod.DB_PATH == "/tmp/x.db"
    assert mod.MODE_FLAG is True
    assert mod.LOG_LEVEL == logging.DEBUG


def test_config_import_raises_on_bad_mode_flag(monkeypatch, clean_env):
    monkeypatch.setenv("SHIFUMI_MODE_FLAG", "peut-être")

    with pytest.raises(InvalidEnvVar) as ei:
        _load_config_fresh(monkeypatch, "cfg_bad_flag")
    assert ei.value.name == "SHIFUMI_MODE_FLAG"


def test_config_import_raises_on_bad_log_level(monkeypatch, clean_env):
    monkeypatch.setenv("SHIFUMI_LOG_LEVEL", "BAVARD")

    with pytest.raises(InvalidEnvVar):
        _load_config_fresh(monkeypatch, "cfg_bad_level")


def test_env_helpers(monkeypatch, clean_env):
    mod = _load_config_fresh(monkeypatch, "cfg_helpers")

    monkeypatch.setenv("EMPTY", "")
    assert mod.env_str_optional("EMPTY") is None

    monkeypatch.setenv("SOME", "v")
    assert mod.env_str_optional("SOME") == "v"

    monkeypatch.setenv("FLAG", "off")
    assert mod.env_bool_optional("FLAG", True) is False
    assert mod.env_bool_optional("MISSING_FLAG", True) is True
