from __future__ import annotations

import pytest

from shifumi.app import app as mod
from shifumi.exceptions.internal import ServicesNotInitialized


def test_main_happy_path_returns_services(monkeypatch, capsys):
    levels = []
    monkeypatch.setattr(mod, "setup_logging", lambda level: levels.append(level), raising=True)
    monkeypatch.setattr(mod, "startup_banner", lambda: "BANNER!", raising=True)
    sentinel = object()
    monkeypatch.setattr(mod, "startup", lambda: sentinel, raising=True)
    monkeypatch.setattr(mod, "LOG_LEVEL", 10, raising=True)

    out = mod.main(0.0)

    assert out is sentinel
    assert levels == [10]
    assert "BANNER!" in capsys.readouterr().out


def test_main_raises_when_services_missing(monkeypatch):
    monkeypatch.setattr(mod, "setup_logging", lambda level: None, raising=True)
    monkeypatch.setattr(mod, "startup_banner", lambda: "", raising=True)
    monkeypatch.setattr(mod, "startup", lambda: None, raising=True)

    with pytest.raises(ServicesNotInitialized):
        mod.main(0.0)


def test_run_passes_perf_counter(monkeypatch):
    seen = []
    monkeypatch.setattr(mod.time, "perf_counter", lambda: 12.5, raising=True)
    monkeypatch.setattr(mod, "main", lambda started_at: seen.append(started_at), raising=True)

    mod.run()

    assert seen == [12.5]
