from __future__ import annotations

import runpy


def test_main_module_invokes_server(monkeypatch):
    executed = {}

    def fake_main() -> None:
        executed["called"] = True

    monkeypatch.setattr("heartbeat.main.server.main", fake_main)

    runpy.run_module("heartbeat.main.__main__", run_name="__main__")

    assert executed["called"] is True


def test_server_main_runs_uvicorn_with_settings(monkeypatch):
    captured = {}

    def fake_run(app_path, **kwargs):
        captured["app"] = app_path
        captured.update(kwargs)

    monkeypatch.setenv("SERVICE_PORT", "9001")
    monkeypatch.setattr("heartbeat.main.server.uvicorn.run", fake_run)

    from heartbeat.main.server import main

    main()

    assert captured["app"] == "heartbeat.main.app:app"
    assert captured["port"] == 9001
    assert captured["reload"] is False
