from __future__ import annotations

import logging
import os

import pytest

from heartbeat.shared.env import load_secret_file_variables


def _unset(monkeypatch: pytest.MonkeyPatch, key: str) -> None:
    monkeypatch.delenv(key, raising=False)


def _unreadable_reasons(caplog: pytest.LogCaptureFixture) -> list:
    return [
        record.reason
        for record in caplog.records
        if record.message == "env.secret_file.unreadable"
    ]


def test_load_secret_file_variables_reads_content(tmp_path, monkeypatch):
    secret_file = tmp_path / "secret.txt"
    secret_file.write_text("s3cr3t\n", encoding="utf-8")

    monkeypatch.setenv("APP_SECRET_FILE", str(secret_file))
    monkeypatch.setenv("APP_SECRET", "")

    resolved = load_secret_file_variables()

    assert os.environ["APP_SECRET"] == "s3cr3t"
    assert "APP_SECRET" in resolved


def test_load_secret_file_variables_honours_prefix(tmp_path, monkeypatch):
    secret_file = tmp_path / "secret.txt"
    secret_file.write_text("value", encoding="utf-8")

    monkeypatch.setenv("OTHER_SECRET_FILE", str(secret_file))
    _unset(monkeypatch, "OTHER_SECRET")

    resolved = load_secret_file_variables(prefix="HEARTBEAT_")

    assert "OTHER_SECRET" not in resolved
    assert "OTHER_SECRET" not in os.environ


def test_load_secret_file_variables_logs_missing_file(monkeypatch, caplog):
    monkeypatch.setenv("MISSING_SECRET_FILE", "/tmp/does-not-exist")
    _unset(monkeypatch, "MISSING_SECRET")

    with caplog.at_level(logging.WARNING):
        resolved = load_secret_file_variables(prefix="MISSING_")

    assert "MISSING_SECRET" not in resolved
    assert _unreadable_reasons(caplog) == ["FileNotFoundError"]


def test_load_secret_file_variables_handles_decode_error(tmp_path, monkeypatch, caplog):
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")

    monkeypatch.setenv("BINARY_SECRET_FILE", str(binary_file))
    _unset(monkeypatch, "BINARY_SECRET")

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables(prefix="BINARY_")

    assert _unreadable_reasons(caplog) == ["UnicodeDecodeError"]
    assert "BINARY_SECRET" not in os.environ


def test_load_secret_file_variables_handles_os_error(monkeypatch, caplog):
    def _raise_os_error(self, *args, **kwargs):
        raise OSError("permission denied")

    monkeypatch.setenv("BROKEN_SECRET_FILE", "/tmp/any")
    _unset(monkeypatch, "BROKEN_SECRET")
    monkeypatch.setattr(
        "heartbeat.shared.env.Path.read_text", _raise_os_error, raising=False
    )

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables(prefix="BROKEN_")

    assert _unreadable_reasons(caplog) == ["OSError"]


def test_load_secret_file_variables_skips_existing_target(monkeypatch):
    monkeypatch.setenv("EXISTING_SECRET", "present")
    monkeypatch.setenv("EXISTING_SECRET_FILE", "/tmp/ignored")

    resolved = load_secret_file_variables()

    assert os.environ["EXISTING_SECRET"] == "present"
    assert "EXISTING_SECRET" not in resolved


def test_load_secret_file_variables_skips_empty_path(monkeypatch):
    _unset(monkeypatch, "EMPTY_SECRET")
    monkeypatch.setenv("EMPTY_SECRET_FILE", "")

    load_secret_file_variables()

    assert "EMPTY_SECRET" not in os.environ
