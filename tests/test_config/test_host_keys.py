"""Tests for HostKeyVerifier."""

import logging
from pathlib import Path

import pytest

from remote_shell_mcp.config.host_keys import HostKeyVerifier


def test_disabled_by_default() -> None:
    verifier = HostKeyVerifier()

    assert not verifier.is_enabled()
    assert verifier.known_hosts_arg() is None


def test_enabled_with_custom_path(tmp_path: Path) -> None:
    known_hosts = tmp_path / "known_hosts"
    known_hosts.touch()

    verifier = HostKeyVerifier(verify=True, known_hosts_path=str(known_hosts))

    assert verifier.is_enabled()
    assert verifier.known_hosts_arg() == str(known_hosts)


def test_enabled_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nonexistent"
    verifier = HostKeyVerifier(verify=True, known_hosts_path=str(missing))

    with pytest.raises(FileNotFoundError, match="known_hosts file not found"):
        verifier.known_hosts_arg()


def test_default_path_is_user_known_hosts(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    (tmp_path / ".ssh").mkdir()
    (tmp_path / ".ssh" / "known_hosts").touch()

    verifier = HostKeyVerifier(verify=True)

    assert verifier.known_hosts_arg() == str(tmp_path / ".ssh" / "known_hosts")


def test_log_status_warns_critically_when_disabled(
    caplog: pytest.LogCaptureFixture,
) -> None:
    verifier = HostKeyVerifier()
    logger = logging.getLogger("remote_shell_mcp.config.host_keys")

    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.CRITICAL, logger=logger.name):
            verifier.log_status()
    finally:
        logger.removeHandler(caplog.handler)

    assert any(
        r.levelno == logging.CRITICAL and "DISABLED" in r.getMessage()
        for r in caplog.records
    )
