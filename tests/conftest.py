"""Shared fixtures for remote shell MCP tests."""

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from remote_shell_mcp.models import HostRecord


@pytest.fixture
def hosts_file(tmp_path: Path) -> Path:
    """Host directory with a single reachable host."""
    path = tmp_path / "hosts.json"
    path.write_text(
        json.dumps([{"ip": "10.0.0.5", "user": "alice", "password": "p", "port": 22}])
    )
    return path


@pytest.fixture
def host_record() -> HostRecord:
    """Resolved credentials for 10.0.0.5."""
    return HostRecord(identifier="10.0.0.5", principal="alice", secret="p", port=22)


def _completed(output: bytes, returncode: int | None = 0, exit_signal=None) -> MagicMock:
    return MagicMock(
        stdout=output,
        stderr=None,
        exit_status=returncode if exit_signal is None else None,
        exit_signal=exit_signal,
        returncode=returncode,
    )


@pytest.fixture
def mock_connection() -> MagicMock:
    """Fake SSH connection usable as an async context manager."""
    conn = MagicMock()
    conn.run = AsyncMock(return_value=_completed(b""))
    return conn


@pytest.fixture
def completed() -> Callable[..., MagicMock]:
    """Factory for fake asyncssh.SSHCompletedProcess results."""
    return _completed
