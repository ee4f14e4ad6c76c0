"""Tests for host directory loading and lookup."""

import json
from pathlib import Path

import pytest

from remote_shell_mcp.models import HostRecord, Stage
from remote_shell_mcp.services.directory import load_all, resolve
from remote_shell_mcp.services.errors import DirectoryLoadError, DirectoryLookupError


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "hosts.json"
    path.write_text(json.dumps(data))
    return path


def test_load_all_returns_one_record_per_entry(tmp_path: Path) -> None:
    """load_all returns records in file order."""
    path = _write(
        tmp_path,
        [
            {"ip": "10.0.0.5", "user": "alice", "password": "p", "port": 22},
            {"ip": "10.0.0.6", "user": "bob", "password": "q", "port": 2222},
            {"ip": "host.example", "user": "root", "password": "", "port": 8022},
        ],
    )

    records = load_all(path)

    assert len(records) == 3
    assert records[0] == HostRecord("10.0.0.5", "alice", "p", 22)
    assert [r.identifier for r in records] == ["10.0.0.5", "10.0.0.6", "host.example"]
    assert records[1].port == 2222


def test_load_all_accepts_empty_array(tmp_path: Path) -> None:
    """An empty directory is valid."""
    assert load_all(_write(tmp_path, [])) == []


def test_load_all_ignores_extra_fields(tmp_path: Path) -> None:
    """Unknown keys on an entry are ignored."""
    path = _write(
        tmp_path,
        [{"ip": "10.0.0.5", "user": "a", "password": "p", "port": 22, "note": "x"}],
    )

    assert load_all(path)[0].identifier == "10.0.0.5"


def test_load_all_missing_file(tmp_path: Path) -> None:
    """Missing file raises DirectoryLoadError naming the file."""
    missing = tmp_path / "nope.json"

    with pytest.raises(DirectoryLoadError) as exc_info:
        load_all(missing)

    assert exc_info.value.stage is Stage.DIRECTORY_LOAD
    assert "nope.json" in str(exc_info.value)
    assert "failed to read" in str(exc_info.value)


def test_load_all_truncated_json(tmp_path: Path) -> None:
    """Truncated JSON raises rather than returning a partial list."""
    path = tmp_path / "hosts.json"
    path.write_text('[{"ip": "10.0.0.5", "user": "alice", "password": "p", "port": 22}, {"ip"')

    with pytest.raises(DirectoryLoadError, match="failed to parse"):
        load_all(path)


@pytest.mark.parametrize(
    "data",
    [
        {"ip": "10.0.0.5", "user": "alice", "password": "p", "port": 22},
        ["10.0.0.5"],
        [{"ip": "10.0.0.5", "user": "alice", "port": 22}],
        [{"ip": 5, "user": "alice", "password": "p", "port": 22}],
        [{"ip": "10.0.0.5", "user": "alice", "password": "p", "port": "22"}],
        [{"ip": "10.0.0.5", "user": "alice", "password": "p", "port": 0}],
        [{"ip": "10.0.0.5", "user": "alice", "password": "p", "port": True}],
        [{"ip": "10.0.0.5", "user": "alice", "password": "p", "port": 70000}],
    ],
    ids=[
        "not-an-array",
        "entry-not-object",
        "missing-password",
        "ip-not-string",
        "port-string",
        "port-zero",
        "port-bool",
        "port-out-of-range",
    ],
)
def test_load_all_rejects_malformed_structure(tmp_path: Path, data: object) -> None:
    """Structurally invalid directories raise DirectoryLoadError."""
    with pytest.raises(DirectoryLoadError):
        load_all(_write(tmp_path, data))


def test_load_all_rejects_whole_file_on_one_bad_entry(tmp_path: Path) -> None:
    """A single bad entry fails the whole load."""
    path = _write(
        tmp_path,
        [
            {"ip": "10.0.0.5", "user": "alice", "password": "p", "port": 22},
            {"ip": "10.0.0.6", "user": "bob"},
        ],
    )

    with pytest.raises(DirectoryLoadError, match="entry 1"):
        load_all(path)


class TestResolve:
    """Tests for resolve()."""

    @pytest.fixture
    def records(self) -> list[HostRecord]:
        return [
            HostRecord("10.0.0.5", "alice", "p", 22),
            HostRecord("10.0.0.6", "bob", "q", 22),
            HostRecord("10.0.0.5", "carol", "r", 2222),
        ]

    def test_returns_matching_record(self, records: list[HostRecord]) -> None:
        assert resolve(records, "10.0.0.6").principal == "bob"

    def test_returns_first_match_on_duplicates(self, records: list[HostRecord]) -> None:
        """Duplicate identifiers resolve to the earliest entry."""
        record = resolve(records, "10.0.0.5")

        assert record.principal == "alice"
        assert record is records[0]

    def test_missing_target_names_target(self, records: list[HostRecord]) -> None:
        with pytest.raises(DirectoryLookupError) as exc_info:
            resolve(records, "10.0.0.9")

        assert exc_info.value.stage is Stage.DIRECTORY_LOOKUP
        assert exc_info.value.target == "10.0.0.9"
        assert "10.0.0.9" in str(exc_info.value)

    def test_comparison_is_exact(self) -> None:
        """No trimming or case folding is applied."""
        records = [HostRecord("Server.Local", "alice", "p", 22)]

        with pytest.raises(DirectoryLookupError):
            resolve(records, "server.local")
        with pytest.raises(DirectoryLookupError):
            resolve(records, " Server.Local")

    def test_empty_directory(self) -> None:
        with pytest.raises(DirectoryLookupError, match="10.0.0.5"):
            resolve([], "10.0.0.5")
