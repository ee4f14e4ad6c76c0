"""Tests for host and outcome models."""

import dataclasses

import pytest

from remote_shell_mcp.models import ExecutionRequest, Failure, HostRecord, Stage, Success


def test_host_record_endpoint() -> None:
    record = HostRecord(identifier="10.0.0.5", principal="alice", secret="p", port=2222)

    assert record.endpoint == "10.0.0.5:2222"


def test_host_record_hides_secret_in_repr() -> None:
    record = HostRecord(identifier="10.0.0.5", principal="alice", secret="hunter2", port=22)

    assert "hunter2" not in repr(record)
    assert "alice" in repr(record)


def test_host_record_is_immutable() -> None:
    record = HostRecord(identifier="10.0.0.5", principal="alice", secret="p", port=22)

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.port = 23  # type: ignore[misc]


def test_execution_request_requires_all_fields() -> None:
    with pytest.raises(TypeError):
        ExecutionRequest("10.0.0.5", "/tmp")  # type: ignore[call-arg]


def test_outcome_ok_flags() -> None:
    assert Success(output=b"").ok is True
    assert Failure(stage=Stage.COMMAND_RUN, message="x", partial_output=b"").ok is False


def test_failure_partial_output_defaults_to_none() -> None:
    assert Failure(stage=Stage.DIRECTORY_LOAD, message="x").partial_output is None
