"""Host directory loading and lookup.

Reads a JSON array of host credentials:

    [{"ip": "10.0.0.5", "user": "alice", "password": "p", "port": 22}]

The file is re-read on every invocation; nothing is cached.
"""

import json
import logging
from pathlib import Path
from typing import Any

from remote_shell_mcp.models import HostRecord
from remote_shell_mcp.services.errors import DirectoryLoadError, DirectoryLookupError

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("ip", "user", "password")


def _parse_entry(entry: Any, index: int) -> HostRecord:
    """Validate one raw entry and convert it to a HostRecord.

    Raises:
        ValueError: If the entry is not a well-formed host object
    """
    if not isinstance(entry, dict):
        raise ValueError(f"entry {index} is not an object")

    for key in (*_STRING_FIELDS, "port"):
        if key not in entry:
            raise ValueError(f"entry {index} is missing field '{key}'")

    for key in _STRING_FIELDS:
        if not isinstance(entry[key], str):
            raise ValueError(f"entry {index} field '{key}' must be a string")

    port = entry["port"]
    # bool is an int subclass
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port <= 65535:
        raise ValueError(f"entry {index} field 'port' must be an integer in 1-65535")

    return HostRecord(
        identifier=entry["ip"],
        principal=entry["user"],
        secret=entry["password"],
        port=port,
    )


def load_all(path: Path | str) -> list[HostRecord]:
    """Load every host record from the directory file.

    Args:
        path: Path to the JSON host directory

    Returns:
        Host records in file order

    Raises:
        DirectoryLoadError: If the file cannot be read or is malformed.
            No partial list is ever returned.
    """
    path = Path(path)
    logger.debug("Loading host configurations from %s", path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        raise DirectoryLoadError(f"failed to read {path}: {e}") from e

    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse %s: %s", path, e)
        raise DirectoryLoadError(f"failed to parse {path}: {e}") from e

    if not isinstance(raw, list):
        raise DirectoryLoadError(
            f"failed to parse {path}: expected a JSON array of hosts, "
            f"got {type(raw).__name__}"
        )

    try:
        records = [_parse_entry(entry, i) for i, entry in enumerate(raw)]
    except ValueError as e:
        logger.warning("Failed to parse %s: %s", path, e)
        raise DirectoryLoadError(f"failed to parse {path}: {e}") from e

    logger.info("Loaded %d host configuration(s) from %s", len(records), path)
    return records


def resolve(records: list[HostRecord], target: str) -> HostRecord:
    """Find the first record whose identifier equals target exactly.

    Args:
        records: Host records in directory order
        target: Machine identifier to look up (no normalization applied)

    Returns:
        First matching record

    Raises:
        DirectoryLookupError: If no record matches
    """
    for record in records:
        if record.identifier == target:
            logger.debug(
                "Found host configuration for %s (user=%s, port=%d)",
                target,
                record.principal,
                record.port,
            )
            return record

    logger.warning("Host configuration not found for %s", target)
    raise DirectoryLookupError(target)
