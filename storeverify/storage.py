"""JSON snapshot file for registry and admin state.

Lets a registry outlive a single process (for example between CLI runs).
Layout::

    {
      "next_id": 2,
      "admin": "ST1...",
      "stores": {"0": {"id": 0, "name": ..., "address": ..., "verified": false, "owner": ...}}
    }
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional


class StateFileError(Exception):
    """Raised when an existing state file cannot be parsed."""


class StateFile:
    """Atomic read/write of a single JSON state snapshot."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Optional[dict]:
        """Return the stored snapshot, or None if no file has been written yet."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StateFileError(f"Corrupt state file {self.path}: {e}") from e
        _check_snapshot(self.path, data)
        return data

    def save(self, data: dict) -> None:
        """Write ``data`` to a temp file next to the target, then swap it in."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def _check_snapshot(path: Path, data: object) -> None:
    if not isinstance(data, dict):
        raise StateFileError(f"State file {path} must contain a JSON object")

    admin = data.get("admin")
    if not isinstance(admin, str) or not admin:
        raise StateFileError(f"State file {path} has no admin record")

    next_id = data.get("next_id", 0)
    if isinstance(next_id, bool) or not isinstance(next_id, int):
        raise StateFileError(f"State file {path}: next_id must be an integer")

    stores = data.get("stores", {})
    if not isinstance(stores, dict):
        raise StateFileError(f"State file {path}: stores must be an object")
    for key, record in stores.items():
        if not isinstance(record, dict):
            raise StateFileError(f"State file {path}: store {key} is not an object")
        for field in ("name", "address", "owner"):
            if not isinstance(record.get(field), str):
                raise StateFileError(f"State file {path}: store {key} has no {field}")
        if not isinstance(record.get("id"), int) or not isinstance(
            record.get("verified", False), bool
        ):
            raise StateFileError(f"State file {path}: store {key} has a malformed id or flag")
