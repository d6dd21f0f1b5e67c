"""
JSON Snapshot File

Infrastructure implementation of ISnapshotStorage backed by one JSON
file on the local filesystem.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from feedproxy.domain.errors import PersistenceError
from feedproxy.domain.video_metadata import ISnapshotStorage


class JsonSnapshotFile(ISnapshotStorage):
    """
    Stores the metadata snapshot as pretty-printed JSON.

    Writes go to a temporary file in the same directory which then
    replaces the target, so readers never see a half-written file.
    """

    def __init__(self, path: str):
        """
        Args:
            path: Location of the snapshot file
        """
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def read(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Failed to read snapshot {self.path}: {e}", original_error=e) from e

    def write(self, snapshot: Dict[str, Any]) -> None:
        directory = self.path.parent
        tmp_path = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(snapshot, f, indent=2, sort_keys=True)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError(f"Failed to write snapshot {self.path}: {e}", original_error=e) from e
