"""Shared file handling for the JSON-file-backed repositories."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JsonFile:
    """A JSON document on disk, created with *empty* content on first use."""

    def __init__(self, file_path: Path, empty: Any) -> None:
        self._file_path = file_path
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self.write(empty)

    def read(self) -> Any:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def write(self, data: Any) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )
