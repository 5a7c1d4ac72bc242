"""Filesystem-backed storage port implementation."""

from __future__ import annotations

from pathlib import Path

from binsign.app.ports import StoragePort
from binsign.errors import FileIOError
from binsign.utils.paths import ensure_parent_dir


class FileSystemStorageAdapter(StoragePort):
    """Adapter that performs direct filesystem operations."""

    def read_bytes(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise FileIOError(f"Cannot read {path}: {exc}") from exc

    def write_bytes(self, path: Path, content: bytes) -> None:
        destination = Path(path)
        try:
            ensure_parent_dir(destination)
            destination.write_bytes(content)
        except OSError as exc:
            raise FileIOError(f"Cannot write {path}: {exc}") from exc
