"""Storage port interface for filesystem operations."""

from pathlib import Path
from typing import Protocol


class StoragePort(Protocol):
    """Port interface for storage operations.

    Abstracts filesystem I/O to enable testing and alternative backends.

    Side effects: Reads/writes files (offline).
    """

    def read_bytes(self, path: Path) -> bytes:
        """Read binary file.

        Args:
            path: File path

        Returns:
            File contents

        Raises:
            FileIOError: If the file cannot be read
        """
        ...

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write binary file, replacing any existing content.

        Args:
            path: File path
            content: Content to write

        Raises:
            FileIOError: If the file cannot be written
        """
        ...
