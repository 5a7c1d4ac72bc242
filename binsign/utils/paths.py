"""Path utilities for bundle and output naming."""

from __future__ import annotations

from pathlib import Path


def ensure_parent_dir(path: Path) -> Path:
    """Ensure the parent directory of ``path`` exists, creating if necessary."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def with_appended_suffix(path: Path, suffix: str) -> Path:
    """Append ``suffix`` to the full file name of ``path``.

    Unlike :meth:`Path.with_suffix`, existing extensions are kept:
    ``report.pdf`` with ``.sig`` becomes ``report.pdf.sig``.
    """
    path = Path(path)
    return path.with_name(f"{path.name}{suffix}")


def resolve_output_path(input_path: Path, output_path: Path | None, suffix: str) -> Path:
    """Return ``output_path`` if given, otherwise ``input_path`` plus ``suffix``."""
    if output_path is not None:
        return Path(output_path)
    return with_appended_suffix(input_path, suffix)
