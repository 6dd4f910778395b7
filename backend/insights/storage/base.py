from __future__ import annotations

import tempfile
from pathlib import Path


class StorageError(Exception):
    """A record could not be written to the backing store."""


def atomic_write(directory: Path, path: Path, data: str) -> None:
    """Write to a temp file in ``directory`` then rename over ``path``."""
    try:
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
    except OSError as exc:
        raise StorageError(f"Cannot write to {directory}: {exc}") from exc
    try:
        with open(fd, "w", encoding="utf-8") as f:
            f.write(data)
        Path(tmp_path).replace(path)
    except OSError as exc:
        Path(tmp_path).unlink(missing_ok=True)
        raise StorageError(f"Cannot write {path.name}: {exc}") from exc
    except BaseException:
        Path(tmp_path).unlink(missing_ok=True)
        raise
