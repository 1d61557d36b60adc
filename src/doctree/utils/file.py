"""File operation utilities for doctree."""

import contextlib
import json
import os
import platform
import stat
import tempfile
from pathlib import Path
from typing import Any


def datasync(fd: int) -> None:
    """Sync file data to disk.

    Uses fdatasync on Linux, fsync on macOS/other platforms.

    Args:
        fd: File descriptor to sync
    """
    if hasattr(os, "fdatasync") and platform.system() != "Darwin":
        os.fdatasync(fd)
    else:
        os.fsync(fd)


def atomic_write_json(path: str | Path, data: Any) -> None:
    """Atomically write JSON data to a file.

    Writes to a secure temporary file in the target directory first, then
    renames it over the target so readers never observe a partial write.
    The target directory must already exist.

    Args:
        path: Target file path
        data: JSON-serializable value to write

    Raises:
        OSError: If the temporary file cannot be created, written, or renamed
    """
    target_path = Path(path)
    target_dir = target_path.parent

    # mkstemp opens with O_EXCL in the target directory so the rename stays atomic
    tmp_fd = None
    tmp_path = None
    try:
        tmp_fd, tmp_name = tempfile.mkstemp(
            prefix=".tmp_",
            suffix=".json",
            dir=str(target_dir),
        )
        tmp_path = Path(tmp_name)

        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            tmp_fd = None  # fd is now owned by the file object
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.write("\n")
            f.flush()
            datasync(f.fileno())

        # Readable by owner only
        os.chmod(tmp_path, stat.S_IRUSR | stat.S_IWUSR)

        os.replace(tmp_path, target_path)
        tmp_path = None  # Successfully renamed, don't clean up

    finally:
        if tmp_fd is not None:
            os.close(tmp_fd)
        if tmp_path is not None and tmp_path.exists():
            with contextlib.suppress(OSError):
                tmp_path.unlink()
