"""
Directory fingerprinting.

A fingerprint is a digest of every file and subdirectory beneath a project
root. It changes when file contents, names, relative locations or permission
bits change. Fingerprinting never fails the caller: when the tree cannot be
read, the external tool is missing, or the deadline passes, the sentinel
FINGERPRINT_UNAVAILABLE is returned instead.
"""

import contextlib
import hashlib
import os
import signal
import stat
import subprocess
import threading
import time
from pathlib import Path

from doctree.config import FingerprintSettings, get_fingerprint_settings
from doctree.exceptions import FingerprintError
from doctree.logger import logger

__all__ = ["FINGERPRINT_UNAVAILABLE", "compute_fingerprint", "tar_fingerprint", "walk_fingerprint"]

# Recorded in the catalog when a directory could not be fingerprinted
FINGERPRINT_UNAVAILABLE = "0"

_CHUNK_SIZE = 64 * 1024


class _Deadline:
    """Monotonic deadline shared by one fingerprint computation."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        self._expires_at = time.monotonic() + timeout

    def remaining(self) -> float:
        return self._expires_at - time.monotonic()

    def check(self) -> None:
        if self.remaining() <= 0:
            raise FingerprintError(f"timed out after {self.timeout:g}s")


def compute_fingerprint(directory: str | Path, settings: FingerprintSettings | None = None) -> str:
    """Compute the fingerprint of a directory tree.

    Args:
        directory: Root of the tree to fingerprint
        settings: Fingerprint settings. Defaults to get_fingerprint_settings().

    Returns:
        Hex digest string, or FINGERPRINT_UNAVAILABLE if it could not be computed
    """
    if settings is None:
        settings = get_fingerprint_settings()

    try:
        if settings.method == "tar":
            return tar_fingerprint(directory, timeout=settings.timeout)
        return walk_fingerprint(directory, timeout=settings.timeout)
    except (FingerprintError, OSError) as e:
        logger.warning(f"Fingerprint unavailable for {directory}: {e}")
        return FINGERPRINT_UNAVAILABLE


def walk_fingerprint(directory: str | Path, timeout: float = 60.0) -> str:
    """Hash a directory tree in-process.

    Entries are visited in sorted order. For each entry its relative POSIX
    path, kind and permission bits are hashed, followed by the file content
    for regular files or the link target for symlinks. Symlinks are not
    followed. Modification times are ignored, so an unmodified tree always
    produces the same digest.

    Raises:
        FingerprintError: If the path is not a directory or the deadline passes
        OSError: If any entry cannot be read
    """
    root = Path(directory)
    if not root.is_dir():
        raise FingerprintError(f"not a directory: {root}")

    deadline = _Deadline(timeout)
    digest = hashlib.sha256()

    def _raise(error: OSError) -> None:
        raise error

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        current = Path(dirpath)
        for name in sorted(dirnames + filenames):
            deadline.check()
            entry = current / name
            _hash_entry(digest, entry, entry.relative_to(root).as_posix(), deadline)

    return digest.hexdigest()


def _hash_entry(digest: "hashlib._Hash", entry: Path, relative: str, deadline: _Deadline) -> None:
    st = entry.lstat()
    mode = st.st_mode

    if stat.S_ISDIR(mode):
        kind = "d"
    elif stat.S_ISLNK(mode):
        kind = "l"
    elif stat.S_ISREG(mode):
        kind = "f"
    else:
        kind = "o"

    # NUL separators keep "ab"+"c" distinct from "a"+"bc"
    digest.update(f"{kind}\0{relative}\0{stat.S_IMODE(mode):o}\0".encode("utf-8", "surrogateescape"))

    if kind == "l":
        digest.update(os.fsencode(os.readlink(entry)))
    elif kind == "f":
        digest.update(f"{st.st_size}\0".encode())
        with open(entry, "rb") as f:
            while chunk := f.read(_CHUNK_SIZE):
                deadline.check()
                digest.update(chunk)
    digest.update(b"\0")


def tar_fingerprint(directory: str | Path, timeout: float = 60.0) -> str:
    """Hash the tar archive stream of a directory tree.

    Runs ``tar -cf - -C <directory> .`` and feeds its output into MD5. The
    archive carries modification times, so the digest changes whenever a file
    is touched.

    Raises:
        FingerprintError: If tar exits non-zero or the deadline passes
        OSError: If tar cannot be started
    """
    root = Path(directory)
    if not root.is_dir():
        raise FingerprintError(f"not a directory: {root}")

    digest = hashlib.md5()
    proc = subprocess.Popen(
        ["tar", "-cf", "-", "-C", str(root), "."],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )

    # The whole group is killed so no descendant keeps the pipe open
    def _kill_group() -> None:
        with contextlib.suppress(ProcessLookupError):
            os.killpg(proc.pid, signal.SIGKILL)

    timed_out = threading.Event()

    def _kill() -> None:
        timed_out.set()
        _kill_group()

    watchdog = threading.Timer(timeout, _kill)
    watchdog.daemon = True
    watchdog.start()
    try:
        assert proc.stdout is not None
        while chunk := proc.stdout.read(_CHUNK_SIZE):
            digest.update(chunk)
        returncode = proc.wait()
    finally:
        watchdog.cancel()
        if proc.poll() is None:
            _kill_group()
            proc.wait()
        if proc.stdout is not None:
            proc.stdout.close()

    if timed_out.is_set():
        raise FingerprintError(f"tar timed out after {timeout:g}s")
    if returncode != 0:
        raise FingerprintError(f"tar exited with status {returncode}")

    return digest.hexdigest()
