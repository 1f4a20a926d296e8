"""Recursive directory hashing."""

from __future__ import annotations

import hashlib
import logging
import os
import stat
import threading
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from dirdigest.errors import HashingCancelledError, InvalidRootError
from dirdigest.hashing.models import (
    FileDigest,
    FileReadError,
    HashAlgorithm,
    HashSet,
    path_sort_key,
)

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024

HashOutcome = FileDigest | FileReadError


def compute_digest(content: bytes, algorithm: HashAlgorithm | str = HashAlgorithm.SHA256) -> str:
    """Hex digest of an in-memory byte string."""
    algo = HashAlgorithm.parse(algorithm)
    return hashlib.new(algo.hashlib_name, content).hexdigest()


def compute_file_digest(
    path: Path,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA256,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Stream a file through *algorithm* in *chunk_size* blocks.

    Raises ``OSError`` if the file cannot be opened or read to completion.
    """
    algo = HashAlgorithm.parse(algorithm)
    h = hashlib.new(algo.hashlib_name)
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return h.hexdigest()


def hash_file(
    path: Path,
    relative_path: str,
    algorithm: HashAlgorithm,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> HashOutcome:
    """Hash one file, turning read failures into a :class:`FileReadError`."""
    try:
        digest = compute_file_digest(path, algorithm, chunk_size)
    except OSError as e:
        return FileReadError(relative_path=relative_path, reason=e.strerror or str(e))
    return FileDigest(relative_path=relative_path, digest=digest)


def validate_root(root: str | Path) -> Path:
    """Return *root* as a Path, or raise InvalidRootError.

    The root must also be listable; an unreadable root would otherwise
    hash as an empty tree.
    """
    path = Path(root)
    if not path.exists():
        raise InvalidRootError(root, "directory does not exist")
    if not path.is_dir():
        raise InvalidRootError(root, "not a directory")
    try:
        with os.scandir(path):
            pass
    except OSError as e:
        raise InvalidRootError(root, f"cannot be read: {e.strerror or e}") from e
    return path


def _log_walk_error(err: OSError) -> None:
    logger.warning("Skipping directory %s: %s", err.filename, err.strerror or err)


def iter_files(root: Path, ignore_patterns: Iterable[str] = ()) -> Iterator[Path]:
    """Yield every non-directory entry under *root*.

    Symlinked directories are listed by ``os.walk`` but never descended into.
    Entries whose name is in *ignore_patterns* are skipped, and so is
    everything below an ignored directory.
    """
    ignore = set(ignore_patterns)
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        kept = []
        for name in sorted(dirnames):
            if name in ignore:
                continue
            if os.path.islink(os.path.join(dirpath, name)):
                logger.debug("Not following directory symlink %s", os.path.join(dirpath, name))
                continue
            kept.append(name)
        dirnames[:] = kept
        for name in sorted(filenames):
            if name in ignore:
                continue
            yield Path(dirpath) / name


def _is_regular_file(path: Path) -> bool:
    """True for regular files (through symlinks); unstat-able entries pass
    through so the read attempt reports the failure."""
    try:
        st = path.stat()
    except OSError:
        return True
    return stat.S_ISREG(st.st_mode)


def _check_cancel(cancel_event: threading.Event | None, root: Path, hashed: int) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise HashingCancelledError(root, hashed)


def _hash_sequential(
    targets: list[tuple[Path, str]],
    algorithm: HashAlgorithm,
    chunk_size: int,
    cancel_event: threading.Event | None,
    root: Path,
) -> Iterator[HashOutcome]:
    for done, (path, rel) in enumerate(targets):
        _check_cancel(cancel_event, root, done)
        yield hash_file(path, rel, algorithm, chunk_size)


def _hash_parallel(
    targets: list[tuple[Path, str]],
    algorithm: HashAlgorithm,
    chunk_size: int,
    workers: int,
    cancel_event: threading.Event | None,
    root: Path,
) -> Iterator[HashOutcome]:
    # Results are consumed in submission order; only the caller's thread
    # touches the mapping being built.
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(hash_file, path, rel, algorithm, chunk_size)
            for path, rel in targets
        ]
        for done, future in enumerate(futures):
            if cancel_event is not None and cancel_event.is_set():
                for pending in futures[done:]:
                    pending.cancel()
                raise HashingCancelledError(root, done)
            yield future.result()


def hash_tree(
    root: str | Path,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA256,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    workers: int = 1,
    ignore_patterns: Iterable[str] | None = None,
    cancel_event: threading.Event | None = None,
) -> HashSet:
    """Hash every regular file under *root* and return a :class:`HashSet`.

    The algorithm is resolved first, so an unsupported name fails before the
    filesystem is touched. Unreadable files are logged, left out of the
    mapping, and listed in ``HashSet.errors``; they never abort the pass.

    With ``workers > 1`` distinct files are hashed on a thread pool. The
    result is identical to a sequential run.
    """
    algo = HashAlgorithm.parse(algorithm)
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    root_path = validate_root(root)

    targets: list[tuple[Path, str]] = []
    for path in iter_files(root_path, ignore_patterns or ()):
        _check_cancel(cancel_event, root_path, 0)
        rel = path.relative_to(root_path).as_posix()
        logger.debug("Visiting %s", rel)
        if not _is_regular_file(path):
            logger.debug("Skipping non-regular file %s", rel)
            continue
        targets.append((path, rel))
    targets.sort(key=lambda t: path_sort_key(t[1]))

    if workers > 1 and len(targets) > 1:
        outcomes = _hash_parallel(targets, algo, chunk_size, workers, cancel_event, root_path)
    else:
        outcomes = _hash_sequential(targets, algo, chunk_size, cancel_event, root_path)

    entries: list[FileDigest] = []
    errors: list[FileReadError] = []
    for outcome in outcomes:
        if isinstance(outcome, FileReadError):
            logger.warning("Failed to hash %s: %s", outcome.relative_path, outcome.reason)
            errors.append(outcome)
        else:
            logger.debug("Hashed %s: %s", outcome.relative_path, outcome.digest)
            entries.append(outcome)

    logger.info(
        "Finished %s: %d file(s) hashed with %s, %d failed",
        root, len(entries), algo.value, len(errors),
    )
    return HashSet.from_digests(str(root), algo, entries, tuple(errors))
