"""Fatal error types raised by the hashing and comparison core."""

from __future__ import annotations

from pathlib import Path


class DirDigestError(Exception):
    """Base class for errors that abort a hashing pass."""


class InvalidRootError(DirDigestError):
    """A supplied directory does not exist, is not a directory, or cannot be listed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class UnsupportedAlgorithmError(DirDigestError, ValueError):
    """Algorithm name outside the supported set."""

    def __init__(self, name: str, supported: tuple[str, ...] = ()) -> None:
        self.name = name
        self.supported = supported
        msg = f"Unsupported hash algorithm {name!r}"
        if supported:
            msg += f" (expected one of: {', '.join(supported)})"
        super().__init__(msg)


class HashingCancelledError(DirDigestError):
    """Raised when a cancel event is set while a tree is being hashed."""

    def __init__(self, root: str | Path, hashed: int) -> None:
        self.root = str(root)
        self.hashed = hashed
        super().__init__(f"Hashing of {self.root} cancelled after {hashed} file(s)")
