"""Data models for the tree hasher."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from dirdigest.errors import UnsupportedAlgorithmError

_HEX_RE = re.compile(r"[a-f0-9]+")


def path_sort_key(path: str) -> bytes:
    """Byte-wise ordering key. Undecodable names (surrogate escapes) sort by
    their original bytes."""
    return path.encode("utf-8", "surrogateescape")


def printable_path(path: str) -> str:
    """*path* with undecodable bytes shown as U+FFFD, safe to write as UTF-8."""
    return path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class HashAlgorithm(str, Enum):
    """Supported digest algorithms, keyed by their display name."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"
    MD5 = "MD5"

    @property
    def hashlib_name(self) -> str:
        return self.value.lower()

    @classmethod
    def parse(cls, name: str | HashAlgorithm) -> HashAlgorithm:
        """Resolve *name* case-insensitively, tolerating ``sha-256`` style dashes."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper().replace("-", "")
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedAlgorithmError(
                str(name), tuple(a.value for a in cls)
            ) from None


@dataclass(frozen=True)
class FileDigest:
    """Digest of a single file, keyed by its root-relative path."""

    relative_path: str
    digest: str

    def __post_init__(self) -> None:
        if not _HEX_RE.fullmatch(self.digest):
            raise ValueError(f"digest must be lowercase hex, got {self.digest!r}")


@dataclass(frozen=True)
class FileReadError:
    """A file that could not be hashed. Recorded, never raised."""

    relative_path: str
    reason: str


class HashSet(Mapping[str, str]):
    """Read-only mapping of relative path -> hex digest for one directory root.

    Built once by :func:`dirdigest.hashing.tree.hash_tree`. Iteration order is
    not part of the contract; use :meth:`sorted_items` for output.
    """

    def __init__(
        self,
        root: str,
        algorithm: HashAlgorithm,
        digests: Mapping[str, str],
        errors: tuple[FileReadError, ...] = (),
    ) -> None:
        self._root = root
        self._algorithm = algorithm
        self._digests = MappingProxyType(dict(digests))
        self._errors = tuple(errors)

    @classmethod
    def from_digests(
        cls,
        root: str,
        algorithm: HashAlgorithm,
        entries: list[FileDigest],
        errors: tuple[FileReadError, ...] = (),
    ) -> HashSet:
        digests: dict[str, str] = {}
        for entry in entries:
            if entry.relative_path in digests:
                raise ValueError(f"duplicate relative path: {entry.relative_path}")
            digests[entry.relative_path] = entry.digest
        return cls(root, algorithm, digests, errors)

    @property
    def root(self) -> str:
        return self._root

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    @property
    def errors(self) -> tuple[FileReadError, ...]:
        return self._errors

    def __getitem__(self, key: str) -> str:
        return self._digests[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._digests)

    def __len__(self) -> int:
        return len(self._digests)

    def __repr__(self) -> str:
        return (
            f"HashSet(root={self._root!r}, algorithm={self._algorithm.value}, "
            f"files={len(self._digests)}, errors={len(self._errors)})"
        )

    def sorted_items(self) -> list[FileDigest]:
        """Entries ordered by relative path bytes."""
        return [FileDigest(p, self._digests[p]) for p in sorted(self._digests, key=path_sort_key)]
