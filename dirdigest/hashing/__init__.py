"""Tree hasher: directory -> relative path / digest mapping."""

from dirdigest.hashing.models import (
    FileDigest,
    FileReadError,
    HashAlgorithm,
    HashSet,
    path_sort_key,
    printable_path,
)
from dirdigest.hashing.tree import (
    DEFAULT_CHUNK_SIZE,
    compute_digest,
    compute_file_digest,
    hash_file,
    hash_tree,
    iter_files,
    validate_root,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "FileDigest",
    "FileReadError",
    "HashAlgorithm",
    "HashSet",
    "compute_digest",
    "compute_file_digest",
    "hash_file",
    "hash_tree",
    "iter_files",
    "path_sort_key",
    "printable_path",
    "validate_root",
]
