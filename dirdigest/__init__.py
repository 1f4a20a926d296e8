"""dirdigest — hash directory trees and compare them."""

from dirdigest.compare import (
    ComparisonReport,
    ComparisonResult,
    ComparisonStatus,
    compare_hash_sets,
)
from dirdigest.errors import (
    DirDigestError,
    HashingCancelledError,
    InvalidRootError,
    UnsupportedAlgorithmError,
)
from dirdigest.hashing import (
    FileDigest,
    FileReadError,
    HashAlgorithm,
    HashSet,
    hash_tree,
)

__version__ = "0.1.0"

__all__ = [
    "ComparisonReport",
    "ComparisonResult",
    "ComparisonStatus",
    "DirDigestError",
    "FileDigest",
    "FileReadError",
    "HashAlgorithm",
    "HashSet",
    "HashingCancelledError",
    "InvalidRootError",
    "UnsupportedAlgorithmError",
    "compare_hash_sets",
    "hash_tree",
]
