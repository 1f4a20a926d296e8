"""Set comparator for two directory hash sets."""

from dirdigest.compare.differ import compare_hash_sets
from dirdigest.compare.models import ComparisonReport, ComparisonResult, ComparisonStatus

__all__ = [
    "ComparisonReport",
    "ComparisonResult",
    "ComparisonStatus",
    "compare_hash_sets",
]
