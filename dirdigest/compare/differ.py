"""Comparison of two relative-path -> digest mappings."""

from __future__ import annotations

from collections.abc import Mapping

from dirdigest.compare.models import ComparisonReport, ComparisonResult, ComparisonStatus
from dirdigest.hashing.models import path_sort_key


def _label(hashes: Mapping[str, str], label: str | None, fallback: str) -> str:
    if label is not None:
        return label
    return getattr(hashes, "root", None) or fallback


def compare_hash_sets(
    left: Mapping[str, str],
    right: Mapping[str, str],
    left_label: str | None = None,
    right_label: str | None = None,
) -> ComparisonReport:
    """Compare *left* against *right*.

    Paths are ordered by their UTF-8 bytes, never locale rules.
    Labels default to each HashSet's root. Neither input is modified.
    """
    left_entries: list[ComparisonResult] = []
    for path in sorted(left, key=path_sort_key):
        digest = left[path]
        other = right.get(path)
        if other is None:
            status = ComparisonStatus.ONLY_IN_LEFT
        elif other == digest:
            status = ComparisonStatus.IDENTICAL
        else:
            status = ComparisonStatus.MISMATCH
        left_entries.append(
            ComparisonResult(path, status, left_digest=digest, right_digest=other)
        )

    right_only = [
        ComparisonResult(path, ComparisonStatus.ONLY_IN_RIGHT, right_digest=right[path])
        for path in sorted(right, key=path_sort_key)
        if path not in left
    ]

    return ComparisonReport(
        left_label=_label(left, left_label, "left"),
        right_label=_label(right, right_label, "right"),
        left_entries=tuple(left_entries),
        right_only=tuple(right_only),
    )
