"""Data models for hash set comparison."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ComparisonStatus(str, Enum):
    IDENTICAL = "identical"
    MISMATCH = "mismatch"
    ONLY_IN_LEFT = "only_in_left"
    ONLY_IN_RIGHT = "only_in_right"


@dataclass(frozen=True)
class ComparisonResult:
    """Classification of one relative path across two hash sets."""

    relative_path: str
    status: ComparisonStatus
    left_digest: str | None = None
    right_digest: str | None = None

    def __post_init__(self) -> None:
        has_left = self.left_digest is not None
        has_right = self.right_digest is not None
        expected = {
            ComparisonStatus.IDENTICAL: (True, True),
            ComparisonStatus.MISMATCH: (True, True),
            ComparisonStatus.ONLY_IN_LEFT: (True, False),
            ComparisonStatus.ONLY_IN_RIGHT: (False, True),
        }[self.status]
        if (has_left, has_right) != expected:
            raise ValueError(
                f"{self.status.value} entry for {self.relative_path!r} has "
                f"left={self.left_digest!r}, right={self.right_digest!r}"
            )


@dataclass(frozen=True)
class ComparisonReport:
    """Result of comparing two hash sets.

    ``left_entries`` holds every left path (sorted) classified as identical,
    mismatched, or missing from the right. ``right_only`` holds the right
    paths (sorted) that the left does not have. No path appears in both.
    """

    left_label: str
    right_label: str
    left_entries: tuple[ComparisonResult, ...] = ()
    right_only: tuple[ComparisonResult, ...] = ()

    def _with_status(self, status: ComparisonStatus) -> tuple[str, ...]:
        return tuple(r.relative_path for r in self.left_entries if r.status is status)

    @property
    def matches(self) -> tuple[str, ...]:
        return self._with_status(ComparisonStatus.IDENTICAL)

    @property
    def mismatches(self) -> tuple[str, ...]:
        return self._with_status(ComparisonStatus.MISMATCH)

    @property
    def missing_in_right(self) -> tuple[str, ...]:
        return self._with_status(ComparisonStatus.ONLY_IN_LEFT)

    @property
    def only_in_right(self) -> tuple[str, ...]:
        return tuple(r.relative_path for r in self.right_only)

    @property
    def has_differences(self) -> bool:
        return bool(self.right_only) or any(
            r.status is not ComparisonStatus.IDENTICAL for r in self.left_entries
        )
