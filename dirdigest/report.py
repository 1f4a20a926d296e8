"""Text and JSON rendering of hash sets and comparison reports."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dirdigest.compare.models import ComparisonReport, ComparisonStatus
from dirdigest.hashing.models import HashSet, path_sort_key, printable_path


def render_hash_set(hash_set: HashSet, label: str | None = None) -> list[str]:
    """Header line followed by one ``path : digest`` line per file, sorted.

    Names that are not valid UTF-8 are shown with U+FFFD in place of the
    undecodable bytes.
    """
    root = printable_path(label or hash_set.root)
    lines = [f"Computing {hash_set.algorithm.value} hashes for directory: {root}"]
    lines.extend(
        f"{printable_path(e.relative_path)} : {e.digest}" for e in hash_set.sorted_items()
    )
    return lines


def render_comparison(report: ComparisonReport) -> list[str]:
    """Comparison block: left-side classification, then right-only paths."""
    left_label = printable_path(report.left_label)
    right_label = printable_path(report.right_label)
    lines = [
        "",
        f"Comparing hashes between {left_label} and {right_label}:",
    ]
    for entry in sorted(report.left_entries, key=lambda r: path_sort_key(r.relative_path)):
        path = printable_path(entry.relative_path)
        if entry.status is ComparisonStatus.ONLY_IN_LEFT:
            lines.append(f"[Missing in {right_label}] {path}")
        elif entry.status is ComparisonStatus.MISMATCH:
            lines.append(
                f"[Hash Mismatch] {path} - {entry.left_digest} vs {entry.right_digest}"
            )
        else:
            lines.append(f"[Match] {path} - {entry.left_digest}")
    lines.append(f"Files only in {right_label}:")
    lines.extend(
        printable_path(p) for p in sorted(report.only_in_right, key=path_sort_key)
    )
    return lines


class FileErrorEntry(BaseModel):
    path: str
    reason: str


class MismatchEntry(BaseModel):
    path: str
    left_digest: str
    right_digest: str


class ComparisonSummary(BaseModel):
    """Machine-readable view of a :class:`ComparisonReport`."""

    left: str
    right: str
    matches: list[str] = Field(default_factory=list)
    mismatches: list[MismatchEntry] = Field(default_factory=list)
    missing_in_right: list[str] = Field(default_factory=list)
    only_in_right: list[str] = Field(default_factory=list)
    has_differences: bool = False


class ScanReport(BaseModel):
    """Full result of one ``dirdigest scan`` run."""

    algorithm: str
    root: str
    files: dict[str, str] = Field(default_factory=dict)
    errors: list[FileErrorEntry] = Field(default_factory=list)
    comparison: ComparisonSummary | None = None


def build_scan_report(
    hash_set: HashSet,
    comparison: ComparisonReport | None = None,
) -> ScanReport:
    summary = None
    if comparison is not None:
        summary = ComparisonSummary(
            left=comparison.left_label,
            right=comparison.right_label,
            matches=list(comparison.matches),
            mismatches=[
                MismatchEntry(
                    path=r.relative_path,
                    left_digest=r.left_digest,
                    right_digest=r.right_digest,
                )
                for r in comparison.left_entries
                if r.status is ComparisonStatus.MISMATCH
            ],
            missing_in_right=list(comparison.missing_in_right),
            only_in_right=list(comparison.only_in_right),
            has_differences=comparison.has_differences,
        )
    return ScanReport(
        algorithm=hash_set.algorithm.value,
        root=hash_set.root,
        files={e.relative_path: e.digest for e in hash_set.sorted_items()},
        errors=[
            FileErrorEntry(path=err.relative_path, reason=err.reason)
            for err in sorted(hash_set.errors, key=lambda err: path_sort_key(err.relative_path))
        ],
        comparison=summary,
    )
