"""Tests for the set comparator."""

from __future__ import annotations

import pytest

from dirdigest.compare import (
    ComparisonReport,
    ComparisonResult,
    ComparisonStatus,
    compare_hash_sets,
)
from dirdigest.hashing import HashAlgorithm, HashSet, compute_digest, hash_tree


def _hs(root: str, digests: dict[str, str]) -> HashSet:
    return HashSet(root, HashAlgorithm.SHA256, digests)


# ── Scenarios ────────────────────────────────────────────────────────


def test_match_missing_and_only_in_right(scenario_dirs):
    a, b = scenario_dirs
    report = compare_hash_sets(hash_tree(a), hash_tree(b), "A", "B")

    assert report.left_entries == (
        ComparisonResult(
            "x.txt",
            ComparisonStatus.IDENTICAL,
            left_digest=compute_digest(b"hello"),
            right_digest=compute_digest(b"hello"),
        ),
        ComparisonResult(
            "y.txt", ComparisonStatus.ONLY_IN_LEFT, left_digest=compute_digest(b"world")
        ),
    )
    assert report.only_in_right == ("z.txt",)
    assert report.right_only[0].status is ComparisonStatus.ONLY_IN_RIGHT


def test_binary_mismatch(make_tree):
    a = make_tree("A", {"a.bin": bytes([0x00, 0x01])})
    b = make_tree("B", {"a.bin": bytes([0x00, 0x02])})
    report = compare_hash_sets(hash_tree(a, "SHA256"), hash_tree(b, "SHA256"))

    (entry,) = report.left_entries
    assert entry.status is ComparisonStatus.MISMATCH
    assert entry.left_digest != entry.right_digest
    assert len(entry.left_digest) == len(entry.right_digest) == 64
    assert report.mismatches == ("a.bin",)
    assert report.has_differences


# ── Edge cases ───────────────────────────────────────────────────────


def test_both_empty():
    report = compare_hash_sets(_hs("l", {}), _hs("r", {}))
    assert report.left_entries == ()
    assert report.right_only == ()
    assert not report.has_differences


def test_left_empty():
    report = compare_hash_sets({}, {"b": "02", "a": "01"})
    assert report.left_entries == ()
    assert report.only_in_right == ("a", "b")


def test_right_empty():
    report = compare_hash_sets({"b": "02", "a": "01"}, {})
    assert report.missing_in_right == ("a", "b")
    assert report.right_only == ()


def test_identical_sets_have_no_differences():
    digests = {"a": "01", "b/c": "02"}
    report = compare_hash_sets(digests, dict(digests))
    assert report.matches == ("a", "b/c")
    assert not report.has_differences


def test_ordinal_ordering():
    left = {"b": "01", "B": "01", "a/b": "01", "a.b": "01", "é": "01"}
    report = compare_hash_sets(left, {})
    assert [r.relative_path for r in report.left_entries] == ["B", "a.b", "a/b", "b", "é"]


def test_undecodable_names_order_by_raw_bytes():
    left = {"\udcff": "01", "\ue000": "02"}
    right = {"\udcfe": "03", "\ue001": "04"}
    report = compare_hash_sets(left, right)
    assert [r.relative_path for r in report.left_entries] == ["\ue000", "\udcff"]
    assert list(report.only_in_right) == ["\ue001", "\udcfe"]


# ── Properties ───────────────────────────────────────────────────────


LEFT = {"same": "aa", "changed": "bb", "gone": "cc", "dir/same": "dd"}
RIGHT = {"same": "aa", "changed": "ee", "new": "ff", "dir/same": "dd", "dir/new": "11"}


def test_reports_partition_union():
    report = compare_hash_sets(LEFT, RIGHT)
    seen = [r.relative_path for r in report.left_entries + report.right_only]
    assert len(seen) == len(set(seen))
    assert set(seen) == set(LEFT) | set(RIGHT)
    assert {r.relative_path for r in report.left_entries} == set(LEFT)


def test_mirrored_comparison():
    forward = compare_hash_sets(LEFT, RIGHT)
    backward = compare_hash_sets(RIGHT, LEFT)
    assert forward.matches == backward.matches
    assert forward.mismatches == backward.mismatches
    assert forward.missing_in_right == backward.only_in_right
    assert forward.only_in_right == backward.missing_in_right


def test_pure_and_deterministic():
    left, right = dict(LEFT), dict(RIGHT)
    first = compare_hash_sets(left, right)
    second = compare_hash_sets(left, right)
    assert first == second
    assert left == LEFT
    assert right == RIGHT


# ── Labels and model validation ──────────────────────────────────────


def test_labels_default_to_hash_set_roots():
    report = compare_hash_sets(_hs("/data/one", {}), _hs("/data/two", {}))
    assert report.left_label == "/data/one"
    assert report.right_label == "/data/two"


def test_labels_for_plain_mappings():
    report = compare_hash_sets({}, {})
    assert (report.left_label, report.right_label) == ("left", "right")


def test_explicit_labels_win():
    report = compare_hash_sets(_hs("/x", {}), _hs("/y", {}), "primary", "backup")
    assert isinstance(report, ComparisonReport)
    assert (report.left_label, report.right_label) == ("primary", "backup")


def test_result_rejects_inconsistent_digests():
    with pytest.raises(ValueError):
        ComparisonResult("a", ComparisonStatus.ONLY_IN_RIGHT, left_digest="01")
    with pytest.raises(ValueError):
        ComparisonResult("a", ComparisonStatus.MISMATCH, left_digest="01")
