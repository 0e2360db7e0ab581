"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 100-key nested, 500-element arrays of records.
The array tier is compared with both strategies to show the O(n·m) cost of
unordered matching next to the linear ordered walk.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_changed_flat(num_keys: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a flat pair where every third value changes."""
    left = generate_flat_object(num_keys)
    right = dict(left)
    for i in range(0, num_keys, 3):
        right[f"key_{i}"] = f"changed_{i}"
    return left, right


def _make_changed_nested_100() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a 100-key nested pair: 10 sections x 10 leaves, one edit each."""
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    for i in range(10):
        section = {f"field_{i}_{j}": j for j in range(10)}
        left[f"section_{i}"] = section
        right[f"section_{i}"] = {**section, f"field_{i}_{i}": -1}
    return left, right


def _make_records_500() -> tuple[list[Any], list[Any]]:
    """Generate 500 records and a reversed copy with every tenth one edited."""
    left = [{"id": i, "name": f"item_{i}", "tags": [i % 7, i % 11]} for i in range(500)]
    right = [dict(record) for record in reversed(left)]
    for record in right[::10]:
        record["name"] = record["name"].upper()
    return left, right


@pytest.fixture
def pair_10key() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_changed_flat(10)


@pytest.fixture
def pair_100key() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_changed_nested_100()


@pytest.fixture
def pair_500_records() -> tuple[list[Any], list[Any]]:
    return _make_records_500()
