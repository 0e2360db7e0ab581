"""pytest plugin for json-structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_structural_diff import DiffOptions, compare


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh StructuralComparator per call).

    Usage in tests::

        def test_payload(assert_json_unchanged):
            assert_json_unchanged({"tags": ["a", "b"]}, {"tags": ["a", "b"]})

        def test_drift(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"~ name:"):
                assert_json_unchanged({"name": "x"}, {"name": "y"})

    Returns:
        A callable ``_assert(actual, expected, options=None) -> None`` that
        raises ``AssertionError`` when the comparison reports any change.
    """

    def _assert(
        actual: Any,
        expected: Any,
        options: DiffOptions | None = None,
    ) -> None:
        """Assert that two JSON documents are structurally identical.

        ``expected`` is the old side and ``actual`` the new side, so ADDED
        records are values ``actual`` has that ``expected`` lacks.

        Raises:
            AssertionError: When the diff contains any change, with a message
                holding the per-kind counts and the rendered diff.
        """
        result = compare(expected, actual, options=options)
        if result.has_changes:
            stats = result.stats
            raise AssertionError(
                f"JSON documents differ: "
                f"{stats.added} added, {stats.deleted} deleted, "
                f"{stats.modified} modified\n"
                f"{result.to_text()}"
            )

    return _assert
