"""Packaging correctness verification for json-structural-diff.

Tests validate that:
- The top-level import exposes the documented API
- py.typed marker ships inside the package
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the current installation rather than building wheels.
"""

from __future__ import annotations

from importlib.metadata import entry_points, version
from pathlib import Path


class TestBaseInstall:
    def test_import_json_structural_diff(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import json_structural_diff

        assert hasattr(json_structural_diff, "compare_json")
        assert hasattr(json_structural_diff, "diff_stats")
        assert hasattr(json_structural_diff, "format_as_text")

    def test_py_typed_marker_present(self):  # type: ignore[no-untyped-def]
        """py.typed marker must sit next to the package __init__."""
        import json_structural_diff

        package_dir = Path(json_structural_diff.__file__).parent
        assert (package_dir / "py.typed").is_file()

    def test_package_logger_has_null_handler(self):  # type: ignore[no-untyped-def]
        """Importing the library must not configure output handlers."""
        import logging

        import json_structural_diff  # noqa: F401

        handlers = logging.getLogger("json_structural_diff").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-structural-diff."""
        pytest11_eps = entry_points(group="pytest11")
        ours = [ep for ep in pytest11_eps if "json_structural_diff" in ep.value]
        assert ours, (
            f"No pytest11 entry point found for json-structural-diff. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_json_unchanged fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module(
            "json_structural_diff.integrations._pytest_plugin"
        )
        assert hasattr(mod, "assert_json_unchanged")
        assert callable(mod.assert_json_unchanged)


class TestPackageMetadata:
    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import json_structural_diff

        assert json_structural_diff.__version__ == "0.1.0"
        assert version("json-structural-diff") == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_structural_diff

        expected = {
            "ArrayComparisonMode",
            "DiffKind",
            "DiffNode",
            "DiffOptions",
            "DiffResult",
            "DiffStats",
            "DiffTree",
            "StructuralComparator",
            "ValueKind",
            "classify",
            "compare",
            "compare_json",
            "compare_json_text",
            "diff_stats",
            "format_as_text",
            "is_identical",
            "iter_nodes",
        }
        actual = set(json_structural_diff.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
