"""StructuralComparator: orchestrator that wires StructuralDiffer + stats + timing.

This is the central wiring layer between the raw algorithm and the public
API.  It turns the differ's record list into a rich ``DiffResult`` with
per-kind counts and wall-clock timing.

Each comparator owns its options and nothing else; ``compare()`` builds a
fresh tree per call, so one instance may be shared freely between threads as
long as callers do not mutate the inputs while a comparison runs.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_structural_diff.algorithm.config import DiffOptions
from json_structural_diff.algorithm.differ import StructuralDiffer
from json_structural_diff.result import DiffResult
from json_structural_diff.stats import diff_stats

__all__ = ["StructuralComparator"]

logger = logging.getLogger(__name__)


class StructuralComparator:
    """Orchestrator for structural JSON comparison.

    Example::

        from json_structural_diff.comparator import StructuralComparator

        cmp = StructuralComparator()
        result = cmp.compare({"name": "Ada"}, {"name": "Grace"})
        print(result.stats.modified)   # 1
        print(result.to_text())
        # ~ name:
        #   - "Ada"
        #   + "Grace"
    """

    def __init__(self, options: DiffOptions | None = None) -> None:
        """Initialise the comparator.

        Args:
            options: Comparison flags.  Defaults to ``DiffOptions()`` when None.
        """
        self._options: DiffOptions = options if options is not None else DiffOptions()
        self._differ = StructuralDiffer(options=self._options)

    @property
    def options(self) -> DiffOptions:
        return self._options

    def compare(self, old: Any, new: Any) -> DiffResult:
        """Compare two JSON values and return a rich DiffResult.

        Args:
            old: Value on the old side (dict, list, str, int, float, bool, None).
            new: Value on the new side.

        Returns:
            A ``DiffResult`` with nodes, stats and computation_time_ms populated.

        Raises:
            TypeError: If either input contains a non-JSON value.
        """
        t0 = time.perf_counter()

        nodes = self._differ.compute(old, new)
        stats = diff_stats(nodes)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "compared values in %.3f ms (array_mode=%s, records=%d, changes=%d)",
            elapsed_ms,
            self._options.array_mode,
            stats.total_nodes,
            stats.total_changes,
        )

        return DiffResult(nodes=nodes, stats=stats, computation_time_ms=elapsed_ms)
