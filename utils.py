"""
Utility functions for measuring combinator traversals

This module provides counting wrappers for sources and predicates, a
performance recorder built on time.perf_counter and tracemalloc, and the
logging setup used by the demo script.
"""

import sys
import time
import logging
import tracemalloc
from typing import Any, Callable, Iterable, List

from models import TraversalReport, PerformanceSummary

logger = logging.getLogger(__name__)


# Global performance tracking
_performance_metrics: List[TraversalReport] = []


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure root logging for scripts that use the combinators"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger('exotic')


class CountingIterator:
    """Wraps a source and records how far it was pulled"""

    def __init__(self, iterable: Iterable[Any]):
        self._it = iter(iterable)
        self.pulled = 0
        self.exhausted = False

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        try:
            item = next(self._it)
        except StopIteration:
            self.exhausted = True
            raise
        self.pulled += 1
        return item


class CountingPredicate:
    """Wraps a predicate and records every item it was called with"""

    def __init__(self, predicate: Callable[[Any], bool]):
        self._predicate = predicate
        self.seen: List[Any] = []

    @property
    def calls(self) -> int:
        return len(self.seen)

    def __call__(self, item: Any) -> bool:
        self.seen.append(item)
        return self._predicate(item)


def measure_traversal(operation_name: str, operation: Callable[..., bool],
                      iterable: Iterable[Any], *args, **kwargs) -> TraversalReport:
    """Run `operation(source, *args, **kwargs)` over a counted source and
    record time, peak memory and how many items it pulled"""

    source = CountingIterator(iterable)

    tracemalloc.start()
    start_time = time.perf_counter()

    try:
        result = operation(source, *args, **kwargs)
    except Exception as e:
        _finish_report(operation_name, source, start_time, success=False, error=str(e))
        logger.error(f"{operation_name} failed after {source.pulled} items: {e}")
        raise
    else:
        report = _finish_report(operation_name, source, start_time, success=True, result=result)
        logger.info(
            f"{operation_name} -> {result} "
            f"(pulled {source.pulled}, exhausted={source.exhausted}, {report.execution_time_ms:.3f} ms)"
        )
        return report
    finally:
        tracemalloc.stop()


def _finish_report(operation_name: str, source: CountingIterator, start_time: float,
                   **fields) -> TraversalReport:
    execution_time_ms = (time.perf_counter() - start_time) * 1000
    current, peak = tracemalloc.get_traced_memory()

    report = TraversalReport(
        operation=operation_name,
        items_pulled=source.pulled,
        exhausted=source.exhausted,
        execution_time_ms=execution_time_ms,
        memory_usage_mb=peak / 1024 / 1024,
        timestamp=time.time(),
        **fields
    )
    _performance_metrics.append(report)
    return report


def get_performance_summary() -> PerformanceSummary:
    """Get summary of all recorded traversals"""
    count = len(_performance_metrics)
    if count == 0:
        return PerformanceSummary()

    total_time_ms = sum(r.execution_time_ms for r in _performance_metrics)
    total_memory_mb = sum(r.memory_usage_mb for r in _performance_metrics)
    return PerformanceSummary(
        total_operations=count,
        total_items_pulled=sum(r.items_pulled for r in _performance_metrics),
        total_time_ms=total_time_ms,
        total_memory_mb=total_memory_mb,
        avg_time_ms=total_time_ms / count,
        avg_memory_mb=total_memory_mb / count,
        operations=[r.operation for r in _performance_metrics],
    )


def clear_performance_metrics():
    """Clear all recorded traversals"""
    _performance_metrics.clear()
