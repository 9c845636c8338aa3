"""
memtable Observability Module.

Provides logging setup and in-process metrics for store operations.
"""

from memtable.observability.logging_setup import configure_logging
from memtable.observability.metrics import MetricsStore, get_metrics_store

__all__ = ["MetricsStore", "configure_logging", "get_metrics_store"]
