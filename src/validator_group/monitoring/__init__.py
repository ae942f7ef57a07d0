"""Monitoring and metrics instrumentation for Validator Group.

Exports Prometheus metrics describing validation runs.
"""

from validator_group.monitoring.metrics import (
    group_validation_failures_total,
    group_validation_latency_seconds,
    group_validations_total,
    record_validation,
)

__all__ = [
    "group_validations_total",
    "group_validation_failures_total",
    "group_validation_latency_seconds",
    "record_validation",
]
