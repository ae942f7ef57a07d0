"""Custom Prometheus metrics for Validator Group.

Host applications expose these through their own /metrics endpoint.
Useful alert rules:
- group_validation_failures_total (sudden rise for one group)
- group_validation_latency_seconds (slow filters or validators)
"""

from prometheus_client import Counter, Histogram

from validator_group.config import settings

# === Validation Metrics ===

group_validations_total = Counter(
    "group_validations_total",
    "Total validation runs by group and result",
    ["group", "result"],
)
"""
Validation runs counter.

Labels:
- group: Name of the ValidationGroup subclass
- result: valid, invalid
"""

group_validation_failures_total = Counter(
    "group_validation_failures_total",
    "Total failed validation runs by group and reason",
    ["group", "reason"],
)
"""
Validation failures counter by group and reason.

Labels:
- group: Name of the ValidationGroup subclass
- reason: missing_required, validator_failed, minimum_fields, post_hook
"""

group_validation_latency_seconds = Histogram(
    "group_validation_latency_seconds",
    "Validation run latency in seconds",
    ["group"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)
"""
Validation run latency histogram.

Buckets are tuned for in-process checks (sub-millisecond to 1s); slow
runs usually mean a filter or validator is doing I/O.
"""


def record_validation(group: str, valid: bool, reason: str | None, latency_seconds: float) -> None:
    """
    Record one validation run.

    No-op when PROMETHEUS_ENABLED is false.

    Args:
        group: Group class name
        valid: Run verdict
        reason: Failure reason label (ignored for valid runs)
        latency_seconds: Wall time of the run
    """
    if not settings.PROMETHEUS_ENABLED:
        return

    group_validations_total.labels(
        group=group, result="valid" if valid else "invalid"
    ).inc()
    if not valid and reason:
        group_validation_failures_total.labels(group=group, reason=reason).inc()
    group_validation_latency_seconds.labels(group=group).observe(latency_seconds)
