"""
Prometheus metrics collection for instant-validate

This module provides metrics instrumentation for monitoring how often
forms are validated, how long a pass takes and which rules fail.
"""
from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

# Validation passes counter
validations_total = Counter(
    name="instant_validate_validations_total",
    documentation="Total number of validation passes",
    labelnames=["outcome"],  # outcome: valid, invalid
    registry=REGISTRY,
)

# Validation pass duration histogram
validation_duration_seconds = Histogram(
    name="instant_validate_validation_duration_seconds",
    documentation="Time spent in one validation pass in seconds",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
    registry=REGISTRY,
)

# Rule failures counter
rule_failures_total = Counter(
    name="instant_validate_rule_failures_total",
    documentation="Total number of failed rule evaluations",
    labelnames=["rule_name"],
    registry=REGISTRY,
)

# Unknown rule names skipped during validation
skipped_rules_total = Counter(
    name="instant_validate_skipped_rules_total",
    documentation="Total number of configured rule names that did not resolve to a rule",
    labelnames=["rule_name"],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        """
        Initialize duration tracker

        Args:
            histogram: Prometheus Histogram metric
            **labels: Label values for the metric
        """
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        """Start timer"""
        metric = self.histogram.labels(**self.labels) if self.labels else self.histogram
        self.timer = metric.time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timer"""
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


# =======================
# VALIDATION HELPERS
# =======================

def record_validation(valid: bool) -> None:
    """
    Record the outcome of a validation pass.

    Args:
        valid: Whether the pass produced an empty error report
    """
    increment_counter(validations_total, 1, outcome="valid" if valid else "invalid")


def record_rule_failure(rule_name: str) -> None:
    """
    Record a failed rule evaluation.

    Inline custom functions are recorded under the rule name they were
    configured with.

    Args:
        rule_name: Name of the rule that failed
    """
    increment_counter(rule_failures_total, 1, rule_name=rule_name)


def record_skipped_rule(rule_name: str) -> None:
    """Record a configured rule name that did not resolve to any rule."""
    increment_counter(skipped_rules_total, 1, rule_name=rule_name)
