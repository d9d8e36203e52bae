"""
Prometheus metrics collection for product-feed

Counts parsed and rejected lines per source and parse errors per error type,
and times each batch. Metrics live on a private registry so importing this
module never touches the process-wide default registry.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# Lines processed counter
lines_total = Counter(
    name="product_feed_lines_total",
    documentation="Total number of input lines processed",
    labelnames=["source_name", "status"],  # status: parsed, rejected
    registry=REGISTRY,
)

# Parse errors by kind
parse_errors_total = Counter(
    name="product_feed_parse_errors_total",
    documentation="Total number of lines rejected, by parse error type",
    labelnames=["error_type"],
    registry=REGISTRY,
)

# Batch duration histogram
batch_duration_seconds = Histogram(
    name="product_feed_batch_duration_seconds",
    documentation="Time spent parsing one source in seconds",
    labelnames=["source_name"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0, 60.0],
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    if value:
        counter.labels(**labels).inc(value)


def record_batch_processing(
    source_name: str,
    parsed_lines: int,
    rejected_error_types: list[str],
    duration_seconds: float,
) -> None:
    """
    Record the metrics for one parsed source

    Args:
        source_name: Source label
        parsed_lines: Lines turned into records
        rejected_error_types: Error type name of every rejected line
        duration_seconds: Time spent on the source
    """
    increment_counter(lines_total, parsed_lines, source_name=source_name, status="parsed")
    increment_counter(lines_total, len(rejected_error_types), source_name=source_name, status="rejected")
    for error_type in rejected_error_types:
        increment_counter(parse_errors_total, error_type=error_type)
    batch_duration_seconds.labels(source_name=source_name).observe(duration_seconds)


def get_sample_value(name: str, labels: dict[str, str]) -> float:
    """
    Current value of a sample, 0.0 if it has not been recorded yet

    Args:
        name: Sample name (e.g., "product_feed_lines_total")
        labels: Label values identifying the sample
    """
    value = REGISTRY.get_sample_value(name, labels)
    return value if value is not None else 0.0
