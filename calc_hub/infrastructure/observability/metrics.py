"""Prometheus metrics for calculator usage and input rejections"""

from prometheus_client import REGISTRY, Counter, Histogram, write_to_textfile

calculation_counter = Counter(
    "calc_hub_calculation_total",
    "Calculator invocations",
    ["calculator", "outcome"],  # ok | invalid
)

calculation_duration_histogram = Histogram(
    "calc_hub_calculation_duration_seconds",
    "Time spent inside a calculator",
    ["calculator"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
)


def record_calculation(calculator: str, ok: bool, duration_seconds: float | None = None) -> None:
    """Record one calculator run; duration only for successful runs"""
    outcome = "ok" if ok else "invalid"
    calculation_counter.labels(calculator=calculator, outcome=outcome).inc()

    if duration_seconds is not None:
        calculation_duration_histogram.labels(calculator=calculator).observe(duration_seconds)


def export_textfile(path: str) -> None:
    """Write the default registry in Prometheus text format (node_exporter textfile collector)"""
    write_to_textfile(path, REGISTRY)
