"""Prometheus metrics for quote calculation"""
from prometheus_client import Counter, CollectorRegistry

registry = CollectorRegistry()

quotes_calculated = Counter(
    'quotes_calculated_total',
    'Total quotes calculated',
    ['currency', 'vat_source'],
    registry=registry
)

quote_input_rejected = Counter(
    'quote_input_rejected_total',
    'Total quote calculations rejected for invalid numeric input',
    ['field'],
    registry=registry
)

quote_formatting_failures = Counter(
    'quote_formatting_failures_total',
    'Total quote breakdowns that could not be formatted',
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    from prometheus_client import generate_latest
    return generate_latest(registry).decode('utf-8')
