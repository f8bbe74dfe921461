"""Custom Prometheus metrics for the BFHL Classification API.

These metrics are exposed at /metrics endpoint alongside the default
HTTP metrics from prometheus-fastapi-instrumentator.
"""

from prometheus_client import Counter, Histogram

from bfhl_api.models.output_models import ClassificationResult

# === Request Metrics ===

bfhl_requests_total = Counter(
    "bfhl_requests_total",
    "Total /bfhl requests by outcome",
    ["status"],
)
"""
Labels:
- status: success, validation_error, error
"""

bfhl_request_items = Histogram(
    "bfhl_request_items",
    "Number of items per /bfhl request",
    buckets=(1, 5, 10, 25, 50, 100, 250, 500, 1000),
)

# === Classification Metrics ===

bfhl_items_classified_total = Counter(
    "bfhl_items_classified_total",
    "Total classified items by category",
    ["category"],
)
"""
Labels:
- category: odd_number, even_number, alphabet, special_character
"""


def record_classification(result: ClassificationResult) -> None:
    """Update classification metrics for one successful request."""
    counts = result.category_counts()
    for category, count in counts.items():
        if count:
            bfhl_items_classified_total.labels(category=category.value).inc(count)
    bfhl_request_items.observe(sum(counts.values()))
    bfhl_requests_total.labels(status="success").inc()
