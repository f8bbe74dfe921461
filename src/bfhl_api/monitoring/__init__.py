"""Monitoring and metrics instrumentation for the BFHL Classification API."""

from bfhl_api.monitoring.metrics import (
    bfhl_items_classified_total,
    bfhl_request_items,
    bfhl_requests_total,
    record_classification,
)

__all__ = [
    "bfhl_requests_total",
    "bfhl_request_items",
    "bfhl_items_classified_total",
    "record_classification",
]
