"""
Prometheus Metrics

Metrics for GENIBI chat safety observability.
Exposes metrics at /metrics endpoint for Prometheus scraping.

ARCHITECTURE: Metrics are decoupled from business logic.
Only increment/observe; never block on metrics operations.
"""

import time
from functools import wraps
from typing import Callable

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    generate_latest,
    CONTENT_TYPE_LATEST,
    REGISTRY,
)
from fastapi import APIRouter, Response

from genibi import __version__

# =============================================================================
# SAFETY METRICS
# =============================================================================

RISK_ASSESSMENTS_TOTAL = Counter(
    "genibi_risk_assessments_total",
    "Chat risk assessments by level",
    ["risk_level"],  # low, medium, high, emergency
)

ESCALATIONS_TOTAL = Counter(
    "genibi_escalations_total",
    "Emergency escalations surfaced to users",
)

CLASSIFIER_FAILURES_TOTAL = Counter(
    "genibi_classifier_failures_total",
    "Assessments that fell back to the empty-conversation result",
)

# =============================================================================
# CHAT / LLM METRICS
# =============================================================================

LLM_REQUESTS_TOTAL = Counter(
    "genibi_llm_requests_total",
    "Total LLM API requests",
    ["provider", "status"],  # success, error, rate_limited
)

LLM_LATENCY = Histogram(
    "genibi_llm_latency_seconds",
    "LLM API request latency",
    ["provider"],
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)

FALLBACK_REPLIES_TOTAL = Counter(
    "genibi_fallback_replies_total",
    "Chat replies produced by the rule-based fallback",
    ["reason"],  # not_configured, disabled, provider_error
)

# =============================================================================
# API METRICS
# =============================================================================

RATE_LIMIT_EXCEEDED = Counter(
    "genibi_rate_limit_exceeded_total",
    "Rate limit exceeded events",
    ["client_type"],  # standard, chat
)

SYSTEM_INFO = Info(
    "genibi_system",
    "GENIBI system information",
)

SYSTEM_INFO.info({
    "version": __version__,
    "environment": "development",  # Updated at runtime
})


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def track_llm_request(provider: str) -> Callable:
    """Decorator to track LLM request metrics."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                LLM_REQUESTS_TOTAL.labels(provider=provider, status="success").inc()
                return result
            except Exception as e:
                error_type = "rate_limited" if "rate" in str(e).lower() else "error"
                LLM_REQUESTS_TOTAL.labels(provider=provider, status=error_type).inc()
                raise
            finally:
                LLM_LATENCY.labels(provider=provider).observe(time.time() - start_time)
        return wrapper
    return decorator


def track_risk_assessment(risk_level: str) -> None:
    """Record risk assessment level."""
    RISK_ASSESSMENTS_TOTAL.labels(risk_level=risk_level).inc()


def track_escalation() -> None:
    ESCALATIONS_TOTAL.inc()


def track_fallback_reply(reason: str) -> None:
    FALLBACK_REPLIES_TOTAL.labels(reason=reason).inc()


# =============================================================================
# METRICS ENDPOINT
# =============================================================================

metrics_router = APIRouter(tags=["metrics"])


@metrics_router.get("/metrics")
async def metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format for scraping.
    """
    return Response(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST,
    )


def update_system_info(environment: str, version: str = __version__) -> None:
    """Update system info metric with current environment."""
    SYSTEM_INFO.info({
        "version": version,
        "environment": environment,
    })
