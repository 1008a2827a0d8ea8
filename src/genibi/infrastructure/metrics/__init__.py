"""Metrics infrastructure package."""

from genibi.infrastructure.metrics.prometheus_metrics import (
    # Safety metrics
    RISK_ASSESSMENTS_TOTAL,
    ESCALATIONS_TOTAL,
    CLASSIFIER_FAILURES_TOTAL,
    # Chat / LLM metrics
    LLM_REQUESTS_TOTAL,
    LLM_LATENCY,
    FALLBACK_REPLIES_TOTAL,
    # API metrics
    RATE_LIMIT_EXCEEDED,
    # Helpers
    track_llm_request,
    track_risk_assessment,
    track_escalation,
    track_fallback_reply,
    update_system_info,
    # Router
    metrics_router,
)

__all__ = [
    "RISK_ASSESSMENTS_TOTAL",
    "ESCALATIONS_TOTAL",
    "CLASSIFIER_FAILURES_TOTAL",
    "LLM_REQUESTS_TOTAL",
    "LLM_LATENCY",
    "FALLBACK_REPLIES_TOTAL",
    "RATE_LIMIT_EXCEEDED",
    "track_llm_request",
    "track_risk_assessment",
    "track_escalation",
    "track_fallback_reply",
    "update_system_info",
    "metrics_router",
]
