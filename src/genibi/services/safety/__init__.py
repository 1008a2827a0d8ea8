"""Safety services package - chat risk classification and escalation."""

from genibi.services.safety.keyword_taxonomy import KEYWORD_TAXONOMY, KeywordSet
from genibi.services.safety.risk_classifier import (
    KeywordMatch,
    RiskClassifier,
    classify,
    classify_text,
)
from genibi.services.safety.response_selector import BASE_RESOURCES, respond
from genibi.services.safety.emergency_resources import (
    MentalHealthResource,
    ResourceDirectory,
    ResourcePage,
)
from genibi.services.safety.escalation_manager import EscalationManager
from genibi.services.safety.safety_pipeline import SafetyPipeline

__all__ = [
    # Keyword data
    "KEYWORD_TAXONOMY",
    "KeywordSet",
    # Classifier
    "KeywordMatch",
    "RiskClassifier",
    "classify",
    "classify_text",
    # Response selection
    "BASE_RESOURCES",
    "respond",
    # Resources
    "MentalHealthResource",
    "ResourceDirectory",
    "ResourcePage",
    # Escalation
    "EscalationManager",
    # Unified pipeline
    "SafetyPipeline",
]
