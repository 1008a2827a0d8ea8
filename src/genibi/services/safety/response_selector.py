"""
Response Selector

Fixed lookup from risk tier to suggestions and resources.

SAFETY-CRITICAL: Escalation adds resources, it never removes the
baseline ones. Entry order is display order (most urgent first).

LEGAL_REVIEW_REQUIRED: Suggestion wording and phone numbers must
be verified before each release.
"""

from types import MappingProxyType
from typing import Mapping

from genibi.domain.enums.risk_level import RiskLevel
from genibi.domain.models.risk_models import ResponseBundle
from genibi.services.safety.emergency_resources import (
    EMERGENCY_NUMBER,
    HELPLINE_NUMBER,
    POLICE_NUMBER,
)

BASE_RESOURCES: tuple[str, ...] = (
    f"GENIBI 24/7 Helpline: {HELPLINE_NUMBER}",
    "Campus Counseling Services",
    "Peer Support Groups",
    "GENIBI E-Library",
    "Mental Health First Aid Guide",
)

ESCALATION_RESOURCES: tuple[str, ...] = (
    f"Emergency Services: {EMERGENCY_NUMBER} or {POLICE_NUMBER}",
    "Crisis Intervention Centers",
    "Suicide Prevention Hotline",
    "Professional Therapists Directory",
)

SUGGESTIONS: Mapping[RiskLevel, tuple[str, ...]] = MappingProxyType({
    RiskLevel.EMERGENCY: (
        f"Contact emergency services immediately ({EMERGENCY_NUMBER} or {POLICE_NUMBER})",
        f"Call the GENIBI crisis helpline: {HELPLINE_NUMBER}",
        "Reach out to a trusted friend or family member now",
        "Go to the nearest hospital emergency room",
        "Call campus security for immediate help",
    ),
    RiskLevel.HIGH: (
        "Schedule an appointment with a counselor or therapist",
        "Contact your university counseling center",
        "Avoid being alone - stay with supportive people",
        "Practice grounding or deep breathing exercises",
        "Maintain a regular sleep schedule",
    ),
    RiskLevel.MEDIUM: (
        "Talk to someone you trust",
        "Try mindfulness or meditation",
        "Practice stress management techniques",
        "Engage in physical exercise",
        "Consider joining a support group",
    ),
    RiskLevel.LOW: (
        "Maintain healthy daily routines",
        "Stay connected with friends and family",
        "Practice regular self-care",
        "Keep a balance between study and rest",
    ),
})

RESOURCES: Mapping[RiskLevel, tuple[str, ...]] = MappingProxyType({
    RiskLevel.EMERGENCY: ESCALATION_RESOURCES + BASE_RESOURCES,
    RiskLevel.HIGH: ESCALATION_RESOURCES + BASE_RESOURCES,
    RiskLevel.MEDIUM: BASE_RESOURCES,
    RiskLevel.LOW: BASE_RESOURCES,
})


def respond(level: RiskLevel) -> ResponseBundle:
    """
    Select the response bundle for a risk tier.

    Args:
        level: Risk tier from the classifier

    Returns:
        ResponseBundle with ordered suggestions and resources
    """
    return ResponseBundle(
        suggestions=SUGGESTIONS[level],
        resources=RESOURCES[level],
    )
