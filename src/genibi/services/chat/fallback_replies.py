"""
Fallback Replies

Rule-based assistant replies used when the chat model is not
configured, disabled, or failing. Replies are deterministic:
the same conversation and risk tier always give the same text.

SAFETY_NOTE: EMERGENCY always returns the crisis reply, whatever
topic the message also mentions.
"""

import re
from dataclasses import dataclass

from genibi.domain.enums.risk_level import RiskLevel
from genibi.domain.models.conversation import Conversation
from genibi.services.safety.emergency_resources import EMERGENCY_NUMBER, HELPLINE_NUMBER


@dataclass(frozen=True)
class TopicRule:
    """
    Topic trigger and its reply template.

    Attributes:
        name: Topic identifier
        pattern: Case-insensitive trigger pattern
        template: Reply text; may use {helpline}
    """

    name: str
    pattern: re.Pattern
    template: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


CRISIS_REPLY = """I'm really concerned about what you've shared, and I'm glad you told me. \
Your safety is the most important thing right now. Please reach out for help immediately:

- Call emergency services: {emergency_number}
- Call the GENIBI 24/7 helpline: {helpline}
- Go to the nearest hospital emergency room
- Stay with someone you trust until help arrives

You don't have to go through this alone. There are people who want to help you right now."""

HIGH_RISK_REPLY = """Thank you for trusting me with this. What you're describing sounds \
really heavy, and you deserve proper support.

- Please consider speaking with a counselor or therapist soon
- Your campus counseling center can see students for free
- Our helpline is open 24/7: {helpline}
- Try not to stay alone with these feelings - reach out to someone you trust

Would you like help finding a counselor near you?"""

DEFAULT_REPLY = """Thank you for sharing that with me. I'm here to listen and support you.

You can tell me more about how you're feeling, or I can share tips on managing stress, \
sleep, mood, or study pressure. If you ever need to talk to a person, our helpline \
is open 24/7: {helpline}"""

TOPIC_RULES: tuple[TopicRule, ...] = (
    TopicRule(
        name="stress",
        pattern=re.compile(r"stress|anxi|worried|overwhelm|exam", re.IGNORECASE),
        template="""I understand you're feeling stressed. Here are some techniques that can help:

- Take 5 slow breaths (4 seconds in, 6 seconds out)
- Try the 5-4-3-2-1 grounding technique
- Break your study work into small, timed blocks
- Step outside for fresh air if you can

If the stress keeps building, talking to a counselor helps. Our helpline: {helpline}""",
    ),
    TopicRule(
        name="sleep",
        pattern=re.compile(r"sleep|tired|insomnia|exhaust", re.IGNORECASE),
        template="""Sleep problems are really common during university. A few things that help:

- Keep the same sleep and wake time, even on weekends
- Put your phone away 30 minutes before bed
- Avoid caffeine after mid-afternoon
- If you can't sleep after 20 minutes, get up and do something calm

Would you like some relaxation exercises for bedtime?""",
    ),
    TopicRule(
        name="mood",
        pattern=re.compile(r"mood|feeling|sad|lonely|down\b|unhappy", re.IGNORECASE),
        template="""Thank you for sharing how you're feeling. Your feelings are valid.

- Logging your mood each day can help you spot patterns
- Spending a little time with friends or family can lift your mood
- Small activities you enjoy count, even for ten minutes

Would you like to talk more about what's been on your mind?""",
    ),
    TopicRule(
        name="medication",
        pattern=re.compile(r"medication|medicine|pills|prescription", re.IGNORECASE),
        template="""I can share general tips about managing medication:

- Take medication at the same time each day and set reminders
- Don't stop or change a dose without talking to your doctor
- Write down any side effects to discuss at your next appointment

For questions about your specific medication, please ask your doctor or pharmacist.""",
    ),
    TopicRule(
        name="appointment",
        pattern=re.compile(r"appointment|doctor|counsel+or|therapist", re.IGNORECASE),
        template="""Reaching out to a professional is a great step.

- Your campus counseling center offers free sessions for students
- Write down what you'd like to talk about before the session
- If you need to talk to someone sooner, our helpline is open 24/7: {helpline}""",
    ),
    TopicRule(
        name="greeting",
        pattern=re.compile(r"\b(hello|hi|hey|good (morning|afternoon|evening))\b", re.IGNORECASE),
        template="""Hello! I'm GENIBI, your wellness companion. How are you feeling today? \
You can talk to me about stress, sleep, mood, or anything on your mind.""",
    ),
    TopicRule(
        name="thanks",
        pattern=re.compile(r"\bthank", re.IGNORECASE),
        template="""You're welcome! Taking care of your mental health matters. \
I'm here whenever you want to talk.""",
    ),
)


class FallbackReplyGenerator:
    """
    Deterministic rule-based reply generator.

    Order of precedence:
    1. EMERGENCY tier: crisis reply
    2. HIGH tier: professional-help reply
    3. First matching topic rule on the last user message
    4. Default reply

    Usage:
        generator = FallbackReplyGenerator()
        text = generator.reply(conversation, RiskLevel.MEDIUM)
    """

    def __init__(
        self,
        helpline: str = HELPLINE_NUMBER,
        emergency_number: str = EMERGENCY_NUMBER,
        rules: tuple[TopicRule, ...] = TOPIC_RULES,
    ) -> None:
        self._helpline = helpline
        self._emergency_number = emergency_number
        self._rules = rules

    def topic_for(self, text: str) -> str:
        """Name of the first matching topic, or "default"."""
        for rule in self._rules:
            if rule.matches(text):
                return rule.name
        return "default"

    def reply(self, conversation: Conversation, level: RiskLevel) -> str:
        """
        Build the reply text.

        Args:
            conversation: Conversation the reply answers
            level: Risk tier already assessed for the conversation

        Returns:
            Assistant reply text
        """
        if level == RiskLevel.EMERGENCY:
            template = CRISIS_REPLY
        elif level == RiskLevel.HIGH:
            template = HIGH_RISK_REPLY
        else:
            message = conversation.last_user_message()
            text = message.content if message else ""
            template = next(
                (rule.template for rule in self._rules if rule.matches(text)),
                DEFAULT_REPLY,
            )

        return template.format(
            helpline=self._helpline,
            emergency_number=self._emergency_number,
        )
