"""
GENIBI - Mental Wellness Companion Backend

Chat safety services for the GENIBI student wellness platform:
risk classification of chat messages, supportive response selection,
and emergency resource surfacing.

IMPORTANT: Risk classification output drives crisis messaging.
Changes to keyword data or response tables need clinical review.
"""

__version__ = "0.1.0"
__author__ = "GENIBI Engineering Team"
