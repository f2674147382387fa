"""
Constants and system prompts for the Impulse Buddy application.
"""

# The four guidance questions, asked in this order
GUIDANCE_QUESTIONS = (
    "Do you need this, or do you just want it?",
    "Where will you store this?",
    "Can you wait 24 hours before buying this?",
    "How will you feel about this purchase tomorrow?",
)

DEFAULT_SYSTEM_PROMPT = """You ONLY help with impulse spending decisions using these 4 questions IN ORDER:

1. "Do you need this, or do you just want it?"
2. "Where will you store this?"
3. "Can you wait 24 hours before buying this?"
4. "How will you feel about this purchase tomorrow?"

RULES:
- Ask ONE question at a time
- Wait for their answer before moving to next question
- Keep responses SHORT (1 sentence max) - ADHD brains get overwhelmed
- Talk casual like texting a friend
- ONLY discuss these 4 questions - nothing else
- If they try to talk about other stuff, gently bring them back to the current question

Start with question 1, then move through them in order. That's it."""

# Shown to the user when the server itself breaks
DEGRADED_RESPONSE = "ugh my brain's glitching rn but I'm still here! what were you thinking of buying?"


class ServiceLabel:
    """Service labels reported in reply envelopes."""
    LOCAL, OFFLINE = "Local Buddy", "Offline"


class ErrorMessage:
    """Client-facing error strings."""
    MESSAGE_REQUIRED = "Message is required"
    METHOD_NOT_ALLOWED = "Method not allowed"
    BODY_NOT_OBJECT = "Request body must be a JSON object"


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}
