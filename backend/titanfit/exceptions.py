"""
Exceptions raised by the AI integration.
"""


class AIServiceError(Exception):
    """The generation service is unavailable or misconfigured."""


class AIResponseError(AIServiceError):
    """The model returned an empty or unusable reply."""
