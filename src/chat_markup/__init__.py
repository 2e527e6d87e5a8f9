"""Chat Markup - inline message formatting for persona chat transcripts."""

__version__ = "0.1.0"
