"""Text formatting helpers for the console session."""

from __future__ import annotations

from datetime import datetime

DEFAULT_DATE_FORMAT = "%b %d, %Y %H:%M"

# (minimum percentage, message), checked top to bottom
PRODUCTIVITY_LEVELS: list[tuple[float, str]] = [
    (80.0, "Excellent productivity!"),
    (60.0, "Good progress!"),
    (40.0, "Keep going!"),
]
FALLBACK_MESSAGE = "You can do it!"


def format_timestamp(value: datetime, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a creation timestamp, e.g. ``Jan 05, 2024 14:30``."""
    return value.strftime(fmt)


def format_percentage(value: float) -> str:
    """Format a percentage with one decimal place."""
    return f"{value:.1f}%"


def productivity_message(percentage: float) -> str:
    """Pick an encouragement message for a completion percentage."""
    for threshold, message in PRODUCTIVITY_LEVELS:
        if percentage >= threshold:
            return message
    return FALLBACK_MESSAGE


def divider(char: str = "=", width: int = 50) -> str:
    """Build a horizontal rule."""
    return char * width
