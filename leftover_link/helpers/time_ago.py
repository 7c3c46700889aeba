"""Human-friendly "time ago" strings for listing timestamps."""

from datetime import datetime
from typing import Optional


def time_ago(created_at: datetime, now: Optional[datetime] = None) -> str:
    """
    Describe how long ago ``created_at`` was.

    Examples: "Just now", "5m ago", "2h ago", "3d ago", "4w ago". Each unit
    is truncated, and timestamps in the future read as "Just now".

    Args:
        created_at: The timestamp to describe
        now: Reference time (defaults to the current time, matching the
            timezone-awareness of created_at)

    Returns:
        Short display string
    """
    if now is None:
        now = datetime.now(created_at.tzinfo) if created_at.tzinfo else datetime.now()

    seconds = int((now - created_at).total_seconds())
    if seconds < 60:
        return "Just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 7:
        return f"{days}d ago"
    return f"{days // 7}w ago"
