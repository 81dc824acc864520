"""Helper functions for maintenance task display strings."""

from typing import Optional


def format_interval(
    interval_miles: Optional[float], interval_months: Optional[float]
) -> Optional[str]:
    """
    Build a human-readable recurrence from raw interval fields.

    - Miles only: '5,000 mi'
    - Months only: '6 mo'
    - Both: '5,000 mi / 6 mo' (whichever comes first)
    - Neither: None
    """
    parts = []
    if interval_miles:
        parts.append(f"{interval_miles:,.0f} mi")
    if interval_months:
        months = int(interval_months) if interval_months == int(interval_months) else interval_months
        parts.append(f"{months} mo")
    return " / ".join(parts) if parts else None


def format_task_label(task_name: str, interval_description: str) -> str:
    """Format a task for display in the selector."""
    return f"{task_name} (Every {interval_description})"
