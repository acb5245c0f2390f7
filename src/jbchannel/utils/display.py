"""Helpers for terminal display."""


def truncate_text(text: str, max_length: int) -> str:
    """Truncate text to max_length, adding an ellipsis when cut."""
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."


def format_duration(seconds: int | None) -> str:
    """Format seconds as H:MM:SS or M:SS, or "-" when unknown."""
    if seconds is None:
        return "-"
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
