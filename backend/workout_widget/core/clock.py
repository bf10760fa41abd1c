from workout_widget.errors import InvalidArgument

def format_clock(seconds: int) -> str:
    """Render a duration as "M:SS" (minutes unpadded, unbounded)."""
    if seconds < 0:
        raise InvalidArgument(f"cannot format negative duration: {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"
