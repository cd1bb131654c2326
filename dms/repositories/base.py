
def parse_id(value) -> int | None:
    """Primary keys arrive as ints or strings; anything non-numeric matches nothing."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None

def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
