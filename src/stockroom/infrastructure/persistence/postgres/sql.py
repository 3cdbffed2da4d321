"""Small SQL helpers shared by the repositories."""


def contains_pattern(term: str) -> str:
    """ILIKE pattern matching ``term`` anywhere, with wildcards in it escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
