import re

SQLITE_MAX_INTEGER = 2**63 - 1
MAX_PAGE = 1_000_000_000


def snip(text: str | None, max_chars: int = 180) -> str:
    """Collapse whitespace and cut text to max_chars, ending with an ellipsis when shortened."""
    if not text:
        return ""

    text = re.sub(r"\s+", " ", text).strip()

    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1].rstrip() + "…"


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return max(1, (total + limit - 1) // limit)


def fits_sqlite_integer(value: int) -> bool:
    return -SQLITE_MAX_INTEGER - 1 <= value <= SQLITE_MAX_INTEGER
