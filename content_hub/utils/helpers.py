"""Shared helpers."""
import json
import re
from datetime import datetime
from typing import Any

_TAG_RE = re.compile(r"<[^>]+>")


def safe_json_loads(value: str | None) -> dict | None:
    """Parse JSON string to dict. Return None if invalid or empty."""
    if not value:
        return None
    try:
        out = json.loads(value)
        return out if isinstance(out, dict) else None
    except (json.JSONDecodeError, TypeError):
        return None


def strip_html(value: str | None) -> str:
    """Drop HTML tags, keep the text between them."""
    return _TAG_RE.sub("", value or "")


def date_part(value: Any) -> str:
    """YYYY-MM-DD for a datetime or ISO string; empty when missing."""
    if not value:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    return str(value).split("T")[0]
