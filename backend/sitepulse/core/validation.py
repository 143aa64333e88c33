from __future__ import annotations

from datetime import date, datetime
from typing import Any

from email_validator import EmailNotValidError, validate_email
from fastapi import HTTPException, status


def bad_request(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )


def is_blank(value: Any) -> bool:
    return not str(value or "").strip()


def require_non_empty_text(value: Any, detail: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise bad_request(detail)
    return text


def parse_date(value: Any) -> date | None:
    """Accepts a date or an ISO-8601 calendar date string; values with a time part are rejected."""
    if isinstance(value, datetime):
        return None
    if isinstance(value, date):
        return value
    text = str(value or "").strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def require_date(value: Any, detail: str) -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise bad_request(detail)
    return parsed


def parse_month(value: Any) -> tuple[int, int] | None:
    text = str(value or "").strip()
    try:
        parsed = datetime.strptime(text, "%Y-%m")
    except ValueError:
        return None
    return parsed.year, parsed.month


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def coerce_positive_int(value: Any, default: int) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default
