"""Small text helpers: salary ranges, identifiers and URLs."""

from __future__ import annotations

import secrets


def format_number(num: int) -> str:
    """Return ``num`` with thousands separated by spaces."""
    if num >= 1000:
        return f"{format_number(num // 1000)} {num % 1000:03d}"
    return str(num)


def format_salary(salary_from: int, salary_to: int, currency: str) -> str:
    """Describe a salary range; a bound of zero or less counts as missing."""
    if salary_from > 0 and salary_to > 0:
        return f"{format_number(salary_from)} - {format_number(salary_to)} {currency}"
    if salary_from > 0:
        return f"от {format_number(salary_from)} {currency}"
    return f"до {format_number(salary_to)} {currency}"


def quick_uuid() -> str:
    """Return a random identifier of 16 bytes in 8-4-4-4-12 hex groups."""
    raw = secrets.token_bytes(16).hex()
    return "-".join((raw[0:8], raw[8:12], raw[12:16], raw[16:20], raw[20:]))


def build_url(url: str, item_id: str) -> str:
    """Join a base URL and an item identifier with a slash."""
    return f"{url}/{item_id}"