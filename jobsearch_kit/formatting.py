"""Human-readable presentation of vacancy fields."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

_SOURCE_NAMES = {
    "hh": "hh.ru",
    "superjob": "SuperJob",
    "habr": "Habr Career",
    "zarplata": "Зарплата.ру",
}

_SOURCE_ICONS = {
    "hh": "https://hh.ru/favicon.ico",
    "superjob": "https://www.superjob.ru/favicon.ico",
    "habr": "https://career.habr.com/favicon.ico",
}

_CURRENCY_SYMBOLS = {
    "RUB": "₽",
    "RUR": "₽",
    "USD": "$",
    "EUR": "€",
}

_EXPERIENCE = {
    "noExperience": "Нет опыта",
    "between1And3": "1-3 года",
    "between3And6": "3-6 лет",
    "moreThan6": "Более 6 лет",
}

_SCHEDULE = {
    "fullDay": "Полный день",
    "shift": "Сменный график",
    "flexible": "Гибкий график",
    "remote": "Удаленная работа",
    "flyInFlyOut": "Вахтовый метод",
}


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - _trunc_div(a, b) * b


def source_name(source: str) -> str:
    """Return the display name of a source, or the source itself."""
    return _SOURCE_NAMES.get(source, source)


def source_icon(source: str) -> str:
    """Return the icon URL of a source, or an empty string."""
    return _SOURCE_ICONS.get(source, "")


def currency_symbol(currency: str) -> str:
    """Return the symbol of a currency code, or the code unchanged."""
    return _CURRENCY_SYMBOLS.get(currency.upper(), currency)


def format_salary_text(salary: Optional[str], currency: str) -> str:
    """Append the currency symbol to a salary, or say it is not given."""
    if not salary:
        return "не указана"
    return f"{salary} {currency_symbol(currency)}"


def format_experience(exp: str) -> str:
    """Translate an experience code; unknown codes pass through."""
    return _EXPERIENCE.get(exp, exp)


def format_schedule(schedule: str) -> str:
    """Translate a schedule code; unknown codes pass through."""
    return _SCHEDULE.get(schedule, schedule)


def pluralize(n: int, singular: str, few: str, many: str) -> str:
    """Pick the Russian plural form that goes with ``n``."""
    n = _trunc_mod(n, 100)
    if 11 <= n <= 19:
        return many
    last = _trunc_mod(n, 10)
    if last == 1:
        return singular
    if last in (2, 3, 4):
        return few
    return many


def format_published_at(published_at: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``published_at`` was, relative to ``now``.

    Beyond thirty days the date itself is shown as ``DD.MM.YYYY``.
    """
    if now is None:
        now = datetime.now(published_at.tzinfo)
    diff = now - published_at

    if diff < timedelta(hours=1):
        minutes = int(diff / timedelta(minutes=1))
        if minutes == 0:
            return "только что"
        return f"{minutes} {pluralize(minutes, 'минуту', 'минуты', 'минут')} назад"
    if diff < timedelta(hours=24):
        hours = int(diff / timedelta(hours=1))
        return f"{hours} {pluralize(hours, 'час', 'часа', 'часов')} назад"
    if diff < timedelta(days=30):
        days = int(diff / timedelta(days=1))
        return f"{days} {pluralize(days, 'день', 'дня', 'дней')} назад"
    return published_at.strftime("%d.%m.%Y")


def format_duration(seconds: float) -> str:
    """Render a duration in seconds as microseconds, milliseconds or seconds."""
    nanos = round(seconds * 1_000_000_000)
    if nanos < 1_000_000:
        return f"{_trunc_div(nanos, 1_000)}µs"
    if nanos < 1_000_000_000:
        return f"{nanos // 1_000_000}ms"
    return f"{nanos / 1_000_000_000:.1f}s"