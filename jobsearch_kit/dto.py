"""Request and response records exchanged with clients of the search API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

_DEFAULT_PER_PAGE = 50
_MAX_PER_PAGE = 100


class ValidationError(ValueError):
    """A request failed decoding or validation."""


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("request body must be a JSON object")
    return data


def _get_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"field {key!r} must be a string")
    return value


def _get_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"field {key!r} must be an integer")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise ValidationError(f"field {key!r} must be an integer")
    return value


@dataclass
class SearchRequest:
    """A vacancy search query."""

    query: str = ""
    country: str = ""
    per_page: int = 0
    page: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchRequest":
        """Build from a decoded JSON object; checks field types only."""
        data = _require_mapping(data)
        return cls(
            query=_get_str(data, "query"),
            country=_get_str(data, "country"),
            per_page=_get_int(data, "per_page"),
            page=_get_int(data, "page"),
        )

    def validate_and_normalize(self) -> None:
        """Fill in defaults, clamp the page size and reject invalid values."""
        if self.query == "":
            raise ValidationError("search text cannot be empty")
        if self.per_page == 0:
            self.per_page = _DEFAULT_PER_PAGE
        elif self.per_page > _MAX_PER_PAGE:
            self.per_page = _MAX_PER_PAGE
        if self.page == 0:
            self.page = 1
        if self.per_page < 1:
            raise ValidationError("per_page must be positive")
        if self.page < 1:
            raise ValidationError("page must be positive")


@dataclass
class SearchVacancyRequest:
    """A request for one vacancy from a given source."""

    vacancy_id: str = ""
    source: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchVacancyRequest":
        """Build from a decoded JSON object; checks field types only."""
        data = _require_mapping(data)
        return cls(
            vacancy_id=_get_str(data, "vacancy_id"),
            source=_get_str(data, "source"),
        )

    def validate_and_normalize(self) -> None:
        """Reject a request without a vacancy id or a source."""
        if self.vacancy_id == "":
            raise ValidationError("Vacancy ID can not be empty!")
        if self.source == "":
            raise ValidationError("Vacancy Source can not be empty!")


@dataclass
class SourceInfo:
    """Display name and icon of a vacancy source."""

    name: str = ""
    icon: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "icon": self.icon}


@dataclass
class VacancyResponse:
    """One vacancy as shown to the client."""

    id: str = ""
    job: str = ""
    company: str = ""
    salary: str = ""
    currency: str = ""
    location: str = ""
    experience: str = ""
    schedule: str = ""
    source: SourceInfo = field(default_factory=SourceInfo)
    url: str = ""
    description: str = ""
    published_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready form."""
        return {
            "id": self.id,
            "job": self.job,
            "company": self.company,
            "salary": self.salary,
            "currency": self.currency,
            "location": self.location,
            "experience": self.experience,
            "schedule": self.schedule,
            "source": self.source.to_dict(),
            "url": self.url,
            "description": self.description,
            "published_at": self.published_at,
        }


@dataclass
class SourceVacancies:
    """Vacancies found in one source, or the error it reported."""

    name: str = ""
    icon: str = ""
    vacancies: Optional[List[VacancyResponse]] = None
    count: int = 0
    has_error: bool = False
    error: str = ""
    duration: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready form; empty error and duration are omitted."""
        result: Dict[str, Any] = {
            "name": self.name,
            "icon": self.icon,
            "vacancies": None
            if self.vacancies is None
            else [vacancy.to_dict() for vacancy in self.vacancies],
            "count": self.count,
            "has_error": self.has_error,
        }
        if self.error:
            result["error"] = self.error
        if self.duration:
            result["duration"] = self.duration
        return result


@dataclass
class SearchVacanciesResponse:
    """Search results grouped by source."""

    results: Dict[str, SourceVacancies] = field(default_factory=dict)
    total: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready form."""
        return {
            "results": {key: value.to_dict() for key, value in self.results.items()},
            "total": self.total,
        }


@dataclass
class VacancyDetailsResponse:
    """Extended information about one vacancy."""

    id: str = ""
    job: str = ""
    company: str = ""
    salary: str = ""
    description: str = ""
    url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready form."""
        return {
            "id": self.id,
            "job": self.job,
            "company": self.company,
            "salary": self.salary,
            "description": self.description,
            "url": self.url,
        }