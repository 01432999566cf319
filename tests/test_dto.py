import pytest

from jobsearch_kit.dto import (
    SearchRequest,
    SearchVacanciesResponse,
    SearchVacancyRequest,
    SourceInfo,
    SourceVacancies,
    ValidationError,
    VacancyDetailsResponse,
    VacancyResponse,
)


def test_search_request_defaults_filled():
    req = SearchRequest(query="python")
    req.validate_and_normalize()
    assert req.per_page == 50
    assert req.page == 1


def test_search_request_per_page_clamped():
    req = SearchRequest(query="go", per_page=500, page=3)
    req.validate_and_normalize()
    assert req.per_page == 100
    assert req.page == 3


def test_search_request_valid_values_kept():
    req = SearchRequest(query="rust", per_page=20, page=2)
    req.validate_and_normalize()
    assert (req.per_page, req.page) == (20, 2)


def test_search_request_empty_query():
    with pytest.raises(ValidationError, match="search text cannot be empty"):
        SearchRequest().validate_and_normalize()


def test_search_request_negative_per_page():
    with pytest.raises(ValidationError, match="per_page must be positive"):
        SearchRequest(query="x", per_page=-1).validate_and_normalize()


def test_search_request_negative_page():
    with pytest.raises(ValidationError, match="page must be positive"):
        SearchRequest(query="x", page=-2).validate_and_normalize()


def test_search_request_from_dict():
    req = SearchRequest.from_dict({"query": "java", "country": "RU", "per_page": 10, "page": 1})
    assert req == SearchRequest(query="java", country="RU", per_page=10, page=1)


def test_search_request_from_dict_missing_fields():
    req = SearchRequest.from_dict({"query": "java"})
    assert (req.country, req.per_page, req.page) == ("", 0, 0)


@pytest.mark.parametrize(
    "data",
    [[], {"query": 5}, {"query": "a", "per_page": "10"}, {"query": "a", "page": True}, {"query": "a", "page": 1.5}],
)
def test_search_request_from_dict_rejects_bad_types(data):
    with pytest.raises(ValidationError):
        SearchRequest.from_dict(data)


def test_vacancy_request_validation():
    SearchVacancyRequest(vacancy_id="1", source="hh").validate_and_normalize()
    with pytest.raises(ValidationError, match="Vacancy ID can not be empty!"):
        SearchVacancyRequest(source="hh").validate_and_normalize()
    with pytest.raises(ValidationError, match="Vacancy Source can not be empty!"):
        SearchVacancyRequest(vacancy_id="1").validate_and_normalize()


def test_vacancy_request_from_dict():
    req = SearchVacancyRequest.from_dict({"vacancy_id": "77", "source": "hh"})
    assert req == SearchVacancyRequest(vacancy_id="77", source="hh")


def test_vacancy_response_to_dict():
    vacancy = VacancyResponse(
        id="1",
        job="Developer",
        source=SourceInfo(name="hh.ru", icon="https://hh.ru/favicon.ico"),
        published_at="только что",
    )
    data = vacancy.to_dict()
    assert data["id"] == "1"
    assert data["job"] == "Developer"
    assert data["source"] == {"name": "hh.ru", "icon": "https://hh.ru/favicon.ico"}
    assert data["published_at"] == "только что"
    assert set(data) == {
        "id", "job", "company", "salary", "currency", "location",
        "experience", "schedule", "source", "url", "description", "published_at",
    }


def test_source_vacancies_omits_empty_optional_fields():
    data = SourceVacancies(name="SuperJob").to_dict()
    assert "error" not in data
    assert "duration" not in data
    assert data["vacancies"] is None
    assert data["has_error"] is False


def test_source_vacancies_with_error_and_items():
    item = VacancyResponse(id="9")
    data = SourceVacancies(
        name="hh.ru", vacancies=[item], count=1, has_error=True, error="boom", duration="1.2s"
    ).to_dict()
    assert data["error"] == "boom"
    assert data["duration"] == "1.2s"
    assert data["vacancies"] == [item.to_dict()]
    assert data["count"] == 1


def test_search_vacancies_response_to_dict():
    group = SourceVacancies(name="hh.ru", count=2)
    response = SearchVacanciesResponse(results={"hh": group}, total=2)
    assert response.to_dict() == {"results": {"hh": group.to_dict()}, "total": 2}


def test_vacancy_details_to_dict():
    details = VacancyDetailsResponse(id="5", job="QA", company="Acme", salary="100", description="d", url="u")
    assert details.to_dict() == {
        "id": "5", "job": "QA", "company": "Acme", "salary": "100", "description": "d", "url": "u",
    }