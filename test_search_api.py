"""HTTP tests for the course search endpoints."""

from httpx import AsyncClient


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_empty_query_prompts_for_input(client: AsyncClient, course_id: int) -> None:
    response = await client.get("/search", params={"course_id": course_id})

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "empty_query"
    assert data["heading"] == "Search course content"
    assert data["message"] == "Type something to search course content."
    assert data["course_name"] == "Introduction to Statistics"
    assert data["results"] == []


async def test_query_without_matches_says_so(client: AsyncClient, course_id: int) -> None:
    response = await client.get("/search", params={"course_id": course_id, "q": "zebra"})

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "no_results"
    assert data["heading"] == "Search results for: zebra"
    assert data["message"] == 'No results found for "zebra"'
    assert data["total_count"] == 0


async def test_query_with_matches_lists_results(client: AsyncClient, course_id: int) -> None:
    response = await client.get("/search", params={"course_id": course_id, "q": "variance"})

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "results"
    assert data["total_count"] == 6
    assert data["message"] == "6 results found"
    first = data["results"][0]
    assert first["title"] == "Feedback (Week 1 quiz)"
    assert first["type"] == "Quiz - Feedback"
    assert first["preview"] == "Great work on variance!"
    assert first["url"].startswith("/mod/quiz/view.php?id=")
    record = data["results"][-1]
    assert record["preview"] == "Height measurements with low variance"
    assert "rid=" in record["url"]


async def test_unknown_course_is_not_found(client: AsyncClient, course_id: int) -> None:
    response = await client.get("/search", params={"course_id": 9999, "q": "variance"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Course not found."


async def test_course_id_is_required(client: AsyncClient) -> None:
    response = await client.get("/search", params={"q": "variance"})
    assert response.status_code == 422


async def test_search_form_describes_search_box(client: AsyncClient, course_id: int) -> None:
    response = await client.get("/search/form", params={"course_id": course_id})

    assert response.status_code == 200
    data = response.json()
    assert data["action"] == "/search"
    assert data["method"] == "get"
    assert data["query_field"] == "q"
    assert data["course_field"] == "course_id"
    assert data["placeholder"] == "Search course content"
    assert data["submit_label"] == "Search"


async def test_search_form_for_unknown_course(client: AsyncClient) -> None:
    response = await client.get("/search/form", params={"course_id": 9999})
    assert response.status_code == 404
