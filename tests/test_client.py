"""Tests for the Canvas HTTP client and collection pagination."""

import json

import httpx
import pytest

from conftest import FakeCanvas, paged
from mcp_servers.servers.canvas.client import UNKNOWN_ERROR_MESSAGE, CanvasError

COLLECTION = "/api/v1/courses/1/users"


def records(count):
    return [{"id": i, "name": f"Learner {i}"} for i in range(1, count + 1)]


def page_numbers(fake):
    return [int(r.url.params["page"]) for r in fake.calls("GET", COLLECTION)]


class TestFetchAll:
    """Tests for page-numbered pagination."""

    async def test_collects_every_page_in_order(self):
        """237 records at 100 per page take three requests."""
        fake = FakeCanvas().on("GET", COLLECTION, paged(records(237)))
        client = fake.client(per_page=100)

        result = await client.fetch_all(COLLECTION)

        assert len(result) == 237
        assert [r["id"] for r in result] == list(range(1, 238))
        assert page_numbers(fake) == [1, 2, 3]
        assert all(r.url.params["per_page"] == "100" for r in fake.requests)

    async def test_exact_multiple_needs_one_empty_page(self):
        fake = FakeCanvas().on("GET", COLLECTION, paged(records(200)))
        result = await fake.client(per_page=100).fetch_all(COLLECTION)

        assert len(result) == 200
        assert page_numbers(fake) == [1, 2, 3]

    async def test_empty_collection_is_one_request(self):
        fake = FakeCanvas().on("GET", COLLECTION, [])
        result = await fake.client().fetch_all(COLLECTION)

        assert result == []
        assert len(fake.requests) == 1

    async def test_stops_at_first_short_page(self):
        """Pages of sizes [P, P, k<P] mean exactly three requests."""
        fake = FakeCanvas().on("GET", COLLECTION, paged(records(25)))
        result = await fake.client(per_page=10).fetch_all(COLLECTION)

        assert len(result) == 25
        assert page_numbers(fake) == [1, 2, 3]

    async def test_oversized_page_ends_the_walk(self):
        """An upstream that ignores per_page is read once, not forever."""
        fake = FakeCanvas().on("GET", COLLECTION, records(150))
        result = await fake.client(per_page=100).fetch_all(COLLECTION)

        assert len(result) == 150
        assert page_numbers(fake) == [1]

    async def test_duplicates_are_kept(self):
        """Records are concatenated as served, without de-duplication."""
        fake = FakeCanvas().on("GET", COLLECTION, paged([{"id": 1}, {"id": 1}, {"id": 2}]))
        result = await fake.client(per_page=2).fetch_all(COLLECTION)

        assert result == [{"id": 1}, {"id": 1}, {"id": 2}]

    async def test_caller_params_are_forwarded_to_every_page(self):
        fake = FakeCanvas().on("GET", COLLECTION, paged(records(15)))
        await fake.client(per_page=10).fetch_all(COLLECTION, {"include[]": ["email", "avatar_url"]})

        for request in fake.requests:
            assert request.url.params.get_list("include[]") == ["email", "avatar_url"]

    async def test_per_page_param_overrides_default(self):
        fake = FakeCanvas().on("GET", COLLECTION, paged(records(5)))
        result = await fake.client(per_page=100).fetch_all(COLLECTION, {"per_page": 2})

        assert len(result) == 5
        assert page_numbers(fake) == [1, 2, 3]

    async def test_failed_page_discards_partial_results(self):
        """A failure on page 2 raises; page 1 is never returned."""

        def handler(request):
            if request.url.params["page"] == "2":
                return httpx.Response(500, text="boom")
            return records(10)

        fake = FakeCanvas().on("GET", COLLECTION, handler)

        with pytest.raises(CanvasError) as exc_info:
            await fake.client(per_page=10).fetch_all(COLLECTION)

        assert exc_info.value.status_code == 500
        assert page_numbers(fake) == [1, 2]

    async def test_max_pages_raises_instead_of_truncating(self):
        fake = FakeCanvas().on("GET", COLLECTION, paged(records(50)))

        with pytest.raises(CanvasError, match="exceeded 2 pages"):
            await fake.client(per_page=10).fetch_all(COLLECTION, max_pages=2)

        assert page_numbers(fake) == [1, 2]

    async def test_max_pages_not_reached(self):
        fake = FakeCanvas().on("GET", COLLECTION, paged(records(15)))
        result = await fake.client(per_page=10).fetch_all(COLLECTION, max_pages=2)

        assert len(result) == 15

    async def test_non_list_page_is_a_decode_failure(self):
        fake = FakeCanvas().on("GET", COLLECTION, {"id": 1})

        with pytest.raises(CanvasError, match="Expected a list"):
            await fake.client().fetch_all(COLLECTION)


class TestErrorNormalization:
    """Tests for the single CanvasError failure shape."""

    async def test_errors_payload_is_carried_verbatim(self):
        errors = [{"message": "Invalid access token."}]
        fake = FakeCanvas().on("GET", "/api/v1/courses", httpx.Response(401, json={"errors": errors}))

        with pytest.raises(CanvasError) as exc_info:
            await fake.client().fetch("/api/v1/courses")

        assert str(exc_info.value) == json.dumps(errors)
        assert exc_info.value.status_code == 401

    async def test_http_failure_without_errors_field(self):
        fake = FakeCanvas().on("GET", "/api/v1/courses", httpx.Response(503, text="down"))

        with pytest.raises(CanvasError) as exc_info:
            await fake.client().fetch("/api/v1/courses")

        message = str(exc_info.value)
        assert message.startswith("503 Service Unavailable")
        assert "https://canvas.test/api/v1/courses" in message
        assert exc_info.value.status_code == 503

    async def test_network_failure(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        fake = FakeCanvas().on("GET", "/api/v1/courses", handler)

        with pytest.raises(CanvasError) as exc_info:
            await fake.client().fetch("/api/v1/courses")

        assert str(exc_info.value) == "Connection refused"
        assert exc_info.value.status_code is None

    async def test_unknown_failure_uses_marker(self):
        def handler(request):
            raise RuntimeError()

        fake = FakeCanvas().on("GET", "/api/v1/courses", handler)

        with pytest.raises(CanvasError) as exc_info:
            await fake.client().fetch("/api/v1/courses")

        assert str(exc_info.value) == UNKNOWN_ERROR_MESSAGE

    async def test_undecodable_body(self):
        fake = FakeCanvas().on("GET", "/api/v1/courses", httpx.Response(200, text="<html>"))

        with pytest.raises(CanvasError, match="Could not decode"):
            await fake.client().fetch("/api/v1/courses")


class TestRequests:
    """Tests for what the client puts on the wire."""

    async def test_bearer_token_on_every_request(self):
        fake = FakeCanvas().on("GET", COLLECTION, paged(records(3)))
        await fake.client(per_page=2).fetch_all(COLLECTION)

        assert len(fake.requests) == 2
        assert all(r.headers["Authorization"] == "Bearer test-token" for r in fake.requests)

    async def test_query_param_encoding(self):
        fake = FakeCanvas().on("GET", "/api/v1/courses", [])
        await fake.client().fetch(
            "/api/v1/courses",
            {"include[]": ["term", "teachers"], "is_announcement": True, "search_term": None},
        )

        params = fake.requests[0].url.params
        assert params.get_list("include[]") == ["term", "teachers"]
        assert params["is_announcement"] == "true"
        assert "search_term" not in params

    async def test_write_sends_json_body(self):
        fake = FakeCanvas().on("PUT", "/api/v1/courses/1/modules/2", {"id": 2})
        result = await fake.client().replace(
            "/api/v1/courses/1/modules/2", {"module": {"published": False}}
        )

        assert result == {"id": 2}
        assert FakeCanvas.body(fake.requests[0]) == {"module": {"published": False}}

    async def test_empty_body_decodes_to_none(self):
        fake = FakeCanvas().on("DELETE", "/api/v1/courses/1/quizzes/3", httpx.Response(204))
        assert await fake.client().remove("/api/v1/courses/1/quizzes/3") is None
