"""Tests for paginated list handling."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import respx

from bitbucket_client.config import Config
from bitbucket_client.endpoints.v2.endpoint import EndPoint
from bitbucket_client.models.page import Page
from bitbucket_client.models.result import Failure, Success
from bitbucket_client.models.v2 import Repository
from bitbucket_client.utils.pagination import PageIterator, collect_values, iterate_values

from conftest import API_V2, page_response


def make_client(*results):
    """Mock client whose get() returns the given results in order."""
    client = MagicMock()
    client.base_url = API_V2
    client.config = Config()
    client.get = AsyncMock(side_effect=list(results))
    return client


def page(names, next_url=None):
    return Success(Page[Repository](values=[Repository(name=n) for n in names], next=next_url))


async def drain(iterator):
    return [[repo.name for repo in values] async for values in iterator]


class TestPageIterator:
    """Tests for the lazy page iterator."""

    def test_rejects_empty_path(self):
        """Test that an empty path is refused."""
        with pytest.raises(ValueError):
            PageIterator(make_client(), "", Repository)

    def test_rejects_query_string(self):
        """Test that pagination parameters are owned by the iterator."""
        with pytest.raises(ValueError):
            PageIterator(make_client(), "repositories/acme/?pagelen=5", Repository)

    def test_absolute_path_made_relative(self):
        """Test that absolute URLs under the base URL are accepted."""
        iterator = PageIterator(make_client(), f"{API_V2}repositories/acme/", Repository)
        assert iterator.path == "repositories/acme/"

    @pytest.mark.asyncio
    async def test_yields_pages_in_order(self):
        """Test that every page is yielded once, in order, then iteration ends."""
        client = make_client(
            page(["a", "b"], "cursor-2"),
            page(["c", "d"], "cursor-3"),
            page(["e"]),
        )

        pages = await drain(PageIterator(client, "repositories/acme/", Repository, page_len=2))

        assert pages == [["a", "b"], ["c", "d"], ["e"]]
        assert client.get.await_count == 3

    @pytest.mark.asyncio
    async def test_request_parameters(self):
        """Test pagelen on every request and page from the second one on."""
        client = make_client(page(["a"], "next"), page(["b"], "next"), page(["c"]))

        await drain(PageIterator(client, "repositories/acme/", Repository, page_len=7))

        sent = [call.kwargs["parameters"] for call in client.get.await_args_list]
        assert sent == [
            {"pagelen": 7},
            {"pagelen": 7, "page": 2},
            {"pagelen": 7, "page": 3},
        ]

    @pytest.mark.asyncio
    async def test_tracks_cursor(self):
        """Test that the iterator records the last cursor it saw."""
        iterator = PageIterator(make_client(page(["a"], "cursor-2"), page(["b"])), "x/", Repository)

        await iterator.__anext__()
        assert iterator.last_cursor == "cursor-2"
        assert iterator.finished is False

        await iterator.__anext__()
        assert iterator.last_cursor is None
        assert iterator.finished is True

    @pytest.mark.asyncio
    async def test_null_page_stops(self):
        """Test that a missing page ends iteration without error."""
        client = make_client(page(["a"], "cursor-2"), Success(None), page(["c"]))

        pages = await drain(PageIterator(client, "repositories/acme/", Repository))

        assert pages == [["a"]]
        assert client.get.await_count == 2

    @pytest.mark.asyncio
    async def test_failure_stops(self):
        """Test that a transport failure ends iteration without error."""
        client = make_client(page(["a"], "cursor-2"), Failure(httpx.ConnectError("down")))

        pages = await drain(PageIterator(client, "repositories/acme/", Repository))

        assert pages == [["a"]]

    @pytest.mark.asyncio
    async def test_lazy(self):
        """Test that nothing is fetched before the consumer asks."""
        client = make_client(page(["a"], "cursor-2"), page(["b"]))
        iterator = PageIterator(client, "repositories/acme/", Repository)

        assert client.get.await_count == 0
        await iterator.__anext__()
        assert client.get.await_count == 1


class TestCollectValues:
    """Tests for eager, capped collection."""

    @staticmethod
    def pages(client):
        return PageIterator(client, "repositories/acme/", Repository, page_len=2)

    @pytest.mark.asyncio
    async def test_unlimited(self):
        """Test that max=0 returns every item across all pages."""
        client = make_client(page(["a", "b"], "n"), page(["c", "d"], "n"), page(["e"]))

        values = await collect_values(self.pages(client), 0)

        assert [v.name for v in values] == ["a", "b", "c", "d", "e"]
        assert client.get.await_count == 3

    @pytest.mark.asyncio
    async def test_cap_mid_page(self):
        """Test that the cap truncates the last page and stops fetching."""
        client = make_client(page(["a", "b"], "n"), page(["c", "d"], "n"), page(["e"]))

        values = await collect_values(self.pages(client), 3)

        assert [v.name for v in values] == ["a", "b", "c"]
        assert client.get.await_count == 2

    @pytest.mark.asyncio
    async def test_cap_on_page_boundary(self):
        """Test that reaching the cap exactly at a page end stops fetching."""
        client = make_client(page(["a", "b"], "n"), page(["c", "d"], "n"), page(["e"]))

        values = await collect_values(self.pages(client), 2)

        assert [v.name for v in values] == ["a", "b"]
        assert client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_cap_above_total(self):
        """Test that a cap larger than the collection returns everything."""
        client = make_client(page(["a", "b"], "n"), page(["c"]))

        values = await collect_values(self.pages(client), 10)

        assert [v.name for v in values] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_iterate_values(self):
        """Test lazy single-item iteration with a cap."""
        client = make_client(page(["a", "b"], "n"), page(["c", "d"], "n"), page(["e"]))

        names = [v.name async for v in iterate_values(self.pages(client), 3)]

        assert names == ["a", "b", "c"]
        assert client.get.await_count == 2


class TestEndPointPagination:
    """End-to-end pagination against a mocked server."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_five_items_three_pages(self, client_v2):
        """Test max=3 over pages of 2, 2, 1: two fetches, three items in order."""
        route = respx.get(f"{API_V2}repositories/acme/").mock(
            side_effect=[
                page_response([{"name": "r1"}, {"name": "r2"}], f"{API_V2}repositories/acme/?page=2", size=5),
                page_response([{"name": "r3"}, {"name": "r4"}], f"{API_V2}repositories/acme/?page=3", size=5),
                page_response([{"name": "r5"}], size=5),
            ]
        )
        end_point = EndPoint(client_v2, "repositories/")

        values = await end_point.get_paginated_values("repositories/acme/", Repository, max=3)

        assert [v.name for v in values] == ["r1", "r2", "r3"]
        assert route.call_count == 2
        first, second = (call.request.url.params for call in route.calls)
        assert first["pagelen"] == "3"
        assert "page" not in first
        assert second["page"] == "2"
        assert second["access_token"] == "test_token"

    @pytest.mark.asyncio
    @respx.mock
    async def test_all_pages(self, client_v2):
        """Test that max=0 follows next cursors to the end."""
        route = respx.get(f"{API_V2}teams/acme/members/").mock(
            side_effect=[
                page_response([{"username": "u1"}], "cursor"),
                page_response([{"username": "u2"}], "cursor"),
                page_response([{"username": "u3"}]),
            ]
        )
        end_point = EndPoint(client_v2, "teams/acme/")

        values = await end_point.get_paginated_values("teams/acme/members/", Repository)

        assert len(values) == 3
        assert route.call_count == 3
        assert route.calls[0].request.url.params["pagelen"] == "50"

    @pytest.mark.asyncio
    @respx.mock
    async def test_null_page_mid_sequence(self, client_v2):
        """Test that a null page stops iteration without raising."""
        route = respx.get(f"{API_V2}repositories/acme/").mock(
            side_effect=[
                page_response([{"name": "r1"}], "cursor"),
                httpx.Response(200, text="null"),
                page_response([{"name": "r3"}]),
            ]
        )
        end_point = EndPoint(client_v2, "repositories/")

        values = await end_point.get_paginated_values("repositories/acme/", Repository)

        assert [v.name for v in values] == ["r1"]
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_failure_mid_sequence(self, client_v2):
        """Test that a dropped connection ends the listing quietly."""
        respx.get(f"{API_V2}repositories/acme/").mock(
            side_effect=[page_response([{"name": "r1"}], "cursor"), httpx.ReadTimeout("slow")]
        )
        end_point = EndPoint(client_v2, "repositories/")

        values = await end_point.get_paginated_values("repositories/acme/", Repository)

        assert [v.name for v in values] == ["r1"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_break_stops_requests(self, client_v2):
        """Test that abandoning iteration issues no further requests."""
        route = respx.get(f"{API_V2}repositories/acme/").mock(
            side_effect=[
                page_response([{"name": "r1"}], "cursor"),
                page_response([{"name": "r2"}], "cursor"),
            ]
        )
        end_point = EndPoint(client_v2, "repositories/")

        async for values in end_point.iterate_pages("repositories/acme/", Repository):
            break

        assert route.call_count == 1

    @pytest.mark.asyncio
    async def test_uses_configured_page_len(self):
        """Test that the configured default page length is requested."""
        client = make_client(page(["a"]))
        client.config = Config(default_page_len=25)
        end_point = EndPoint(client, "repositories/")

        await end_point.get_paginated_values("repositories/acme/", Repository)

        assert client.get.await_args.kwargs["parameters"] == {"pagelen": 25}
