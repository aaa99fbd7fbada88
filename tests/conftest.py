import asyncio
import pathlib

import dotenv
import httpx
import pytest

from sponsorblock import api
from sponsorblock.options import Options

dotenv.load_dotenv(pathlib.Path(__file__).parent.parent / ".env")

BASE_URL = "https://sponsor.test"
VIDEO_ID = "jiK2jmTVF3A"


class FakeService:
    """Answers requests from a (method, path) table and records what it saw."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, status: int = 200, body=None):
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="Not Found")
        status, body = route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def options():
    return Options(base_url=BASE_URL)


@pytest.fixture
def client(service, options):
    http = httpx.AsyncClient(transport=httpx.MockTransport(service.handler))
    return api.SponsorBlock("test", options, http=http)
