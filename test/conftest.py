"""Shared fixtures: canned reddit payloads and a fake aiohttp session."""

import copy
import json
from pathlib import Path
from unittest.mock import Mock

import aiohttp
import pytest

from shared import load_json

DATABASE = Path(__file__).parent / "database"


class FakeResponse:
    """Stands in for ``aiohttp.ClientResponse`` inside ``async with``."""

    def __init__(self, payload=None, status=200, body=None):
        self.payload = payload
        self.status = status
        self.body = body
        self.url = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    def raise_for_status(self):
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                Mock(real_url=self.url),
                (),
                status=self.status,
                message="Too Many Requests" if self.status == 429 else "Error",
            )

    async def json(self, content_type="application/json"):
        if self.body is not None:
            return json.loads(self.body)
        return copy.deepcopy(self.payload)


class FakeSession:
    """Records requested URLs and answers each with a canned response or error."""

    def __init__(self, response=None, routes=None):
        self.response = response
        self.routes = routes or {}
        self.requested = []
        self.closed = False

    def get(self, url):
        self.requested.append(url)
        response = self.routes.get(url, self.response)
        if isinstance(response, BaseException):
            raise response
        response.url = url
        return response

    async def close(self):
        self.closed = True


def load_payload(name):
    return load_json(DATABASE / f"{name}.json")


@pytest.fixture
def hot_payload():
    return load_payload("hot")


@pytest.fixture
def latest_comments_payload():
    return load_payload("latest_comments")


@pytest.fixture
def article_comments_payload():
    return load_payload("article_comments")


@pytest.fixture
def moderators_payload():
    return load_payload("moderators")
