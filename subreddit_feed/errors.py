"""Errors raised by the subreddit feed client."""

from __future__ import annotations

from typing import Optional


class SubredditError(Exception):
    """Base error for every failed subreddit request."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class TransportError(SubredditError):
    """Connection failure, timeout or non-success HTTP status."""


class DecodeError(SubredditError):
    """Response body is not JSON or does not have the expected shape."""
