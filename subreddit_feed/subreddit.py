"""Read-only async client for one subreddit's public JSON feeds."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from . import config
from .errors import DecodeError, SubredditError, TransportError
from .options import FeedOption
from .responses import Moderators, Submissions, SubredditComments

logger = logging.getLogger(__name__)


class Subreddit:
    """
    Feeds, comments and moderators of a single subreddit.

    Example:
        async with aiohttp.ClientSession() as session:
            rust = Subreddit("rust", session=session)
            hot = await rust.hot(25)
            comments = await rust.article_comments(hot.posts[0].id, limit=25)
    """

    def __init__(self, name: str, session: Optional[aiohttp.ClientSession] = None):
        """
        Create a subreddit client.

        Args:
            name: Subreddit name, sent as-is
            session: Shared aiohttp session. The caller keeps ownership and
                is responsible for closing it. When omitted, the client
                opens its own session on first use and closes it in close().
        """
        self.name = name
        self.url = config.SUBREDDIT_URL.format(name=name)
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Subreddit:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or (self._owns_session and self._session.closed):
            timeout = aiohttp.ClientTimeout(total=config.TIMEOUT)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={"User-Agent": config.USER_AGENT},
            )
        elif self._session.closed:
            raise TransportError("Shared session is closed", url=self.url)
        return self._session

    async def close(self) -> None:
        """Close the session if this client opened it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def _request(self, url: str) -> Any:
        try:
            session = self._get_session()
        except TransportError as err:
            logger.warning("Request to %s failed: session is closed", url)
            err.url = url
            raise
        logger.debug("GET %s", url)
        try:
            async with session.get(url) as resp:
                resp.raise_for_status()
                return await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            logger.warning("Request to %s failed: %s", url, err.__class__.__name__)
            raise TransportError(f"GET {url} failed: {err!r}", url=url) from err
        except ValueError as err:
            logger.warning("Response from %s is not valid JSON", url)
            raise DecodeError(f"Invalid JSON from {url}: {err}", url=url) from err

    async def _fetch(self, url: str, decode):
        payload = await self._request(url)
        try:
            return decode(payload)
        except SubredditError as err:
            logger.warning("Unexpected response shape from %s: %s", url, err)
            err.url = url
            raise

    def feed_url(self, listing: str, limit: int, options: Optional[FeedOption] = None) -> str:
        """Build ``<base>/<listing>.json?limit=<limit>`` plus any cursor/count."""
        if limit < 1:
            raise ValueError(f"limit must be a positive count, got {limit}")
        url = f"{self.url}/{listing}.json?limit={limit}"
        if options is not None:
            url += options.query()
        return url

    def comments_url(self, path: str, depth: Optional[int] = None, limit: Optional[int] = None) -> str:
        url = f"{self.url}/{path}.json?"
        if depth is not None:
            url += f"&depth={depth}"
        if limit is not None:
            url += f"&limit={limit}"
        return url

    async def get_feed(
        self, listing: str, limit: int, options: Optional[FeedOption] = None
    ) -> Submissions:
        return await self._fetch(self.feed_url(listing, limit, options), Submissions.from_dict)

    async def get_comment_feed(
        self, path: str, depth: Optional[int] = None, limit: Optional[int] = None
    ) -> SubredditComments:
        """
        Fetch a comment page.

        Submission comments (``comments/<id>``) come back as an array whose
        last element is the comment listing; the elements before it (the
        submission itself) are dropped. The subreddit-wide stream is a
        single listing object.
        """
        url = self.comments_url(path, depth, limit)

        if "comments/" in url:
            return await self._fetch(url, _last_comment_listing)
        return await self._fetch(url, SubredditComments.from_dict)

    async def moderators(self) -> Moderators:
        """Get moderators."""
        return await self._fetch(f"{self.url}/about/moderators/.json", Moderators.from_dict)

    async def hot(self, limit: int = config.DEFAULT_LIMIT, options: Optional[FeedOption] = None) -> Submissions:
        """Get hot posts."""
        return await self.get_feed("hot", limit, options)

    async def rising(self, limit: int = config.DEFAULT_LIMIT, options: Optional[FeedOption] = None) -> Submissions:
        """Get rising posts."""
        return await self.get_feed("rising", limit, options)

    async def top(self, limit: int = config.DEFAULT_LIMIT, options: Optional[FeedOption] = None) -> Submissions:
        """Get top posts for the platform's default time window."""
        return await self.get_feed("top", limit, options)

    async def latest(self, limit: int = config.DEFAULT_LIMIT, options: Optional[FeedOption] = None) -> Submissions:
        """Get latest posts."""
        return await self.get_feed("new", limit, options)

    async def latest_comments(
        self, depth: Optional[int] = None, limit: Optional[int] = None
    ) -> SubredditComments:
        """Get latest comments across the subreddit."""
        return await self.get_comment_feed("comments", depth, limit)

    async def article_comments(
        self, article_id: str, depth: Optional[int] = None, limit: Optional[int] = None
    ) -> SubredditComments:
        """Get comments from a submission."""
        return await self.get_comment_feed(f"comments/{article_id}", depth, limit)


def _last_comment_listing(payload: Any) -> SubredditComments:
    if not isinstance(payload, list):
        raise DecodeError(f"Expected array of listings, got {type(payload).__name__}")
    if not payload:
        raise DecodeError("Empty array of listings")
    return SubredditComments.from_dict(payload[-1])
