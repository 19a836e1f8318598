"""Pagination options for subreddit feeds."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class FeedOption:
    """
    Optional pagination parameters for a feed request.

    Only one cursor is sent: when both ``after`` and ``before`` are set,
    ``after`` wins. Cursor values are sent verbatim.

    Example:
        hot = await subreddit.hot(25)
        options = FeedOption(after=hot.after)
        next_hot = await subreddit.hot(25, options)
    """

    after: Optional[str] = None
    before: Optional[str] = None
    count: Optional[int] = None

    def with_after(self, after: str) -> FeedOption:
        return replace(self, after=after)

    def with_before(self, before: str) -> FeedOption:
        return replace(self, before=before)

    def with_count(self, count: int) -> FeedOption:
        return replace(self, count=count)

    def query(self) -> str:
        """Render the query string suffix, e.g. ``&after=t3_abc&count=5``."""
        suffix = ""
        if self.after is not None:
            suffix += f"&after={self.after}"
        elif self.before is not None:
            suffix += f"&before={self.before}"

        if self.count is not None:
            suffix += f"&count={self.count}"
        return suffix
