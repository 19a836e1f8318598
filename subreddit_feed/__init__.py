"""
Subreddit Feed Module

A read-only client for a subreddit's public JSON feeds, comment trees and
moderator list. No authentication, no retries, no pagination loop.

Usage:
    from subreddit_feed import Subreddit, FeedOption

    async with Subreddit("rust") as rust:
        hot = await rust.hot(25)
        next_hot = await rust.hot(25, FeedOption(after=hot.after))
        comments = await rust.latest_comments(limit=25)
"""

from .errors import DecodeError, SubredditError, TransportError
from .options import FeedOption
from .responses import (
    CommentData,
    Listing,
    ModeratorData,
    Moderators,
    SubmissionData,
    Submissions,
    SubredditComments,
    Thing,
)
from .subreddit import Subreddit

__all__ = [
    "Subreddit",
    "FeedOption",
    "Submissions",
    "SubmissionData",
    "SubredditComments",
    "CommentData",
    "Moderators",
    "ModeratorData",
    "Listing",
    "Thing",
    "SubredditError",
    "TransportError",
    "DecodeError",
]
__version__ = "1.0.0"
