"""Command-line entry point for fetching subreddit feeds."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import aiohttp

from shared import save_json, to_json

from . import config
from .errors import SubredditError
from .options import FeedOption
from .subreddit import Subreddit

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive count, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--output", help="Write JSON to this file instead of stdout")
    common.add_argument("--timeout", type=float, default=config.TIMEOUT, help="Request timeout in seconds")
    common.add_argument("--verbose", action="store_true", help="Log requests at DEBUG level")
    common.add_argument("--log-file", help="Also write logs to this file")

    parser = argparse.ArgumentParser(description="Read a subreddit's public feeds")
    parser.add_argument("subreddit", help="Subreddit name, without r/")

    commands = parser.add_subparsers(dest="command", required=True)

    for listing in config.LISTING_TYPES:
        feed = commands.add_parser(listing, parents=[common], help=f"{listing} posts")
        feed.add_argument("--limit", type=positive_int, default=config.DEFAULT_LIMIT, help="Posts per page")
        cursor = feed.add_mutually_exclusive_group()
        cursor.add_argument("--after", help="Cursor of the page to continue after")
        cursor.add_argument("--before", help="Cursor of the page to go back before")
        feed.add_argument("--count", type=int, help="Number of items already seen")

    comments = commands.add_parser(
        "comments", parents=[common], help="Latest comments, or comments of one submission"
    )
    comments.add_argument("--article", help="Submission id (without t3_)")
    comments.add_argument("--depth", type=int, help="Maximum reply depth")
    comments.add_argument("--limit", type=int, help="Maximum number of comments")

    commands.add_parser("moderators", parents=[common], help="Moderator list")
    return parser


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


async def fetch(args: argparse.Namespace, session: aiohttp.ClientSession):
    """Run the requested command and return the decoded entity."""
    subreddit = Subreddit(args.subreddit, session=session)

    if args.command == "moderators":
        return await subreddit.moderators()
    if args.command == "comments":
        if args.article:
            return await subreddit.article_comments(args.article, args.depth, args.limit)
        return await subreddit.latest_comments(args.depth, args.limit)

    options = None
    if args.after or args.before or args.count is not None:
        options = FeedOption(after=args.after, before=args.before, count=args.count)
    return await subreddit.get_feed(args.command, args.limit, options)


async def run(args: argparse.Namespace):
    timeout = aiohttp.ClientTimeout(total=args.timeout)
    headers = {"User-Agent": config.USER_AGENT}
    async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
        return await fetch(args, session)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        result = asyncio.run(run(args))
    except SubredditError as err:
        logger.error("r/%s %s failed: %s", args.subreddit, args.command, err)
        return 1

    if args.output:
        save_json(result, args.output)
        logger.info("Saved r/%s %s to %s", args.subreddit, args.command, args.output)
    else:
        print(to_json(result))
    return 0
