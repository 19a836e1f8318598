"""Tests for the command-line entry point."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from conftest import FakeResponse, FakeSession
from shared import load_json
from subreddit_feed import Moderators, Submissions, TransportError
from subreddit_feed.cli import build_parser, fetch, main


class TestParser:
    def test_feed_defaults(self):
        args = build_parser().parse_args(["astolfo", "hot"])
        assert args.subreddit == "astolfo"
        assert args.command == "hot"
        assert args.limit == 25
        assert args.after is None

    def test_cursors_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["astolfo", "top", "--after", "a", "--before", "b"])

    @pytest.mark.parametrize("command", ["hot", "comments", "moderators"])
    def test_common_options_after_command(self, command):
        args = build_parser().parse_args([
            "astolfo", command,
            "--output", "out.json", "--timeout", "5", "--verbose", "--log-file", "feed.log",
        ])
        assert args.output == "out.json"
        assert args.timeout == 5.0
        assert args.verbose is True
        assert args.log_file == "feed.log"

    def test_common_option_defaults(self):
        args = build_parser().parse_args(["astolfo", "moderators"])
        assert args.output is None
        assert args.timeout == 16
        assert args.verbose is False

    @pytest.mark.parametrize("limit", ["0", "-3"])
    def test_limit_must_be_positive(self, limit):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["astolfo", "hot", "--limit", limit])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["astolfo"])


class TestFetch:
    @pytest.mark.asyncio
    async def test_feed_with_options(self, hot_payload):
        session = FakeSession(FakeResponse(hot_payload))
        args = build_parser().parse_args(["astolfo", "new", "--limit", "10", "--before", "t3_xyz", "--count", "5"])

        result = await fetch(args, session)

        assert isinstance(result, Submissions)
        assert session.requested == ["https://www.reddit.com/r/astolfo/new.json?limit=10&before=t3_xyz&count=5"]

    @pytest.mark.asyncio
    async def test_article_comments(self, article_comments_payload):
        session = FakeSession(FakeResponse(article_comments_payload))
        args = build_parser().parse_args(["astolfo", "comments", "--article", "abc123", "--limit", "25"])

        result = await fetch(args, session)

        assert result.comments[0].id == "k1"
        assert session.requested == ["https://www.reddit.com/r/astolfo/comments/abc123.json?&limit=25"]

    @pytest.mark.asyncio
    async def test_latest_comments(self, latest_comments_payload):
        session = FakeSession(FakeResponse(latest_comments_payload))
        args = build_parser().parse_args(["astolfo", "comments", "--depth", "1"])

        await fetch(args, session)

        assert session.requested == ["https://www.reddit.com/r/astolfo/comments.json?&depth=1"]

    @pytest.mark.asyncio
    async def test_moderators(self, moderators_payload):
        session = FakeSession(FakeResponse(moderators_payload))
        args = build_parser().parse_args(["astolfo", "moderators"])

        result = await fetch(args, session)

        assert result.names == ["mod_one", "AutoModerator"]


class TestMain:
    def test_prints_json(self, hot_payload, capsys):
        result = Submissions.from_dict(hot_payload)
        with patch("subreddit_feed.cli.run", new=AsyncMock(return_value=result)):
            assert main(["astolfo", "hot"]) == 0

        printed = json.loads(capsys.readouterr().out)
        assert printed["data"]["after"] == "t3_def456"
        assert printed["data"]["children"][0]["data"]["id"] == "abc123"

    def test_writes_output_file(self, moderators_payload, tmp_path):
        output = tmp_path / "out" / "mods.json"
        result = Moderators.from_dict(moderators_payload)
        with patch("subreddit_feed.cli.run", new=AsyncMock(return_value=result)):
            assert main(["astolfo", "moderators", "--output", str(output)]) == 0

        saved = load_json(output)
        assert [mod["name"] for mod in saved["data"]["children"]] == ["mod_one", "AutoModerator"]

    def test_error_exit_code(self):
        error = TransportError("GET failed", url="https://www.reddit.com/r/astolfo/hot.json?limit=25")
        with patch("subreddit_feed.cli.run", new=AsyncMock(side_effect=error)):
            assert main(["astolfo", "hot"]) == 1
