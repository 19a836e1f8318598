#!/usr/bin/env python3
"""
Subreddit Feed - Main Entry Point

Usage:
    python run.py rust hot --limit 25
    python run.py rust top --limit 10 --after t3_abc
    python run.py rust comments --article abc123 --limit 25
    python run.py rust moderators --output data/rust_mods.json
"""

from subreddit_feed.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
