"""Subreddit feed client configuration."""

# Endpoint settings
BASE_URL = "https://www.reddit.com"
SUBREDDIT_URL = BASE_URL + "/r/{name}"

# HTTP settings
TIMEOUT = 16
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"

# Feed settings
DEFAULT_LIMIT = 25
LISTING_TYPES = ("hot", "rising", "top", "new")
