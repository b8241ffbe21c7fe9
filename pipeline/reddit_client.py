"""Reddit trending source — hot posts from business-relevant subreddits.

Authenticates with Reddit's installed-client OAuth flow (app-only, no user
login), fans out over a handful of subreddits picked from the business type,
then keeps the most engaged posts.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import httpx

import config
from schemas.trending import TrendingTopic

logger = logging.getLogger(__name__)

TOKEN_URL = "https://www.reddit.com/api/v1/access_token"
API_BASE = "https://oauth.reddit.com"
USER_AGENT = "DeepContent/1.0.0 (by /u/DeepContentApp)"
# Constant per deployment so Reddit treats every request as the same installed app
DEVICE_ID = "DEEPCONTENT_APP_ID_FIXED"

MAX_SUBREDDITS = 5
MAX_TOPICS = 10
SUMMARY_CHARS = 250

DEFAULT_SUBREDDITS = ["business", "marketing", "entrepreneur", "smallbusiness"]

# (keywords in business type) -> subreddits checked before the defaults
_SUBREDDIT_MAP: list[tuple[tuple[str, ...], list[str]]] = [
    (
        ("internet", "isp", "tech", "broadband"),
        ["technology", "broadband", "Starlink", "wisp", "Rural_Internet", "ruralinternet", "telecom", "networking"],
    ),
    (
        ("marketing", "social media"),
        ["marketing", "socialmedia", "digitalmarketing", "contentmarketing", "SEO", "advertising", "socialmediamanagers"],
    ),
    (
        ("finance", "accounting"),
        ["finance", "accounting", "smallbusiness", "financialplanning", "tax", "investing", "entrepreneur"],
    ),
]


class TrendingSourceError(Exception):
    """A trending source could not produce topics (auth failure, nothing found)."""


def get_reddit_access_token() -> str:
    """Fetch an app-only OAuth token for the Reddit API."""
    if not config.REDDIT_CLIENT_ID or not config.REDDIT_CLIENT_SECRET:
        logger.error(
            "Missing Reddit API credentials: client_id=%s client_secret=%s",
            "present" if config.REDDIT_CLIENT_ID else "missing",
            "present" if config.REDDIT_CLIENT_SECRET else "missing",
        )
        raise TrendingSourceError(
            "Reddit API credentials not configured. Please check your "
            "REDDIT_CLIENT_ID and REDDIT_CLIENT_SECRET values."
        )

    response = httpx.post(
        TOKEN_URL,
        auth=(config.REDDIT_CLIENT_ID, config.REDDIT_CLIENT_SECRET),
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": USER_AGENT,
        },
        content=(
            "grant_type=https://oauth.reddit.com/grants/installed_client"
            f"&device_id={DEVICE_ID}"
        ),
        timeout=30.0,
    )
    if not response.is_success:
        raise TrendingSourceError(
            f"Reddit API authentication failed with status {response.status_code}: {response.text}"
        )
    return response.json()["access_token"]


def get_subreddits_for_business(business_type: str) -> list[str]:
    """Map a business type to the subreddits worth checking, most specific first."""
    lowered = business_type.lower()
    for keywords, subreddits in _SUBREDDIT_MAP:
        if any(k in lowered for k in keywords):
            return subreddits + DEFAULT_SUBREDDITS
    return list(DEFAULT_SUBREDDITS)


def fetch_subreddit_hot(subreddit: str, access_token: str) -> list[dict]:
    """Return the raw `data` dicts of a subreddit's hot listing, or [] on failure."""
    try:
        response = httpx.get(
            f"{API_BASE}/r/{subreddit}/hot",
            params={"limit": 25},
            headers={
                "Authorization": f"Bearer {access_token}",
                "User-Agent": USER_AGENT,
            },
            timeout=30.0,
        )
        response.raise_for_status()
        children = response.json()["data"]["children"]
    except Exception as exc:
        logger.warning("Error fetching from subreddit %s: %s", subreddit, exc)
        return []
    return [child["data"] for child in children]


def _engagement(post: dict) -> int:
    return post.get("score", 0) + post.get("num_comments", 0) * 3


def _post_to_topic(post: dict) -> TrendingTopic:
    selftext = post.get("selftext") or ""
    if selftext:
        summary = selftext[:SUMMARY_CHARS] + ("..." if len(selftext) > SUMMARY_CHARS else "")
    else:
        summary = "No description available"
    subreddit = post.get("subreddit", "")
    return TrendingTopic(
        title=post.get("title", ""),
        summary=summary,
        url=f"https://www.reddit.com{post.get('permalink', '')}",
        pub_date=datetime.fromtimestamp(post.get("created_utc", 0), tz=timezone.utc),
        score=post.get("score", 0),
        source=f"r/{subreddit}",
        categories=[subreddit, "reddit"],
        source_type="reddit",
    )


def get_reddit_trending_topics(business_type: str) -> list[TrendingTopic]:
    """Top engaged hot posts across the subreddits for this business type.

    Raises TrendingSourceError when authentication fails or no subreddit
    returned any post.
    """
    access_token = get_reddit_access_token()
    subreddits = get_subreddits_for_business(business_type)[:MAX_SUBREDDITS]
    logger.info("Reddit: fetching hot posts from %s", subreddits)

    with ThreadPoolExecutor(max_workers=len(subreddits)) as pool:
        results = list(pool.map(lambda sub: fetch_subreddit_hot(sub, access_token), subreddits))

    all_posts = [post for posts in results for post in posts]
    if not all_posts:
        raise TrendingSourceError("No trending topics found on Reddit for the specified business type")

    significant = [p for p in all_posts if p.get("score", 0) > 5 or p.get("num_comments", 0) > 3]
    significant.sort(key=_engagement, reverse=True)

    topics = [_post_to_topic(post) for post in significant[:MAX_TOPICS]]
    logger.info("Reddit: %d posts fetched, %d significant, returning %d", len(all_posts), len(significant), len(topics))
    return topics
