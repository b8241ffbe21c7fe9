"""X (Twitter) trending source — place trends through the v1.1 API with an app-only token."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from urllib.parse import quote

import httpx

import config
from pipeline.reddit_client import TrendingSourceError
from schemas.trending import TrendingTopic

logger = logging.getLogger(__name__)

TOKEN_URL = "https://api.twitter.com/oauth2/token"
TRENDS_URL = "https://api.twitter.com/1.1/trends/place.json"
GLOBAL_WOEID = 1
MAX_TOPICS = 15


def get_x_access_token() -> str:
    """Exchange the API key/secret for a bearer token (client credentials)."""
    if not config.TWITTER_API_KEY or not config.TWITTER_API_SECRET:
        raise TrendingSourceError(
            "X API credentials not configured. Please check your "
            "TWITTER_API_KEY and TWITTER_API_SECRET values."
        )

    response = httpx.post(
        TOKEN_URL,
        auth=(config.TWITTER_API_KEY, config.TWITTER_API_SECRET),
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        content="grant_type=client_credentials",
        timeout=30.0,
    )
    if not response.is_success:
        raise TrendingSourceError(
            f"X API authentication failed with status {response.status_code}: {response.text}"
        )
    return response.json()["access_token"]


def fetch_x_trends(access_token: str, woeid: int = GLOBAL_WOEID) -> list[dict]:
    """Raw trend dicts (name, query, tweet_volume, url) for a location."""
    response = httpx.get(
        TRENDS_URL,
        params={"id": woeid},
        headers={"Authorization": f"Bearer {access_token}"},
        timeout=30.0,
    )
    response.raise_for_status()
    data = response.json()
    if isinstance(data, list) and data and data[0].get("trends"):
        return data[0]["trends"]
    return []


def _trend_to_topic(trend: dict, now: datetime) -> TrendingTopic:
    volume = trend.get("tweet_volume")
    volume_text = f"{volume:,}" if volume else "unknown"
    return TrendingTopic(
        title=trend.get("name", ""),
        summary=f"Trending on X with {volume_text} tweets.",
        url=trend.get("url") or f"https://twitter.com/search?q={quote(trend.get('query', ''), safe='')}",
        # X trends carry no timestamp
        pub_date=now,
        score=volume or 0,
        source="X (Twitter)",
        categories=["social", "x", "twitter"],
        source_type="x",
    )


def get_x_trending_topics(business_type: str = "", woeid: int = GLOBAL_WOEID) -> list[TrendingTopic]:
    """Top global X trends as TrendingTopic items.

    The business type does not filter X trends; relevance scoring
    handles that downstream. Without credentials X is skipped.
    """
    if not config.TWITTER_API_KEY or not config.TWITTER_API_SECRET:
        logger.warning("X API credentials not configured; skipping X trends")
        return []
    access_token = get_x_access_token()
    trends = fetch_x_trends(access_token, woeid)
    now = datetime.now(timezone.utc)
    topics = [_trend_to_topic(t, now) for t in trends[:MAX_TOPICS]]
    logger.info("X: %d trends for woeid=%d (business_type=%r)", len(topics), woeid, business_type)
    return topics
