"""RSS trending source — newest entries across the configured feeds.

Feeds come from the caller or from RSS_FEED_URLS (comma separated).
httpx fetches each feed, feedparser parses RSS/Atom, BeautifulSoup strips
HTML out of descriptions. A failing feed contributes nothing.
"""

from __future__ import annotations

import calendar
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from urllib.parse import urlparse

import feedparser
import httpx
from bs4 import BeautifulSoup

import config
from schemas.trending import TrendingTopic

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


def get_rss_feed_urls() -> list[str]:
    """Feed URLs configured through RSS_FEED_URLS."""
    return [url.strip() for url in config.RSS_FEED_URLS.split(",") if url.strip()]


def extract_source_name(url: str) -> str:
    """'https://www.techcrunch.com/feed' -> 'techcrunch'."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return "Unknown Source"
    if not hostname:
        return "Unknown Source"
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname.split(".")[0]


def _clean_text(raw: str) -> str:
    if not raw:
        return ""
    return BeautifulSoup(raw, "html.parser").get_text(" ", strip=True)


def _entry_date(entry) -> datetime:
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if parsed:
        return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
    return datetime.now(timezone.utc)


def fetch_rss_feed(feed_url: str) -> list[TrendingTopic]:
    """Parse one feed into topics. Returns [] when the feed can't be fetched."""
    try:
        response = httpx.get(feed_url, follow_redirects=True, timeout=30.0)
        if not response.is_success:
            logger.warning("Failed to fetch RSS feed from %s: HTTP %d", feed_url, response.status_code)
            return []
        # Raw bytes so feedparser honours the encoding in the XML prolog
        feed = feedparser.parse(response.content)
    except Exception as exc:
        logger.warning("Error fetching RSS feed from %s: %s", feed_url, exc)
        return []

    source_name = extract_source_name(feed_url)
    topics = []
    for entry in feed.entries:
        title = _clean_text(entry.get("title", ""))
        link = (entry.get("link") or "").strip()
        if not title or not link:
            continue
        description = _clean_text(entry.get("summary") or entry.get("description") or "")
        topics.append(
            TrendingTopic(
                title=title,
                summary=description or "No description available",
                url=link,
                pub_date=_entry_date(entry),
                score=0,
                source=f"RSS - {source_name}",
                categories=[source_name, "rss"],
                source_type="rss",
            )
        )
    logger.info("RSS: %d entries from %s", len(topics), feed_url)
    return topics


def get_rss_trending_topics(feed_urls: list[str] | None = None, limit: int = DEFAULT_LIMIT) -> list[TrendingTopic]:
    """Newest `limit` entries across all feeds, fetched in parallel."""
    feeds = list(feed_urls) if feed_urls else get_rss_feed_urls()
    if not feeds:
        logger.warning("No RSS feeds configured. Set RSS_FEED_URLS in your .env file.")
        return []

    with ThreadPoolExecutor(max_workers=min(len(feeds), 8)) as pool:
        results = list(pool.map(fetch_rss_feed, feeds))

    items = [topic for topics in results for topic in topics]
    if not items:
        logger.warning("No items found in the RSS feeds.")
        return []

    items.sort(key=lambda t: t.pub_date, reverse=True)
    return items[:limit]
