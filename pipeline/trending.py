"""Trending topics aggregation — Reddit, X and RSS merged into one feed.

Each source is fetched independently; a failing source is logged and
skipped so the others still contribute. Results are sorted newest first,
near-duplicate titles are dropped, and the list is cut to `limit`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from pipeline.reddit_client import get_reddit_trending_topics
from pipeline.rss_feeds import get_rss_trending_topics
from pipeline.x_client import get_x_trending_topics
from schemas.trending import TrendingResult, TrendingSources, TrendingTopic

logger = logging.getLogger(__name__)

ALL_SOURCES = ("reddit", "rss", "x")


def normalize_sources(sources: Iterable[str] | str | None) -> list[str]:
    """'reddit, Twitter' -> ['reddit', 'x']. Unknown names are dropped."""
    if sources is None:
        return list(ALL_SOURCES)
    if isinstance(sources, str):
        sources = sources.split(",")
    normalized = []
    for name in sources:
        key = name.strip().lower()
        if key == "twitter":
            key = "x"
        if key in ALL_SOURCES and key not in normalized:
            normalized.append(key)
    return normalized


def is_similar_title(title1: str, title2: str) -> bool:
    """Whether two normalized titles are near-duplicates.

    Containment either way counts; otherwise at least half of the shorter
    title's significant words (> 3 chars) must appear in the other. A
    title with no significant words therefore matches anything.
    """
    if title1 in title2 or title2 in title1:
        return True

    words1 = [w for w in title1.split() if len(w) > 3]
    words2 = [w for w in title2.split() if len(w) > 3]
    match_count = sum(1 for word in words1 if word in words2)
    threshold = min(len(words1), len(words2)) * 0.5
    return match_count >= threshold


def remove_duplicate_topics(topics: list[TrendingTopic]) -> list[TrendingTopic]:
    """Keep the first topic of every group of similar titles, order preserved."""
    unique: list[TrendingTopic] = []
    seen_titles: list[str] = []
    for topic in topics:
        normalized = topic.title.lower().strip()
        if any(is_similar_title(normalized, seen) for seen in seen_titles):
            continue
        seen_titles.append(normalized)
        unique.append(topic)
    return unique


def get_trending_topics(
    business_type: str,
    limit: int = 10,
    sources: Iterable[str] | str | None = ALL_SOURCES,
    feed_urls: list[str] | None = None,
) -> TrendingResult:
    """Combined trending topics from the requested sources."""
    wanted = normalize_sources(sources)
    flags = TrendingSources()
    all_topics: list[TrendingTopic] = []

    fetchers = {
        "reddit": lambda: get_reddit_trending_topics(business_type),
        "x": lambda: get_x_trending_topics(business_type),
        "rss": lambda: get_rss_trending_topics(feed_urls),
    }

    for name in ("reddit", "x", "rss"):
        if name not in wanted:
            continue
        try:
            topics = fetchers[name]()
        except Exception as exc:
            logger.warning("Error fetching %s trending topics: %s", name, exc)
            continue
        if topics:
            setattr(flags, name, True)
            all_topics.extend(topics)

    timestamp = datetime.now(timezone.utc)
    if not all_topics:
        logger.info("Trending: no topics from %s", wanted)
        return TrendingResult(topics=[], sources=flags, timestamp=timestamp)

    all_topics.sort(key=lambda t: t.pub_date, reverse=True)
    unique = remove_duplicate_topics(all_topics)
    logger.info(
        "Trending: %d topics, %d after dedupe, returning %d (sources=%s)",
        len(all_topics), len(unique), min(limit, len(unique)), flags.model_dump(),
    )
    return TrendingResult(topics=unique[:limit], sources=flags, timestamp=timestamp)
