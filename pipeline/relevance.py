"""Business relevance scoring for trending topics.

Higher score = more relevant to the business type. The score is additive:
direct mentions, business keywords, industry vocabulary, recency, source
and category signals each contribute points.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from schemas.trending import TrendingTopic

# Industry -> vocabulary used to judge relevance for business types that mention it
INDUSTRY_KEYWORDS: dict[str, list[str]] = {
    "internet": ["internet", "broadband", "wifi", "fiber", "connection", "speed", "data", "online", "network", "isp"],
    "health": ["health", "wellness", "nutrition", "fitness", "diet", "medical", "healthcare", "supplements", "workout", "disease"],
    "marketing": ["marketing", "advertising", "brand", "social media", "promotion", "campaign", "digital", "content", "seo", "customer"],
}

X_SOURCE = "X (Twitter)"


def calculate_relevance_score(
    topic: TrendingTopic,
    business_type: str,
    industry_keywords: dict[str, list[str]] | None = None,
    now: datetime | None = None,
) -> int:
    industry_keywords = industry_keywords or INDUSTRY_KEYWORDS
    now = now or datetime.now(timezone.utc)

    score = 0
    business_lower = business_type.lower()
    title_lower = topic.title.lower()
    summary_lower = (topic.summary or "").lower()

    business_keywords = [k for k in business_lower.split() if len(k) > 3]

    if business_lower in title_lower or business_lower in summary_lower:
        score += 10

    for keyword in business_keywords:
        if keyword in title_lower:
            score += 5
        if keyword in summary_lower:
            score += 3

    relevant_industries = [industry for industry in industry_keywords if industry in business_lower]
    for industry in relevant_industries:
        for term in industry_keywords[industry]:
            if term in title_lower:
                score += 3
            if term in summary_lower:
                score += 1

    if topic.pub_date > now - timedelta(days=1):
        score += 3

    if topic.source:
        source_lower = topic.source.lower()
        if business_lower in source_lower:
            score += 5
        for industry in relevant_industries:
            if industry in source_lower:
                score += 3

        if topic.source_type == "reddit" and "r/" in source_lower:
            subreddit = source_lower.split("r/", 1)[1].split("/")[0]
            if subreddit:
                for industry in relevant_industries:
                    # one bonus per industry, however many keywords match
                    if any(keyword in subreddit for keyword in industry_keywords[industry]):
                        score += 4

    for category in topic.categories:
        category_lower = category.lower()
        if category_lower in business_lower:
            score += 3
        for industry in relevant_industries:
            if category_lower in industry_keywords[industry]:
                score += 2

    # X trends are the most current signal we have
    if topic.source == X_SOURCE:
        score += 2

    return score


def rank_topics(topics: list[TrendingTopic], business_type: str, limit: int = 10) -> list[TrendingTopic]:
    """Score every topic, then return the `limit` most relevant (stable for ties)."""
    now = datetime.now(timezone.utc)
    scored = [
        topic.model_copy(update={"relevance_score": calculate_relevance_score(topic, business_type, now=now)})
        for topic in topics
    ]
    scored.sort(key=lambda t: t.relevance_score or 0, reverse=True)
    return scored[:limit]
