"""Trending topic schema — one normalized item from Reddit, X or an RSS feed.

Every source client maps its raw payload into TrendingTopic so the
aggregator can merge, sort, dedupe and score them uniformly.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field

SourceType = Literal["reddit", "rss", "x"]


class TrendingTopic(BaseModel):
    """A single trending item, normalized across sources."""

    title: str = Field(description="Headline of the post, trend or feed entry.")
    summary: str = Field(
        default="No description available",
        description="Short description shown under the title.",
    )
    url: str = Field(default="", description="Link to the original item.")
    pub_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Publication time (timezone-aware).",
    )
    score: int = Field(default=0, description="Source engagement score (upvotes, tweet volume).")
    source: str = Field(default="", description="Display source, e.g. 'r/marketing' or 'RSS - techcrunch'.")
    categories: list[str] = Field(default_factory=list)
    source_type: SourceType = Field(default="reddit")
    relevance_score: Optional[int] = Field(
        default=None,
        description="Business relevance, assigned by pipeline.relevance.",
    )

    def to_api(self) -> dict:
        """Serialize with the camelCase keys the HTTP API returns."""
        data = {
            "title": self.title,
            "summary": self.summary,
            "url": self.url,
            "pubDate": self.pub_date.isoformat(),
            "score": self.score,
            "source": self.source,
            "categories": list(self.categories),
            "sourceType": self.source_type,
        }
        if self.relevance_score is not None:
            data["relevanceScore"] = self.relevance_score
        return data


class TrendingSources(BaseModel):
    """Which sources contributed at least one topic."""

    reddit: bool = False
    rss: bool = False
    x: bool = False


class TrendingResult(BaseModel):
    topics: list[TrendingTopic] = Field(default_factory=list)
    sources: TrendingSources = Field(default_factory=TrendingSources)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
