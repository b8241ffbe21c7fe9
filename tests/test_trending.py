from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import httpx

from pipeline import reddit_client, rss_feeds, trending, x_client
from pipeline.reddit_client import TrendingSourceError
from pipeline.relevance import calculate_relevance_score, rank_topics
from schemas.trending import TrendingTopic

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


def _topic(title: str, hours_old: float = 1, **kw) -> TrendingTopic:
    return TrendingTopic(title=title, pub_date=NOW - timedelta(hours=hours_old), **kw)


class DuplicateRemovalTests(unittest.TestCase):
    def test_contained_title_is_duplicate(self):
        topics = [_topic("AI tools for small business"), _topic("AI Tools for Small Business owners")]
        self.assertEqual(len(trending.remove_duplicate_topics(topics)), 1)

    def test_half_word_overlap_is_duplicate(self):
        self.assertTrue(trending.is_similar_title(
            "starlink expands rural coverage", "rural coverage gets boost from satellites",
        ))

    def test_distinct_titles_are_kept_in_order(self):
        topics = [_topic("Fiber rollout in Texas"), _topic("New SEO ranking factors"), _topic("Quarterly tax deadlines")]
        unique = trending.remove_duplicate_topics(topics)
        self.assertEqual([t.title for t in unique], [t.title for t in topics])

    def test_short_word_titles_count_as_duplicates(self):
        # No words longer than 3 chars -> threshold 0
        self.assertTrue(trending.is_similar_title("ai is hot", "new tax law"))


class NormalizeSourcesTests(unittest.TestCase):
    def test_twitter_alias_and_unknown_names(self):
        self.assertEqual(trending.normalize_sources("Reddit, twitter, myspace"), ["reddit", "x"])

    def test_none_means_all(self):
        self.assertEqual(trending.normalize_sources(None), ["reddit", "rss", "x"])


class AggregationTests(unittest.TestCase):
    def test_failing_source_is_skipped_and_flags_reflect_contributors(self):
        rss_items = [_topic("Quarterly earnings report", hours_old=30, source_type="rss"), _topic("Fiber rollout announced", hours_old=1, source_type="rss")]
        x_items = [_topic("#Trend", hours_old=2, source_type="x")]
        with patch.object(trending, "get_reddit_trending_topics", side_effect=TrendingSourceError("auth failed")), \
             patch.object(trending, "get_rss_trending_topics", return_value=rss_items), \
             patch.object(trending, "get_x_trending_topics", return_value=x_items):
            result = trending.get_trending_topics("marketing", limit=10)

        self.assertFalse(result.sources.reddit)
        self.assertTrue(result.sources.rss)
        self.assertTrue(result.sources.x)
        self.assertEqual([t.title for t in result.topics], ["Fiber rollout announced", "#Trend", "Quarterly earnings report"])

    def test_only_requested_sources_are_called(self):
        with patch.object(trending, "get_reddit_trending_topics") as reddit, \
             patch.object(trending, "get_rss_trending_topics", return_value=[_topic("Feed item")]), \
             patch.object(trending, "get_x_trending_topics") as x:
            result = trending.get_trending_topics("marketing", sources=["rss"])
        reddit.assert_not_called()
        x.assert_not_called()
        self.assertEqual(len(result.topics), 1)

    def test_limit_applies_after_dedupe(self):
        titles = ["Fiber rollout in Texas", "New SEO ranking factors", "Quarterly tax deadlines", "Yoga studios boom"]
        items = [_topic(title, hours_old=i) for i, title in enumerate(titles)]
        with patch.object(trending, "get_rss_trending_topics", return_value=items):
            result = trending.get_trending_topics("", limit=2, sources="rss")
        self.assertEqual(len(result.topics), 2)

    def test_no_topics_returns_empty_result(self):
        with patch.object(trending, "get_rss_trending_topics", return_value=[]):
            result = trending.get_trending_topics("anything", sources=["rss"])
        self.assertEqual(result.topics, [])
        self.assertFalse(result.sources.rss)


class RelevanceTests(unittest.TestCase):
    def test_internet_topic_scoring(self):
        topic = TrendingTopic(
            title="Rural internet speeds improve",
            summary="Fiber broadband expands",
            pub_date=NOW - timedelta(days=2),
            source="r/technology",
            source_type="reddit",
            categories=["technology", "reddit"],
        )
        # internet keyword in title (5) + industry terms internet/speed in title (3+3)
        # + broadband/fiber in summary (1+1)
        self.assertEqual(calculate_relevance_score(topic, "internet provider", now=NOW), 13)

    def test_x_trend_gets_recency_and_source_bonus(self):
        topic = TrendingTopic(
            title="#Streaming",
            summary="Trending on X with unknown tweets.",
            pub_date=NOW,
            source="X (Twitter)",
            source_type="x",
            categories=["social", "x", "twitter"],
        )
        self.assertEqual(calculate_relevance_score(topic, "marketing agency", now=NOW), 5)

    def test_full_business_type_and_subreddit_match(self):
        topic = TrendingTopic(
            title="How a marketing agency doubled leads",
            summary="",
            pub_date=NOW - timedelta(days=3),
            source="r/digitalmarketing",
            source_type="reddit",
            categories=["digitalmarketing", "reddit"],
        )
        score = calculate_relevance_score(topic, "marketing agency", now=NOW)
        # 10 full match + 5 marketing + 5 agency + 3 marketing term + 3 industry in source + 4 subreddit
        self.assertEqual(score, 30)

    def test_rank_topics_sorts_and_limits(self):
        topics = [
            _topic("Celebrity gossip roundup", hours_old=48),
            _topic("Broadband grants announced for rural internet", hours_old=48),
            _topic("Wifi 7 routers arrive", hours_old=48),
        ]
        ranked = rank_topics(topics, "internet provider", limit=2)
        self.assertEqual(len(ranked), 2)
        self.assertEqual(ranked[0].title, "Broadband grants announced for rural internet")
        self.assertGreaterEqual(ranked[0].relevance_score, ranked[1].relevance_score)
        self.assertIsNone(topics[0].relevance_score)


class RedditClientTests(unittest.TestCase):
    def test_missing_credentials_raise(self):
        with patch.object(reddit_client.config, "REDDIT_CLIENT_ID", ""), \
             patch.object(reddit_client.config, "REDDIT_CLIENT_SECRET", ""):
            with self.assertRaises(TrendingSourceError) as ctx:
                reddit_client.get_reddit_access_token()
        self.assertIn("REDDIT_CLIENT_ID", str(ctx.exception))
        self.assertIn("REDDIT_CLIENT_SECRET", str(ctx.exception))

    def test_auth_failure_message(self):
        response = MagicMock(is_success=False, status_code=401, text="unauthorized")
        with patch.object(reddit_client.config, "REDDIT_CLIENT_ID", "id"), \
             patch.object(reddit_client.config, "REDDIT_CLIENT_SECRET", "secret"), \
             patch.object(reddit_client.httpx, "post", return_value=response) as post:
            with self.assertRaises(TrendingSourceError) as ctx:
                reddit_client.get_reddit_access_token()
        self.assertEqual(str(ctx.exception), "Reddit API authentication failed with status 401: unauthorized")
        self.assertIn("device_id=DEEPCONTENT_APP_ID_FIXED", post.call_args.kwargs["content"])

    def test_subreddits_for_business(self):
        subs = reddit_client.get_subreddits_for_business("Rural Internet Provider")
        self.assertEqual(subs[0], "technology")
        self.assertEqual(subs[-4:], ["business", "marketing", "entrepreneur", "smallbusiness"])
        self.assertEqual(reddit_client.get_subreddits_for_business("bakery"), reddit_client.DEFAULT_SUBREDDITS)

    def test_trending_topics_filter_and_rank(self):
        posts = {
            "business": [
                {"title": "Quiet post", "score": 2, "num_comments": 1, "subreddit": "business", "permalink": "/r/business/1", "created_utc": 1700000000},
                {"title": "Hot thread", "score": 10, "num_comments": 20, "subreddit": "business", "permalink": "/r/business/2",
                 "created_utc": 1700000000, "selftext": "x" * 300},
            ],
            "marketing": [
                {"title": "Upvoted link", "score": 50, "num_comments": 0, "subreddit": "marketing", "permalink": "/r/marketing/3", "created_utc": 1700000100},
            ],
        }
        with patch.object(reddit_client, "get_reddit_access_token", return_value="tok"), \
             patch.object(reddit_client, "fetch_subreddit_hot", side_effect=lambda sub, tok: posts.get(sub, [])):
            topics = reddit_client.get_reddit_trending_topics("bakery")

        self.assertEqual([t.title for t in topics], ["Hot thread", "Upvoted link"])
        hot = topics[0]
        self.assertEqual(hot.summary, "x" * 250 + "...")
        self.assertEqual(hot.url, "https://www.reddit.com/r/business/2")
        self.assertEqual(hot.source, "r/business")
        self.assertEqual(hot.categories, ["business", "reddit"])
        self.assertEqual(topics[1].summary, "No description available")

    def test_no_posts_raises(self):
        with patch.object(reddit_client, "get_reddit_access_token", return_value="tok"), \
             patch.object(reddit_client, "fetch_subreddit_hot", return_value=[]):
            with self.assertRaises(TrendingSourceError) as ctx:
                reddit_client.get_reddit_trending_topics("bakery")
        self.assertIn("No trending topics found on Reddit", str(ctx.exception))


class XClientTests(unittest.TestCase):
    def test_trend_mapping(self):
        with_volume = x_client._trend_to_topic({"name": "#AI", "query": "%23AI", "tweet_volume": 12345, "url": "http://twitter.com/search?q=%23AI"}, NOW)
        self.assertEqual(with_volume.summary, "Trending on X with 12,345 tweets.")
        self.assertEqual(with_volume.score, 12345)
        self.assertEqual(with_volume.source, "X (Twitter)")
        self.assertEqual(with_volume.categories, ["social", "x", "twitter"])

        no_volume = x_client._trend_to_topic({"name": "Monday", "query": "Monday"}, NOW)
        self.assertEqual(no_volume.summary, "Trending on X with unknown tweets.")
        self.assertEqual(no_volume.url, "https://twitter.com/search?q=Monday")
        self.assertEqual(no_volume.score, 0)

    def test_missing_credentials_return_empty(self):
        with patch.object(x_client.config, "TWITTER_API_KEY", ""), \
             patch.object(x_client.httpx, "post") as post:
            self.assertEqual(x_client.get_x_trending_topics("marketing"), [])
        post.assert_not_called()

    def test_top_fifteen_trends(self):
        trends = [{"name": f"trend {i}", "query": f"trend{i}", "tweet_volume": i} for i in range(20)]
        with patch.object(x_client.config, "TWITTER_API_KEY", "k"), \
             patch.object(x_client.config, "TWITTER_API_SECRET", "s"), \
             patch.object(x_client, "get_x_access_token", return_value="tok"), \
             patch.object(x_client, "fetch_x_trends", return_value=trends):
            topics = x_client.get_x_trending_topics()
        self.assertEqual(len(topics), 15)


RSS_BODY = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>Example</title>
<item><title>First &amp; Best</title><link>https://example.com/1</link>
<description>&lt;p&gt;Hello &lt;b&gt;world&lt;/b&gt;&lt;/p&gt;</description>
<pubDate>Mon, 06 Jan 2025 10:00:00 GMT</pubDate></item>
<item><title>Missing link</title><description>skip me</description></item>
<item><title>Second</title><link>https://example.com/2</link>
<pubDate>Tue, 07 Jan 2025 10:00:00 GMT</pubDate></item>
</channel></rss>"""


class RssFeedTests(unittest.TestCase):
    def test_source_name(self):
        self.assertEqual(rss_feeds.extract_source_name("https://www.techcrunch.com/feed"), "techcrunch")
        self.assertEqual(rss_feeds.extract_source_name("not a url"), "Unknown Source")

    def test_fetch_feed_parses_entries(self):
        response = MagicMock(is_success=True, status_code=200, content=RSS_BODY.encode("utf-8"))
        with patch.object(rss_feeds.httpx, "get", return_value=response):
            topics = rss_feeds.fetch_rss_feed("https://www.example.com/rss")

        self.assertEqual([t.title for t in topics], ["First & Best", "Second"])
        first = topics[0]
        self.assertEqual(first.summary, "Hello world")
        self.assertEqual(first.source, "RSS - example")
        self.assertEqual(first.categories, ["example", "rss"])
        self.assertEqual(first.source_type, "rss")
        self.assertEqual(first.pub_date, datetime(2025, 1, 6, 10, 0, tzinfo=timezone.utc))
        self.assertEqual(topics[1].summary, "No description available")

    def test_latin1_feed_uses_declared_encoding(self):
        body = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
            "<rss version=\"2.0\"><channel><title>Local</title>"
            "<item><title>Café owners adopt fibre</title><link>https://news.example.com/cafe</link>"
            "<description>Más velocidad</description></item>"
            "</channel></rss>"
        ).encode("iso-8859-1")
        request = httpx.Request("GET", "https://news.example.com/rss")
        response = httpx.Response(200, content=body, headers={"Content-Type": "application/rss+xml"}, request=request)
        with patch.object(rss_feeds.httpx, "get", return_value=response):
            topics = rss_feeds.fetch_rss_feed("https://news.example.com/rss")

        self.assertEqual([t.title for t in topics], ["Café owners adopt fibre"])
        self.assertEqual(topics[0].summary, "Más velocidad")

    def test_http_failure_yields_nothing(self):
        response = MagicMock(is_success=False, status_code=503, content=b"")
        with patch.object(rss_feeds.httpx, "get", return_value=response):
            self.assertEqual(rss_feeds.fetch_rss_feed("https://example.com/rss"), [])

    def test_trending_merges_feeds_newest_first(self):
        feeds = {
            "a": [_topic("A old", hours_old=10), _topic("A new", hours_old=1)],
            "b": [_topic("B mid", hours_old=5)],
        }
        with patch.object(rss_feeds, "fetch_rss_feed", side_effect=lambda url: feeds[url]):
            topics = rss_feeds.get_rss_trending_topics(["a", "b"], limit=2)
        self.assertEqual([t.title for t in topics], ["A new", "B mid"])

    def test_no_feeds_configured(self):
        with patch.object(rss_feeds.config, "RSS_FEED_URLS", ""):
            self.assertEqual(rss_feeds.get_rss_trending_topics(), [])


if __name__ == "__main__":
    unittest.main()
