from __future__ import annotations

import asyncio
import json
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

from fastapi.responses import JSONResponse

import config
import server
from pipeline import research, storage
from pipeline.llm import LLMError, LLMTimeoutError
from schemas.content import ContentDetails
from schemas.trending import TrendingResult, TrendingSources, TrendingTopic


def _body(resp: JSONResponse) -> dict:
    return json.loads(resp.body)


class TrendingApiTests(unittest.TestCase):
    def test_empty_result_is_404_with_payload(self):
        with patch.object(server, "get_trending_topics", return_value=TrendingResult()):
            resp = asyncio.run(server.api_trending(businessType="bakery"))
        self.assertEqual(resp.status_code, 404)
        body = _body(resp)
        self.assertEqual(body["error"], "No trending topics found from any source")
        self.assertEqual(body["topics"], [])
        self.assertEqual(body["sources"], {"reddit": False, "rss": False, "x": False})

    def test_topics_ranked_and_trimmed(self):
        now = datetime.now(timezone.utc)
        topics = [
            TrendingTopic(title="Celebrity gossip roundup", pub_date=now, source_type="rss"),
            TrendingTopic(title="Bakery owners embrace sourdough", pub_date=now, source_type="rss"),
        ]
        result = TrendingResult(topics=topics, sources=TrendingSources(rss=True))
        with patch.object(server, "get_trending_topics", return_value=result) as fetch:
            payload = asyncio.run(server.api_trending(businessType="bakery", sources="rss", limit=1))
        self.assertEqual(fetch.call_args.kwargs["limit"], config.TRENDING_FETCH_LIMIT)
        self.assertEqual(fetch.call_args.kwargs["sources"], "rss")
        self.assertEqual(len(payload["topics"]), 1)
        self.assertEqual(payload["topics"][0]["title"], "Bakery owners embrace sourdough")
        self.assertIn("relevanceScore", payload["topics"][0])
        self.assertTrue(payload["sources"]["rss"])

    def test_post_defaults_to_every_source(self):
        with patch.object(server, "get_trending_topics", return_value=TrendingResult()) as fetch:
            asyncio.run(server.api_trending_post(server.TrendingRequest(businessType="bakery")))
        self.assertEqual(fetch.call_args.kwargs["sources"], ["reddit", "rss", "x"])

    def test_failure_is_500(self):
        with patch.object(server, "get_trending_topics", side_effect=RuntimeError("boom")):
            resp = asyncio.run(server.api_trending())
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(_body(resp), {"error": "Failed to process trending request: boom", "topics": []})


class ContentApiTests(unittest.TestCase):
    def test_generated_content(self):
        with patch.object(server.content_pipeline, "generate_content", return_value="Draft"):
            resp = asyncio.run(server.api_claude_content(ContentDetails(contentType="email", platform="email")))
        self.assertEqual(resp, {"content": "Draft"})

    def test_validation_error_is_400(self):
        with patch.object(server.content_pipeline, "generate_content", side_effect=ValueError("Missing platform in request")):
            resp = asyncio.run(server.api_claude_content(ContentDetails()))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(_body(resp)["error"], "Missing platform in request")

    def test_llm_error_is_500(self):
        with patch.object(server.content_pipeline, "generate_content", side_effect=LLMError("upstream")):
            resp = asyncio.run(server.api_claude_content(ContentDetails()))
        self.assertEqual(resp.status_code, 500)

    def test_research_guard_when_enforced(self):
        with patch.object(config, "ENFORCE_RESEARCH_GUARD", True), \
             patch.object(server.content_pipeline, "generate_content") as generate:
            resp = asyncio.run(server.api_claude_content(ContentDetails(researchData="short")))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(_body(resp)["error"], "Research data required")
        generate.assert_not_called()

    def test_refine_wraps_content(self):
        with patch.object(server.content_pipeline, "refine_content", return_value="Better"):
            resp = asyncio.run(server.api_refine_content(server.RefineRequest(originalContent="a", feedback="b")))
        self.assertEqual(resp, {"content": "Better"})


class ResearchApiTests(unittest.TestCase):
    def test_claude_research_requires_topic(self):
        resp = asyncio.run(server.api_claude_research(server.ClaudeResearchRequest()))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(_body(resp)["error"], "Missing required parameter: topic")
        self.assertEqual(_body(resp)["message"], "A topic must be provided for research generation")

    def test_claude_research_requires_key(self):
        with patch.object(config, "ANTHROPIC_API_KEY", ""):
            resp = asyncio.run(server.api_claude_research(server.ClaudeResearchRequest(topic="seo")))
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(_body(resp)["error"], "No Claude API key configured")
        self.assertIn("ANTHROPIC_API_KEY", _body(resp)["message"])

    def test_claude_research_error_prefix(self):
        with patch.object(config, "ANTHROPIC_API_KEY", "test-key"), \
             patch.object(server, "generate_claude_research", side_effect=LLMError("overloaded")):
            resp = asyncio.run(server.api_claude_research(server.ClaudeResearchRequest(topic="seo")))
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(_body(resp)["error"], "Claude API error: overloaded")
        self.assertIn("Failed to generate research with Claude API", _body(resp)["message"])

    def test_claude_research_null_categories(self):
        req = server.ClaudeResearchRequest(topic="fiber", trendingTopics=[{"title": "Fiber rollout", "categories": None}])
        with patch.object(config, "ANTHROPIC_API_KEY", "test-key"), \
             patch.object(research.llm, "call_task", return_value="Brief") as call:
            resp = asyncio.run(server.api_claude_research(req))
        self.assertEqual(resp["research"], "Brief")
        self.assertIn('1. "Fiber rollout" - ', call.call_args.args[2])

    def test_perplexity_timeout_is_504(self):
        with patch.object(config, "PERPLEXITY_API_KEY", "test-key"), \
             patch.object(server, "generate_perplexity_research", side_effect=LLMTimeoutError("slow")):
            resp = asyncio.run(server.api_perplexity_research(server.PerplexityResearchRequest(topic="seo")))
        self.assertEqual(resp.status_code, 504)

    def test_perplexity_success_passes_company(self):
        req = server.PerplexityResearchRequest(topic="coffee", companyName="Acme", websiteContent={"title": "Acme"})
        with patch.object(config, "PERPLEXITY_API_KEY", "test-key"), \
             patch.object(server, "generate_perplexity_research", return_value="Report") as research:
            resp = asyncio.run(server.api_perplexity_research(req))
        self.assertEqual(resp, {"research": "Report"})
        self.assertEqual(research.call_args.kwargs["company_name"], "Acme")
        self.assertEqual(research.call_args.kwargs["sources"], ["recent", "scholar"])

    def test_perplexity_requires_key(self):
        with patch.object(config, "PERPLEXITY_API_KEY", ""):
            resp = asyncio.run(server.api_perplexity_research(server.PerplexityResearchRequest(topic="seo")))
        self.assertEqual(resp.status_code, 500)

    def test_analyze(self):
        resp = asyncio.run(server.api_research_analyze(server.AnalyzeRequest(researchData="Contact us for a demo")))
        self.assertTrue(resp["hasCallToAction"])
        self.assertLessEqual(len(resp["recommendations"]), 3)

    def test_best_practices(self):
        self.assertEqual(asyncio.run(server.api_best_practices()).status_code, 400)
        resp = asyncio.run(server.api_best_practices(platform="linkedin", contentType="email"))
        self.assertEqual(resp["platform"]["name"], "linkedin")
        self.assertTrue(resp["contentType"]["markdown"].startswith("## Current Email Best Practices"))


class ScrapeAndImageApiTests(unittest.TestCase):
    def test_scrape_requires_url(self):
        resp = asyncio.run(server.api_scrape_website(server.ScrapeRequest()))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(_body(resp), {"error": "URL is required", "success": False})

    def test_scrape_normalizes_url(self):
        with patch.object(server.scraper, "scrape_website", return_value={"title": "Acme"}) as scrape:
            resp = asyncio.run(server.api_scrape_website(server.ScrapeRequest(url="acme.com")))
        self.assertEqual(resp, {"success": True, "url": "https://acme.com", "data": {"title": "Acme"}})
        self.assertEqual(scrape.call_args.args, ("https://acme.com", 10, 2))

    def test_scrape_failure(self):
        with patch.object(server.scraper, "scrape_website", side_effect=ValueError("Website returned HTTP 503")):
            resp = asyncio.run(server.api_scrape_website(server.ScrapeRequest(url="https://acme.com")))
        self.assertEqual(resp.status_code, 500)
        self.assertFalse(_body(resp)["success"])

    def test_generate_image_error_in_spanish(self):
        req = server.GenerateImageRequest(prompt="un gato", language="es")
        with patch.object(server.images, "generate_image", side_effect=LLMError("quota")):
            resp = asyncio.run(server.api_generate_image(req))
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(_body(resp)["error"], "Error al generar la imagen: quota")

    def test_generate_image_requires_prompt(self):
        with patch.object(server.images, "generate_image", side_effect=ValueError("Prompt is required")):
            resp = asyncio.run(server.api_generate_image(server.GenerateImageRequest()))
        self.assertEqual(resp.status_code, 400)

    def test_edit_image_requires_key(self):
        with patch.object(config, "GEMINI_API_KEY", ""):
            resp = asyncio.run(server.api_edit_image(server.EditImageRequest(sourceImage="abc", prompt="x")))
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(_body(resp)["error"], "GEMINI_API_KEY environment variable is not set")

    def test_edit_image_unexpected_error(self):
        with patch.object(config, "GEMINI_API_KEY", "test-key"), \
             patch.object(server.images, "edit_image", side_effect=RuntimeError("API key invalid")):
            resp = asyncio.run(server.api_edit_image(server.EditImageRequest(sourceImage="abc", prompt="x")))
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(_body(resp), {"error": "Gemini AI Error: API key invalid", "apiLimited": True})


class ContentLibraryApiTests(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self._orig_db_path = storage.DB_PATH
        storage.reset_storage_connection_for_tests()
        storage.DB_PATH = Path(self._tmpdir.name) / "content.db"
        storage.init_db()

    def tearDown(self):
        storage.reset_storage_connection_for_tests()
        storage.DB_PATH = self._orig_db_path
        self._tmpdir.cleanup()

    def _save(self, **kw) -> str:
        body = {"title": "Launch", "content": "We shipped.", "userId": "u1", **kw}
        resp = asyncio.run(server.api_save_content(body))
        self.assertTrue(resp["ok"])
        return resp["id"]

    def test_save_requires_fields(self):
        resp = asyncio.run(server.api_save_content({"title": "x"}))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(_body(resp)["error"], "Missing required content data: content, userId")

    def test_round_trip_with_camel_case_keys(self):
        content_id = self._save(contentType="email")
        item = asyncio.run(server.api_get_content(content_id))
        self.assertEqual(item["id"], content_id)
        self.assertEqual(item["contentType"], "email")
        self.assertEqual(item["userId"], "u1")

    def test_unknown_id_is_404(self):
        for call in (server.api_get_content, server.api_archive_content, server.api_restore_content, server.api_delete_content):
            resp = asyncio.run(call("missing"))
            self.assertEqual(resp.status_code, 404)
            self.assertEqual(_body(resp)["error"], "Content missing not found")

    def test_update_and_invalid_update(self):
        content_id = self._save()
        self.assertEqual(
            asyncio.run(server.api_update_content(content_id, {"status": "published"})),
            {"ok": True, "id": content_id},
        )
        resp = asyncio.run(server.api_update_content(content_id, {"status": "gone"}))
        self.assertEqual(resp.status_code, 400)

    def test_list_search_stats(self):
        first = self._save(title="Spring sale")
        second = self._save(title="Roadmap")
        asyncio.run(server.api_archive_content(second))

        self.assertEqual(asyncio.run(server.api_list_content()).status_code, 400)
        listed = asyncio.run(server.api_list_content(userId="u1", status="draft"))
        self.assertEqual([i["id"] for i in listed], [first])
        found = asyncio.run(server.api_search_content(userId="u1", q="SALE"))
        self.assertEqual([i["id"] for i in found], [first])
        stats = asyncio.run(server.api_content_stats(userId="u1"))
        self.assertEqual(stats["archived"], 1)
        self.assertEqual(stats["byType"], {"general": 2})

    def test_delete(self):
        content_id = self._save()
        self.assertEqual(asyncio.run(server.api_delete_content(content_id)), {"ok": True, "deleted": content_id})
        self.assertEqual(asyncio.run(server.api_get_content(content_id)).status_code, 404)


class HealthApiTests(unittest.TestCase):
    def test_reports_missing_keys(self):
        with patch.object(config, "ANTHROPIC_API_KEY", ""), patch.object(config, "TWITTER_API_KEY", ""), \
             patch.object(config, "RSS_FEED_URLS", "https://example.com/feed"):
            resp = asyncio.run(server.api_health())
        self.assertFalse(resp["ok"])
        self.assertFalse(resp["providers"]["anthropic"])
        self.assertFalse(resp["trending_sources"]["x"])
        self.assertTrue(resp["trending_sources"]["rss"])
        self.assertTrue(any("ANTHROPIC_API_KEY" in w for w in resp["warnings"]))
        self.assertFalse(any("RSS_FEED_URLS" in w for w in resp["warnings"]))

    def test_rss_unconfigured(self):
        with patch.object(config, "RSS_FEED_URLS", ""):
            resp = asyncio.run(server.api_health())
        self.assertFalse(resp["trending_sources"]["rss"])
        self.assertTrue(any("RSS_FEED_URLS" in w for w in resp["warnings"]))


if __name__ == "__main__":
    unittest.main()
