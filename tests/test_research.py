from __future__ import annotations

import unittest
from datetime import datetime
from unittest.mock import patch

from pipeline import research
from pipeline.llm import LLMError, LLMTimeoutError
from prompts import research_prompts

NOW = datetime(2025, 3, 10)


def _good_research(year: int) -> str:
    return (
        f"Current best practices for {year}: short video, founder-led posts and community replies. "
        + "Detailed supporting analysis with sources and examples. " * 8
    )


class QualityGateTests(unittest.TestCase):
    def test_complete_research_is_valid(self):
        result = research.verify_research_quality(_good_research(2025), now=NOW)
        self.assertEqual(result, {"valid": True, "issues": []})

    def test_short_stale_research_collects_every_issue(self):
        result = research.verify_research_quality("Some notes from 2019.", now=NOW)
        self.assertFalse(result["valid"])
        self.assertEqual(len(result["issues"]), 3)
        self.assertIn("Research data may not include recent information (2025)", result["issues"])

    def test_trend_markers_stand_in_for_best_practices(self):
        text = "Key Points for 2025. " + "Plenty of supporting detail here. " * 12
        self.assertTrue(research.verify_research_quality(text, now=NOW)["valid"])

    def test_quality_error_message(self):
        exc = research.ResearchQualityError(["a", "b"])
        self.assertEqual(str(exc), "Research quality check failed: a, b")
        self.assertEqual(exc.issues, ["a", "b"])


class GuardTests(unittest.TestCase):
    def test_missing_research(self):
        self.assertEqual(research.guard_research({"researchData": "short"})["error"], "Research data required")

    def test_missing_parameters(self):
        body = {"researchData": "x" * 60, "contentType": "blog-post", "platform": "blog"}
        self.assertEqual(research.guard_research(body)["error"], "Missing required parameters")

    def test_complete_body_passes(self):
        body = {"researchData": "x" * 60, "contentType": "blog-post", "platform": "blog", "audience": "founders"}
        self.assertIsNone(research.guard_research(body))


class ContextParsingTests(unittest.TestCase):
    def test_full_context(self):
        ctx = research.parse_research_context(
            "Target Audience: founders, Content Type: blog-post, Platform: social, Sub-Platform: linkedin"
        )
        self.assertEqual(ctx, {
            "audience": "founders",
            "content_type": "blog-post",
            "platform": "social",
            "sub_platform": "linkedin",
        })

    def test_defaults_fill_missing_keys(self):
        ctx = research.parse_research_context("", {"audience": "general audience"})
        self.assertEqual(ctx["audience"], "general audience")
        self.assertEqual(ctx["platform"], "")

    def test_thinking_tags_removed(self):
        text = "<thinking>plan</thinking>Intro <think>hmm</think>body"
        self.assertEqual(research.remove_thinking_tags(text), "Intro body")
        self.assertEqual(research.remove_thinking_tags(""), "")


class ClaudeResearchTests(unittest.TestCase):
    def test_social_platform_resolves_to_sub_platform(self):
        with patch.object(research.llm, "call_task", return_value="<thinking>x</thinking>Brief") as call:
            result = research.generate_claude_research(
                "remote work", context="Platform: social, Sub-Platform: linkedin",
            )
        self.assertEqual(result["research"], "Brief")
        self.assertEqual(result["platform"], "linkedin")
        self.assertEqual(result["subPlatform"], "linkedin")
        self.assertEqual(result["using"], "real")
        task, _, prompt = call.call_args.args
        self.assertEqual(task, "claude_research")
        self.assertIn("PLATFORM: linkedin (specifically linkedin)", prompt)

    def test_social_without_sub_platform_is_facebook(self):
        with patch.object(research.llm, "call_task", return_value="Brief"):
            result = research.generate_claude_research("remote work", context="Platform: social")
        self.assertEqual(result["platform"], "facebook")

    def test_topic_required(self):
        with self.assertRaises(ValueError):
            research.generate_claude_research("")

    def test_llm_errors_propagate(self):
        with patch.object(research.llm, "call_task", side_effect=LLMError("boom")):
            with self.assertRaises(LLMError):
                research.generate_claude_research("remote work")


class PerplexityResearchTests(unittest.TestCase):
    def test_company_name(self):
        self.assertEqual(
            research.extract_company_name('focus on company-specific information about "Acme Co".'),
            "Acme Co",
        )
        self.assertEqual(research.extract_company_name('the topic: "Globex"'), "Globex")
        self.assertEqual(research.extract_company_name('the topic: "Tips for Dentists"'), "")
        self.assertEqual(research.extract_company_name('the topic: "how small firms hire engineers"'), "")

    def test_general_system_prompt_without_company(self):
        self.assertEqual(
            research.perplexity_system_prompt('the topic: "how small firms hire engineers"'),
            research.GENERAL_RESEARCH_SYSTEM,
        )

    def test_company_research_uses_company_system_prompt(self):
        with patch.object(research.llm, "call_task", return_value="Deep report") as call:
            result = research.generate_perplexity_research(
                "coffee subscriptions", company_name="Acme Roasters", language="en",
            )
        self.assertEqual(result, "Deep report")
        task, system, prompt = call.call_args.args
        self.assertEqual(task, "perplexity_research")
        self.assertIn("MANDATORY COMPANY RESEARCH INSTRUCTIONS", system)
        self.assertIn("https://www.acmeroasters.com", system)
        self.assertIn("COMPANY RESEARCH STRUCTURE", prompt)

    def test_spanish_company_instructions(self):
        with patch.object(research.llm, "call_task", return_value="Informe") as call:
            research.generate_perplexity_research("café", company_name="Acme", language="es")
        self.assertIn("INSTRUCCIONES DE INVESTIGACIÓN DE EMPRESAS OBLIGATORIAS", call.call_args.args[1])

    def test_topic_required(self):
        with self.assertRaises(ValueError):
            research.generate_perplexity_research("")


class ErrorMappingTests(unittest.TestCase):
    def test_timeout(self):
        status, message = research.research_error_response(LLMTimeoutError("took too long"))
        self.assertEqual(status, 504)
        self.assertIn("timed out", message)

    def test_rate_limit(self):
        self.assertEqual(research.research_error_response(LLMError("status 429"))[0], 429)

    def test_authentication(self):
        self.assertEqual(research.research_error_response(LLMError("Authentication failed (401)"))[0], 401)

    def test_other_errors_keep_message(self):
        self.assertEqual(research.research_error_response(LLMError("boom")), (500, "boom"))
        self.assertEqual(
            research.research_error_response(RuntimeError()),
            (500, "Unknown error occurred while generating research"),
        )


class ResearchPromptTests(unittest.TestCase):
    def test_claude_prompt_caps_trending_topics(self):
        topics = [{"title": f"Topic {i}", "categories": ["news"], "summary": ""} for i in range(8)]
        prompt = research_prompts.build_claude_research_prompt("remote work", trending_topics=topics, now=NOW)
        self.assertIn("RELATED TRENDING TOPICS (03/10/2025)", prompt)
        self.assertIn('5. "Topic 4"', prompt)
        self.assertNotIn("Topic 5", prompt)
        self.assertIn("CURRENT BEST PRACTICES (As of March 2025)", prompt)

    def test_claude_prompt_tolerates_loose_categories(self):
        topics = [
            {"title": "Fiber rollout", "categories": None, "summary": None},
            {"title": "Rural broadband", "categories": ["telecom", 5, None]},
            {"title": "Cable cuts", "categories": "news"},
        ]
        prompt = research_prompts.build_claude_research_prompt("fiber", trending_topics=topics, now=NOW)
        self.assertIn('1. "Fiber rollout" - ', prompt)
        self.assertIn('2. "Rural broadband" - telecom, 5', prompt)
        self.assertIn('3. "Cable cuts" - news', prompt)

    def test_claude_prompt_spanish(self):
        prompt = research_prompts.build_claude_research_prompt("trabajo remoto", language="es", now=NOW)
        self.assertIn("MEJORES PRÁCTICAS ACTUALES (A partir de March 2025)", prompt)

    def test_deep_prompt_includes_website_block(self):
        website = {
            "title": "Acme Roasters",
            "headings": ["Our coffee"],
            "paragraphs": ["We roast small batches of specialty coffee every single morning."],
        }
        prompt = research_prompts.get_prompt_for_topic(
            "coffee", company_name="Acme", website_content=website, now=NOW,
        )
        self.assertIn("TODAY'S DATE IS March 10, 2025", prompt)
        self.assertIn("SCRAPED WEBSITE DATA - MUST USE THIS INFORMATION - PRIORITY #1", prompt)
        self.assertIn('Website Title: "Acme Roasters"', prompt)

    def test_no_website_is_business(self):
        self.assertEqual(research_prompts.detect_content_type(None), "business")

    def test_language_instruction(self):
        self.assertEqual(research_prompts.language_instruction("en"), "")
        self.assertIn("español", research_prompts.language_instruction("es"))
        self.assertIn("MUST be written in fr", research_prompts.language_instruction("fr"))


if __name__ == "__main__":
    unittest.main()
