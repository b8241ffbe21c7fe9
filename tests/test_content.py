from __future__ import annotations

import unittest
from datetime import datetime
from unittest.mock import patch

import config
from pipeline import content, content_detection
from pipeline.llm import LLMError, LLMTimeoutError
from pipeline.research import ResearchQualityError
from prompts import best_practices, content_prompts
from schemas.content import AnswerQuestionRequest, ContentDetails, FollowUpRequest, RefineRequest


def _research() -> str:
    year = datetime.now().year
    return (
        f"LinkedIn best practices in {year}: founder-led posts outperform brand pages. "
        + "Supporting evidence, examples and commentary from recent campaigns. " * 6
    )


def _details(**kw) -> ContentDetails:
    base = {
        "contentType": "social-media",
        "platform": "social",
        "subPlatform": "linkedin",
        "audience": "founders",
        "researchData": _research(),
        "style": "ariastar",
    }
    base.update(kw)
    return ContentDetails(**base)


class CondenseTests(unittest.TestCase):
    def test_short_prompt_untouched(self):
        prompt = "RESEARCH DATA:\nshort\n\nNEXT SECTION:"
        self.assertEqual(content.condense_research_in_prompt(prompt), prompt)

    def test_oversized_research_keeps_head_and_tail(self):
        research = "h" * 20_000 + "m" * 50_000 + "t" * 20_000
        prompt = "INTRO\n\nRESEARCH DATA:\n" + research + "\n\nNEXT SECTION: keep me"
        condensed = content.condense_research_in_prompt(prompt)
        self.assertIn(content.CONDENSED_NOTE, condensed)
        self.assertNotIn("m" * 100, condensed)
        self.assertTrue(condensed.endswith("\n\nNEXT SECTION: keep me"))
        self.assertLess(len(condensed), len(prompt))

    def test_without_research_section(self):
        prompt = "x" * (content.MAX_PROMPT_LENGTH + 1)
        self.assertEqual(content.condense_research_in_prompt(prompt), prompt)


class PersonaNameTests(unittest.TestCase):
    def test_other_persona_names_swapped(self):
        text = content.replace_foreign_persona_names("Hi, I'm MentorPro and DataStory helps too.", "ariastar")
        self.assertEqual(text, "Hi, I'm AriaStar and AriaStar helps too.")

    def test_own_name_kept(self):
        text = content.replace_foreign_persona_names("ariastar here", "ariastar")
        self.assertEqual(text, "ariastar here")


class ValidationTests(unittest.TestCase):
    def test_missing_content_type(self):
        with self.assertRaisesRegex(content.ContentValidationError, "Missing contentType"):
            content.validate_content_request(_details(contentType=""))

    def test_missing_platform(self):
        with self.assertRaisesRegex(content.ContentValidationError, "Missing platform"):
            content.validate_content_request(_details(platform=""))

    def test_research_or_transcript_required(self):
        with self.assertRaisesRegex(content.ContentValidationError, "Missing research data"):
            content.validate_content_request(_details(researchData=""))

    def test_transcription_needs_no_research(self):
        content.validate_content_request(_details(contentType="transcription", researchData=""))

    def test_weak_research_rejected(self):
        with self.assertRaises(ResearchQualityError):
            content.validate_content_request(_details(researchData="thin notes"))

    def test_transcript_skips_quality_gate(self):
        content.validate_content_request(_details(researchData="thin notes", youtubeTranscript="transcript"))


class GenerateContentTests(unittest.TestCase):
    def setUp(self):
        self.key = patch.object(config, "ANTHROPIC_API_KEY", "test-key")
        self.key.start()

    def tearDown(self):
        self.key.stop()

    def test_draft_is_post_processed(self):
        draft = "Hey friends, MentorPro here with the results you wanted.\n\nA second paragraph of the post."
        with patch.object(content.llm, "call_task", return_value=draft) as call:
            text = content.generate_content(_details())
        self.assertEqual(call.call_args.args[0], "content")
        self.assertIn('"AriaStar" persona', call.call_args.args[1])
        self.assertIn("RESEARCH DATA:", call.call_args.args[2])
        self.assertIn("AriaStar here", text)
        self.assertNotIn("MentorPro", text)
        self.assertIn("Did you know that up to", text)

    def test_persona_change_uses_previous_content(self):
        with patch.object(content.llm, "call_task", return_value="Rewritten") as call:
            content.generate_content(_details(
                isPersonaChange=True, previousPersona="specialist_mentor", previousContent="Old draft",
            ))
        prompt = call.call_args.args[2]
        self.assertIn("PREVIOUS PERSONA: specialist_mentor", prompt)
        self.assertIn("Old draft", prompt)

    def test_timeout_message(self):
        with patch.object(content.llm, "call_task", side_effect=LLMTimeoutError("slow")):
            with self.assertRaises(LLMTimeoutError) as ctx:
                content.generate_content(_details())
        self.assertEqual(str(ctx.exception), content.TIMEOUT_MESSAGE)

    def test_empty_reply(self):
        with patch.object(content.llm, "call_task", return_value=""):
            with self.assertRaisesRegex(LLMError, "empty content"):
                content.generate_content(_details())

    def test_missing_key(self):
        with patch.object(config, "ANTHROPIC_API_KEY", ""):
            with self.assertRaises(LLMError):
                content.generate_content(_details())


class QuestionTests(unittest.TestCase):
    def test_json_array(self):
        reply = 'Sure:\n["What is next?", "Why now?"]'
        self.assertEqual(content.parse_questions(reply), ["What is next?", "Why now?"])

    def test_broken_json_uses_fallback(self):
        self.assertEqual(content.parse_questions('["What" "Why"]', "es"), content.FALLBACK_QUESTIONS["es"])

    def test_question_lines(self):
        reply = "1. What changed?\nNot a question\n2. Who benefits?"
        self.assertEqual(content.parse_questions(reply), ["1. What changed?", "2. Who benefits?"])

    def test_defaults(self):
        self.assertEqual(content.parse_questions("nothing useful"), content.DEFAULT_QUESTIONS["en"])

    def test_follow_up_questions(self):
        with patch.object(config, "ANTHROPIC_API_KEY", "test-key"), \
             patch.object(content.llm, "call_task", return_value='["A?", "B?"]') as call:
            result = content.generate_follow_up_questions(FollowUpRequest(content="Draft", language="es"))
        self.assertEqual(result["questions"], ["A?", "B?"])
        self.assertEqual(call.call_args.args[0], "follow_up_questions")
        self.assertIn("Genera 5 preguntas", call.call_args.args[2])

    def test_follow_up_requires_content(self):
        with self.assertRaisesRegex(content.ContentValidationError, "content"):
            content.generate_follow_up_questions(FollowUpRequest())

    def test_follow_up_requires_key(self):
        with patch.object(config, "ANTHROPIC_API_KEY", ""):
            with self.assertRaisesRegex(LLMError, "Anthropic API key not configured"):
                content.generate_follow_up_questions(FollowUpRequest(content="Draft"))

    def test_answer_is_stripped(self):
        with patch.object(config, "ANTHROPIC_API_KEY", "test-key"), \
             patch.object(content.llm, "call_task", return_value="  An answer.\n") as call:
            result = content.answer_question(AnswerQuestionRequest(question="Why?", topic="Hiring"))
        self.assertEqual(result["answer"], "An answer.")
        self.assertIn("about the given topic", call.call_args.args[1])
        self.assertIn("Main Topic: Hiring", call.call_args.args[2])


class RefineTests(unittest.TestCase):
    def test_spanish_mode_enhances_in_spanish(self):
        req = RefineRequest(originalContent="Borrador", feedback="Más corto", isSpanishMode=True, style="ariastar")
        with patch.object(config, "ANTHROPIC_API_KEY", "test-key"), \
             patch.object(content.llm, "call_task", return_value="Refined") as call, \
             patch.object(content, "enhance_with_persona_traits", return_value="Enhanced") as enhance:
            result = content.refine_content(req)
        self.assertEqual(result, "Enhanced")
        self.assertEqual(call.call_args.args[0], "refine_content")
        enhance.assert_called_once_with("Refined", "ariastar", content.REFINE_INTENSITY, "es")

    def test_feedback_required(self):
        with self.assertRaisesRegex(content.ContentValidationError, "feedback"):
            content.refine_content(RefineRequest(originalContent="Draft"))


class DetectionTests(unittest.TestCase):
    def test_defaults_without_research(self):
        self.assertEqual(content_detection.analyze_research_data(""), content_detection.DEFAULT_RECOMMENDATIONS)

    def test_blog_vocabulary(self):
        recs = content_detection.analyze_research_data("A long-form blog article with SEO keywords and backlinks.")
        self.assertEqual(recs[0]["contentType"], "blog-post")
        self.assertLessEqual(len(recs), 3)
        self.assertIn("blog", recs[0]["reasoning"])

    def test_cta_detection(self):
        self.assertTrue(content_detection.analyze_text_for_cta("Sign up today."))
        self.assertTrue(content_detection.analyze_text_for_cta("Ready to get started?"))
        self.assertFalse(content_detection.analyze_text_for_cta("A plain statement."))
        self.assertFalse(content_detection.analyze_text_for_cta(""))

    def test_display_names(self):
        self.assertEqual(
            content_detection.get_display_names("", "social", "linkedin"),
            {"displayContentType": "Social Media Post", "displayPlatform": "LinkedIn"},
        )
        self.assertEqual(
            content_detection.get_display_names("", "email", language="es"),
            {"displayContentType": "Correo Electrónico", "displayPlatform": "Correo Electrónico"},
        )

    def test_content_type_from_platform(self):
        self.assertEqual(content_detection.get_content_type_from_platform("medium"), "blog-post")
        self.assertEqual(content_detection.get_content_type_from_platform("unknown"), "article")


class PromptTests(unittest.TestCase):
    def test_social_relevance_picks_strong_network(self):
        research = "linkedin posts, linkedin articles and a linkedin newsletter"
        self.assertEqual(content_prompts.dominant_social_platform(research), "linkedin")

    def test_build_prompt_language_reminders(self):
        prompt = content_prompts.build_prompt(_details(language="es"), "notes")
        self.assertTrue(prompt.startswith("INSTRUCCIÓN CRÍTICA"))
        self.assertIn("RECORDATORIO FINAL", prompt)


class BestPracticesTests(unittest.TestCase):
    def test_platform_heading_uses_current_year(self):
        text = best_practices.format_platform_best_practices("facebook")
        self.assertTrue(text.startswith(f"## Current Facebook Best Practices ({datetime.now().year})"))

    def test_unknown_content_type_uses_generic_practices(self):
        self.assertIs(
            best_practices.get_content_type_best_practices("Interpretive Dance!"),
            best_practices.GENERIC_CONTENT_PRACTICES,
        )

    def test_quick_tips_one_per_section(self):
        self.assertEqual(len(best_practices.get_platform_quick_tips("linkedin")), len(best_practices.PLATFORM_SECTIONS))


if __name__ == "__main__":
    unittest.main()
