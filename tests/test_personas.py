from __future__ import annotations

import random
import unittest

from pipeline import personas


BLOG_CONTENT = (
    "Our blog post walks through the benefits of planning ahead.\n\n"
    "Second paragraph with the detail readers came for.\n\n"
    "Third paragraph closes things out."
)


class PhraseBankTests(unittest.TestCase):
    def test_spanish_bank_when_available(self):
        english = personas.get_persona_phrases("ariastar", "en")
        spanish = personas.get_persona_phrases("ariastar", "es")
        self.assertTrue(english)
        self.assertTrue(spanish)
        self.assertNotEqual(english, spanish)

    def test_unsupported_language_falls_back_to_english(self):
        self.assertEqual(
            personas.get_persona_phrases("data_visualizer", "fr"),
            personas.get_persona_phrases("data_visualizer", "en"),
        )

    def test_unknown_style_has_no_phrases(self):
        self.assertEqual(personas.get_persona_phrases("professional"), [])

    def test_returned_list_is_a_copy(self):
        phrases = personas.get_persona_phrases("ethical_tech")
        phrases.clear()
        self.assertTrue(personas.get_persona_phrases("ethical_tech"))

    def test_display_names(self):
        self.assertEqual(personas.get_persona_display_name("specialist_mentor"), "MentorPro")
        self.assertEqual(personas.get_persona_display_name("custom"), "custom")


class FormatterTests(unittest.TestCase):
    def test_default_section(self):
        self.assertEqual(personas.format_section("Intro", "Body", "professional"), "## Intro\nBody\n\n")

    def test_persona_results_suffix(self):
        text = personas.format_results([{"label": "Reach", "value": "10%"}], "specialist_mentor")
        self.assertEqual(text, "EXPERT ANALYSIS:\n• Reach: 10% (validated by field specialists)\n\n")

    def test_default_cta(self):
        text = personas.format_cta("audits", "checklist", "professional")
        self.assertIn("Want to learn more about audits?", text)
        self.assertIn("our checklist can help you", text)

    def test_default_framework_numbers_steps(self):
        self.assertEqual(
            personas.format_framework(["Plan", "Ship"], "ariastar"),
            "FRAMEWORK:\n1. Plan\n2. Ship\n\n",
        )

    def test_ariastar_section_emoji(self):
        self.assertTrue(personas.format_section("Quick tips", "x", "ariastar").startswith("# Quick tips 💫"))


class ToneCheckTests(unittest.TestCase):
    def test_styles_without_checklist_always_pass(self):
        self.assertEqual(
            personas.check_persona_tone("anything", "professional"),
            {"passed": True, "score": 0, "required": 0},
        )

    def test_mentor_vocabulary_passes(self):
        text = "As an expert I recommend this proven approach, one step at a time."
        result = personas.check_persona_tone(text, "specialist_mentor")
        self.assertTrue(result["passed"])
        self.assertGreaterEqual(result["score"], 4)
        self.assertEqual(result["required"], 4)

    def test_mentor_plain_text_fails(self):
        result = personas.check_persona_tone("Nice weather today.", "specialist_mentor")
        self.assertFalse(result["passed"])
        self.assertEqual(result["score"], 0)

    def test_ariastar_structure_checks(self):
        text = "Imagine this!\nWe did it together.\nSo much fun.\nP.S. Try it."
        result = personas.check_persona_tone(text, "ariastar")
        self.assertTrue(result["passed"])
        self.assertEqual(result["required"], personas.ARIASTAR_REQUIRED)


class StatisticTests(unittest.TestCase):
    def test_statistic_follows_content_signal(self):
        self.assertTrue(personas.pick_statistic("Our YouTube script", "en").startswith("70%"))
        self.assertTrue(personas.pick_statistic("Our YouTube script", "es").startswith("Un 70%"))

    def test_default_statistic(self):
        self.assertEqual(personas.pick_statistic("nothing relevant"), "35% productivity improvement with optimized tools")

    def test_inserted_after_benefits_paragraph(self):
        text = personas.insert_statistic("The benefits are clear.\n\nMiddle.\n\nEnd.", "50% gains")
        paragraphs = text.split("\n\n")
        self.assertEqual(len(paragraphs), 4)
        self.assertIn("Did you know that up to 50% gains", paragraphs[1])

    def test_benefits_in_last_paragraph_leaves_content(self):
        content = "Intro.\n\nThe results speak for themselves."
        self.assertEqual(personas.insert_statistic(content, "50% gains"), content)

    def test_inserted_mid_content_without_benefits(self):
        paragraphs = personas.insert_statistic("One.\n\nTwo.", "50% gains").split("\n\n")
        self.assertEqual(paragraphs[0], "One.")
        self.assertIn("50% gains", paragraphs[1])
        self.assertEqual(paragraphs[2], "Two.")


class EnhanceTests(unittest.TestCase):
    def test_short_content_untouched(self):
        self.assertEqual(personas.enhance_with_persona_traits("Too short.", "ariastar"), "Too short.")

    def test_unknown_style_gets_statistic_only(self):
        result = personas.enhance_with_persona_traits(BLOG_CONTENT, "mystery", rng=random.Random(1))
        paragraphs = result.split("\n\n")
        self.assertEqual(len(paragraphs), 4)
        self.assertEqual(paragraphs[0], BLOG_CONTENT.split("\n\n")[0])
        self.assertIn("60% longer reading time", paragraphs[1])

    def test_persona_phrase_prefixes_opening_paragraph(self):
        result = personas.enhance_with_persona_traits(BLOG_CONTENT, "specialist_mentor", rng=random.Random(7))
        phrases = personas.get_persona_phrases("specialist_mentor")
        self.assertTrue(any(result.startswith(p + "\n\n") for p in phrases))
        self.assertIn("60% longer reading time", result)

    def _phrase_anchors(self, result: str, style: str) -> list[str]:
        # paragraphs that received a phrase in front of them
        bank = set(personas.get_persona_phrases(style))
        parts = result.split("\n\n")
        return [parts[i + 1] for i, part in enumerate(parts) if part in bank]

    def test_phrase_count_follows_intensity(self):
        content = "\n\n".join(f"Paragraph {n} walks through step {n} in detail." for n in range(24))
        # statistic lands mid-content, giving 25 paragraphs
        paragraphs = personas.insert_statistic(content, personas.pick_statistic(content)).split("\n\n")
        self.assertEqual(len(paragraphs), 25)

        expected = {
            1: [paragraphs[0], paragraphs[12]],
            2: [paragraphs[0], paragraphs[12], paragraphs[24]],
        }
        for intensity, anchors in expected.items():
            result = personas.enhance_with_persona_traits(
                content, "specialist_mentor", intensity=intensity, rng=random.Random(intensity),
            )
            self.assertEqual(sorted(self._phrase_anchors(result, "specialist_mentor")), sorted(anchors))

        result = personas.enhance_with_persona_traits(
            content, "specialist_mentor", intensity=3, rng=random.Random(3),
        )
        found = self._phrase_anchors(result, "specialist_mentor")
        self.assertEqual(len(found), 4)
        for anchor in (paragraphs[0], paragraphs[12], paragraphs[24]):
            self.assertIn(anchor, found)

    def test_phrase_count_capped_by_length(self):
        content = "\n\n".join(f"Paragraph {n} walks through step {n} in detail." for n in range(8))
        # 9 paragraphs after the statistic allow only two phrases
        result = personas.enhance_with_persona_traits(
            content, "specialist_mentor", intensity=3, rng=random.Random(5),
        )
        self.assertEqual(len(self._phrase_anchors(result, "specialist_mentor")), 2)

    def test_seeded_rng_is_deterministic(self):
        first = personas.enhance_with_persona_traits(BLOG_CONTENT * 3, "ariastar", intensity=3, rng=random.Random(3))
        second = personas.enhance_with_persona_traits(BLOG_CONTENT * 3, "ariastar", intensity=3, rng=random.Random(3))
        self.assertEqual(first, second)


class TemplateTests(unittest.TestCase):
    def test_ariastar_language_variants(self):
        self.assertIn("YOU ARE ARIASTAR", personas.get_persona_template("ariastar", "en"))
        self.assertIn("TÚ ERES ARIASTAR", personas.get_persona_template("ariastar", "es"))

    def test_short_template_is_filled(self):
        template = personas.get_persona_template("specialist_mentor")
        self.assertIn("MENTORPRO", template)
        self.assertNotIn("{voice_must}", template)

    def test_professional_has_no_template(self):
        self.assertEqual(personas.get_persona_template("professional"), "")


if __name__ == "__main__":
    unittest.main()
