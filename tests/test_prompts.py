import unittest

from astrogpt.core.prompts import (
    ASTRO_KEYWORDS,
    ASTROGPT_PROMPT,
    build_user_content,
    is_astro_query,
)


class TestTopicFilter(unittest.TestCase):
    def test_birth_chart_matches(self):
        self.assertTrue(is_astro_query("What does my birth chart say about my career?"))

    def test_match_is_case_insensitive(self):
        self.assertTrue(is_astro_query("Tell me about my NUMEROLOGY"))

    def test_every_keyword_matches(self):
        for keyword in ASTRO_KEYWORDS:
            self.assertTrue(is_astro_query(f"question about {keyword} please"), keyword)

    def test_off_topic_rejected(self):
        self.assertFalse(is_astro_query("What's the weather today?"))

    def test_empty_and_missing_rejected(self):
        self.assertFalse(is_astro_query(""))
        self.assertFalse(is_astro_query(None))

    def test_substring_match(self):
        self.assertTrue(is_astro_query("Is Mercury retrograde-ing?"))


class TestPromptAssembly(unittest.TestCase):
    def test_without_files(self):
        self.assertEqual(build_user_content("hello zodiac", ""), "hello zodiac\n\n")

    def test_with_files(self):
        block = "Astrological Information from notes.txt:\nBorn 1990-05-12\n\n"
        self.assertEqual(
            build_user_content("numerology", block),
            "numerology\n\n" + block,
        )

    def test_persona_sections_in_order(self):
        headings = [
            "# ✨ [Title of Reading]",
            "## 🌟 Celestial Overview",
            "## 🔮 Your Cosmic Blueprint",
            "## 📊 Numerological Resonance",
            "## 🌠 Guidance & Action Steps",
        ]
        positions = [ASTROGPT_PROMPT.index(h) for h in headings]
        self.assertEqual(positions, sorted(positions))


if __name__ == '__main__':
    unittest.main()
