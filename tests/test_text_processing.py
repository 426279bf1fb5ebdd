import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_matcher.engine.text import STOPWORDS, extract_bigrams, normalize_text, tokenize  # noqa: E402


class NormalizeTextTests(unittest.TestCase):
    def test_collapses_whitespace_and_lowercases(self):
        self.assertEqual(normalize_text("  Senior\n\tPython   ENGINEER \r\n"), "senior python engineer")

    def test_none_and_empty_become_empty_string(self):
        self.assertEqual(normalize_text(None), "")
        self.assertEqual(normalize_text(""), "")
        self.assertEqual(normalize_text("   \n "), "")


class TokenizeTests(unittest.TestCase):
    def test_stopwords_only_yield_no_tokens(self):
        self.assertEqual(tokenize("the of and in on"), [])

    def test_strips_punctuation_digits_and_edge_hyphens(self):
        text = normalize_text("Full-stack Python, SQL & AWS (2019 - 2021), 5 years.")
        self.assertEqual(tokenize(text), ["full-stack", "python", "sql", "aws", "years"])

    def test_keeps_duplicates_in_order(self):
        self.assertEqual(tokenize("python sql python"), ["python", "sql", "python"])

    def test_mixed_alphanumeric_tokens_survive(self):
        self.assertEqual(tokenize("k8s and 3d modeling in 2024"), ["k8s", "3d", "modeling"])

    def test_stopword_list_is_immutable(self):
        self.assertIsInstance(STOPWORDS, frozenset)
        self.assertIn("the", STOPWORDS)
        self.assertNotIn("python", STOPWORDS)


class ExtractBigramsTests(unittest.TestCase):
    def test_short_sequences_have_no_bigrams(self):
        self.assertEqual(extract_bigrams([]), [])
        self.assertEqual(extract_bigrams(["python"]), [])

    def test_adjacent_pairs_joined_by_single_space(self):
        self.assertEqual(
            extract_bigrams(["machine", "learning", "engineer"]),
            ["machine learning", "learning engineer"],
        )


if __name__ == "__main__":
    unittest.main()
