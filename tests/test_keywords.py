import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_matcher.engine.keywords import check_coverage, rank_keywords  # noqa: E402


class RankKeywordsTests(unittest.TestCase):
    def test_ranks_job_terms_by_tf_idf_and_skips_absent_terms(self):
        ranked = rank_keywords(
            ["x", "y", "z"],
            {"x": 1, "y": 3},
            {"x": 2.0, "y": 1.0, "z": 5.0},
            top_k=5,
        )
        self.assertEqual([item.term for item in ranked], ["y", "x"])
        self.assertEqual([item.score for item in ranked], [3.0, 2.0])

    def test_top_k_truncates(self):
        ranked = rank_keywords(["x", "y"], {"x": 1, "y": 3}, {"x": 1.0, "y": 1.0}, top_k=1)
        self.assertEqual([item.term for item in ranked], ["y"])

    def test_ties_keep_vocabulary_order(self):
        ranked = rank_keywords(["b", "a"], {"a": 1, "b": 1}, {"a": 1.0, "b": 1.0}, top_k=2)
        self.assertEqual([item.term for item in ranked], ["b", "a"])

    def test_non_positive_top_k_is_rejected(self):
        with self.assertRaises(ValueError):
            rank_keywords(["x"], {"x": 1}, {"x": 1.0}, top_k=0)


class CoverageTests(unittest.TestCase):
    def test_exact_unigram_and_bigram_matches(self):
        result = check_coverage(
            ["python", "sql", "machine learning"],
            ["python", "machine", "learning", "machine learning"],
        )
        self.assertEqual(result.matched, ["python", "machine learning"])
        self.assertEqual(result.missing, ["sql"])
        self.assertAlmostEqual(result.coverage, 2 / 3)

    def test_no_stemming_or_fuzzy_match(self):
        result = check_coverage(["databases"], ["database"])
        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, ["databases"])

    def test_missing_preserves_ranked_order(self):
        result = check_coverage(["kafka", "python", "spark", "airflow"], ["python"])
        self.assertEqual(result.missing, ["kafka", "spark", "airflow"])

    def test_empty_keywords_give_zero_coverage(self):
        result = check_coverage([], ["python"])
        self.assertEqual(result.coverage, 0.0)
        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, [])


if __name__ == "__main__":
    unittest.main()
