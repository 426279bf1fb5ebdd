import math
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_matcher.engine.tfidf import (  # noqa: E402
    build_term_frequencies,
    build_tfidf_vector,
    build_vocabulary,
    compute_idf,
    cosine_similarity,
    round_half_up,
)


class TermFrequencyTests(unittest.TestCase):
    def test_unigrams_count_once_and_bigrams_use_rounded_boost(self):
        tf = build_term_frequencies(
            ["python", "sql", "python"],
            ["python sql", "sql python"],
            phrase_boost=1.6,
        )
        self.assertEqual(tf["python"], 2)
        self.assertEqual(tf["sql"], 1)
        self.assertEqual(tf["python sql"], 2)
        self.assertEqual(tf["sql python"], 2)

    def test_boost_rounds_half_up_with_floor_of_one(self):
        self.assertEqual(build_term_frequencies([], ["a b"], phrase_boost=2.5)["a b"], 3)
        self.assertEqual(build_term_frequencies([], ["a b"], phrase_boost=1.0)["a b"], 1)
        self.assertEqual(build_term_frequencies([], ["a b"], phrase_boost=0.2)["a b"], 1)

    def test_empty_input_gives_empty_table(self):
        self.assertEqual(dict(build_term_frequencies([], [])), {})

    def test_round_half_up(self):
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(99.49), 99)


class IdfAndVectorTests(unittest.TestCase):
    def test_smoothed_idf_for_shared_and_unique_terms(self):
        idf = compute_idf([{"python": 1, "sql": 1}, {"python": 2}])
        self.assertAlmostEqual(idf["python"], math.log(3 / 3) + 1)
        self.assertAlmostEqual(idf["sql"], math.log(3 / 2) + 1)
        self.assertGreater(idf["sql"], idf["python"])

    def test_idf_bounds_for_two_documents(self):
        idf = compute_idf([{"a": 1, "b": 1}, {"a": 1}])
        self.assertAlmostEqual(idf["b"], math.log(1.5) + 1)
        self.assertLess(idf["b"], math.log(3) + 1)
        self.assertGreater(min(idf.values()), 0)

    def test_vocabulary_is_ordered_union(self):
        self.assertEqual(build_vocabulary({"b": 1, "a": 1}, {"a": 1, "c": 2}), ["b", "a", "c"])

    def test_vector_aligns_with_vocabulary(self):
        vector = build_tfidf_vector({"a": 2}, ["a", "b"], {"a": 1.5, "b": 2.0})
        self.assertEqual(vector, [3.0, 0.0])


class CosineSimilarityTests(unittest.TestCase):
    def test_orthogonal_vectors(self):
        self.assertEqual(cosine_similarity([1.0, 0.0], [0.0, 1.0]), 0.0)

    def test_parallel_vectors(self):
        self.assertAlmostEqual(cosine_similarity([1.0, 2.0], [2.0, 4.0]), 1.0)

    def test_zero_norm_short_circuits(self):
        self.assertEqual(cosine_similarity([0.0, 0.0], [1.0, 1.0]), 0.0)
        self.assertEqual(cosine_similarity([], []), 0.0)

    def test_unequal_lengths_are_rejected(self):
        with self.assertRaises(ValueError):
            cosine_similarity([1.0], [1.0, 2.0])


if __name__ == "__main__":
    unittest.main()
