"""Cosine similarity scoring between TF-IDF vectors."""

from itertools import combinations
from typing import NamedTuple

from code_similarity.math_utils import cosine_similarity


class SimilarityResult(NamedTuple):
    first: str
    second: str
    score: float


class SimilarityScorer:
    """Scores document pairs by cosine similarity of their TF-IDF vectors.

    Vectors must come from the same corpus index; scores fall in [0, 1]
    because TF-IDF weights are never negative.
    """

    def score(self, a, b):
        """Similarity of two ScoredDocuments."""
        return a.calculate_cosine_similarity(b)

    def score_vectors(self, vector_a, vector_b):
        """Similarity of two raw, aligned vectors."""
        return cosine_similarity(vector_a, vector_b)

    def pairwise(self, scored):
        """Score every unordered pair, most similar first.

        Ties are broken by the pair's ids so the ranking is deterministic.
        """
        results = [
            SimilarityResult(a.file_id, b.file_id, self.score(a, b))
            for a, b in combinations(scored, 2)
        ]
        results.sort(key=lambda r: (-r.score, r.first, r.second))
        return results

    def most_similar(self, target, scored, top_k=5):
        """Rank the other documents by similarity to ``target``."""
        results = [
            SimilarityResult(target.file_id, other.file_id, self.score(target, other))
            for other in scored
            if other.file_id != target.file_id
        ]
        results.sort(key=lambda r: (-r.score, r.second))
        return results[:top_k]

    def above_threshold(self, results, threshold):
        """Keep the results scoring at least ``threshold``."""
        return [r for r in results if r.score >= threshold]
