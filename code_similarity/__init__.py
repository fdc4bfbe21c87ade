"""Code similarity - TF-IDF vectors and cosine similarity over source files."""

from code_similarity.errors import (
    CodeSimilarityError,
    InvalidCorpusError,
    IncompatibleVectorError,
    LemmatizerUnavailableError,
)
from code_similarity.math_utils import (
    dot_product,
    vector_magnitude,
    cosine_similarity,
)
from code_similarity.tokenizer import (
    Tokenizer,
    CodeLemmatizer,
    SourceCodeTokenizer,
    WhitespaceTokenizer,
    split_identifier,
)
from code_similarity.document import SourceFile, Document, ScoredDocument, calculate_tf
from code_similarity.corpus import CorpusIndex
from code_similarity.vectorizer import TfIdfVectorizer
from code_similarity.similarity_scorer import SimilarityScorer, SimilarityResult
from code_similarity.pipeline import build_index, vectorize, similarity, compare_sources
from code_similarity.loader import load_sources

__all__ = [
    "CodeSimilarityError",
    "InvalidCorpusError",
    "IncompatibleVectorError",
    "LemmatizerUnavailableError",
    "dot_product",
    "vector_magnitude",
    "cosine_similarity",
    "Tokenizer",
    "CodeLemmatizer",
    "SourceCodeTokenizer",
    "WhitespaceTokenizer",
    "split_identifier",
    "SourceFile",
    "Document",
    "ScoredDocument",
    "calculate_tf",
    "CorpusIndex",
    "TfIdfVectorizer",
    "SimilarityScorer",
    "SimilarityResult",
    "build_index",
    "vectorize",
    "similarity",
    "compare_sources",
    "load_sources",
]
