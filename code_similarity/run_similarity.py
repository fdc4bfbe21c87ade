"""Entry point: rank source files of a directory by pairwise similarity."""

import argparse
import sys

from loguru import logger
from pydantic import ValidationError

from code_similarity.config import get_settings
from code_similarity.errors import CodeSimilarityError
from code_similarity.loader import load_sources
from code_similarity.logging_setup import configure_logging
from code_similarity.pipeline import build_index, tokenize_sources
from code_similarity.similarity_scorer import SimilarityScorer
from code_similarity.tokenizer import SourceCodeTokenizer, load_wordnet_lemmatizer
from code_similarity.vectorizer import TfIdfVectorizer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Find similar source files using TF-IDF cosine similarity"
    )
    parser.add_argument("corpus_dir", nargs="?", help="Directory of source files")
    parser.add_argument("--pattern", help="Glob pattern for files (default **/*.java)")
    parser.add_argument("--threshold", type=float, help="Minimum similarity to report")
    parser.add_argument("--top-k", type=int, dest="top_k", help="Maximum pairs to report")
    parser.add_argument(
        "--lemmatize", action="store_true", default=None,
        help="Lemmatize tokens with WordNet",
    )
    parser.add_argument("--log-level", dest="log_level", help="Loguru log level")
    return parser.parse_args(argv)


def run(settings):
    """Load, index and score the corpus described by ``settings``."""
    sources = load_sources(settings.corpus_dir, settings.pattern, settings.encoding)
    lemmatizer = load_wordnet_lemmatizer() if settings.lemmatize else None
    documents = tokenize_sources(sources, SourceCodeTokenizer(lemmatizer))
    index = build_index(documents)
    scored = TfIdfVectorizer(index).vectorize_all()
    scorer = SimilarityScorer()
    results = scorer.above_threshold(scorer.pairwise(scored), settings.threshold)
    return index, results[: settings.top_k]


def main(argv=None):
    """Print the most similar pairs; return the process exit status."""
    args = parse_args(argv)
    try:
        settings = get_settings(**vars(args))
    except ValidationError as exc:
        print("Invalid settings:\n%s" % exc, file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    try:
        index, results = run(settings)
    except CodeSimilarityError as exc:
        logger.error("{}", exc)
        return 1

    print("=" * 72)
    print("Code Similarity Report")
    print("=" * 72)
    print("Corpus: %d documents, vocabulary=%d terms" % (
        index.number_of_documents, len(index)
    ))
    print("Threshold: %.3f" % settings.threshold)
    print()
    if not results:
        print("No pairs at or above threshold.")
    for result in results:
        print("%.4f  %s  <->  %s" % (result.score, result.first, result.second))
    print("=" * 72)
    return 0


if __name__ == "__main__":
    sys.exit(main())
