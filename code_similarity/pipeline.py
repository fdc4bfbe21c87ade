"""Top-level entry points: index, vectorize, compare."""

from loguru import logger

from code_similarity.corpus import CorpusIndex
from code_similarity.document import Document
from code_similarity.math_utils import cosine_similarity
from code_similarity.similarity_scorer import SimilarityScorer
from code_similarity.tokenizer import SourceCodeTokenizer
from code_similarity.vectorizer import TfIdfVectorizer


def build_index(documents):
    """Build a CorpusIndex from tokenized documents."""
    return CorpusIndex(documents)


def vectorize(document, corpus_index):
    """TF-IDF vector of ``document`` in ``corpus_index``'s term order."""
    return document.calculate_tf_idf(corpus_index)


def similarity(vector_a, vector_b):
    """Cosine similarity of two vectors built against the same index."""
    return cosine_similarity(vector_a, vector_b)


def tokenize_sources(sources, tokenizer=None):
    """Turn SourceFiles into Documents.

    The default tokenizer does not lemmatize; pass
    ``SourceCodeTokenizer(load_wordnet_lemmatizer())`` for lemmatized terms.
    """
    tokenizer = tokenizer or SourceCodeTokenizer()
    return [Document.from_source(source, tokenizer) for source in sources]


def compare_sources(sources, tokenizer=None):
    """Tokenize, index and score every pair of ``sources``.

    Without a ``tokenizer`` terms are split and filtered but not
    lemmatized (see tokenize_sources).

    Returns SimilarityResults sorted by descending score.
    """
    documents = tokenize_sources(sources, tokenizer)
    index = build_index(documents)
    scored = TfIdfVectorizer(index).vectorize_all()
    results = SimilarityScorer().pairwise(scored)
    logger.info(
        "Compared {} pairs from {} documents ({} terms)",
        len(results), index.number_of_documents, len(index),
    )
    return results
