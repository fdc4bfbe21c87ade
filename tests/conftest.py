"""Shared fixtures: the three-document corpus used throughout the suite."""

import pytest
from loguru import logger

from code_similarity.corpus import CorpusIndex
from code_similarity.document import Document
from code_similarity.vectorizer import TfIdfVectorizer


@pytest.fixture(autouse=True)
def _quiet_loguru():
    logger.remove()
    yield


@pytest.fixture
def documents():
    return [
        Document.from_terms("a.java", ["for", "i", "i", "hello"]),
        Document.from_terms("b.java", ["for", "hello"]),
        Document.from_terms("c.java", ["i"]),
    ]


@pytest.fixture
def index(documents):
    return CorpusIndex(documents)


@pytest.fixture
def scored(index):
    return {s.file_id: s for s in TfIdfVectorizer(index).vectorize_all()}
