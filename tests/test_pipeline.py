import pytest

from code_similarity.document import SourceFile
from code_similarity.errors import InvalidCorpusError
from code_similarity.pipeline import (
    build_index,
    compare_sources,
    similarity,
    tokenize_sources,
    vectorize,
)
from code_similarity.tokenizer import WhitespaceTokenizer


def test_query_surface(documents):
    index = build_index(documents)
    va, vb = (vectorize(d, index) for d in documents[:2])
    assert len(va) == len(vb) == len(index.vocabulary)
    assert similarity(va, vb) == similarity(vb, va)
    assert similarity(va, va) == pytest.approx(1.0)


def test_compare_sources_with_default_tokenizer():
    sources = [
        SourceFile("A.java", "class Reader { void readFile() { openFile(); } }"),
        SourceFile("B.java", "class Loader { void readFile() { openFile(); } }"),
        SourceFile("C.java", "interface Shape { double area(); }"),
    ]
    results = compare_sources(sources)
    assert (results[0].first, results[0].second) == ("A.java", "B.java")
    assert results[0].score > 0.0
    assert results[-1].score == 0.0


def test_compare_sources_with_custom_tokenizer():
    sources = [SourceFile("a", "for i i hello"), SourceFile("b", "for hello"), SourceFile("c", "i")]
    results = compare_sources(sources, WhitespaceTokenizer())
    assert len(results) == 3


def test_compare_no_sources():
    with pytest.raises(InvalidCorpusError):
        compare_sources([])


def test_default_tokenizer_does_not_lemmatize():
    sources = [SourceFile("a", "files has"), SourceFile("b", "files")]
    results = compare_sources(sources)
    assert len(results) == 1
    assert tokenize_sources(sources)[0].terms == ("files", "has")
