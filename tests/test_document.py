import dataclasses

import pytest

from code_similarity.corpus import CorpusIndex
from code_similarity.document import Document, SourceFile, calculate_tf
from code_similarity.errors import IncompatibleVectorError
from code_similarity.tokenizer import WhitespaceTokenizer


def test_calculate_tf_counts_raw_occurrences():
    assert calculate_tf(["for", "i", "i", "i", "printf", "hello"]) == {
        "for": 1.0, "i": 3.0, "printf": 1.0, "hello": 1.0,
    }


def test_calculate_tf_is_case_sensitive():
    assert calculate_tf(["Name", "name"]) == {"Name": 1.0, "name": 1.0}


def test_tf_keys_are_distinct_terms_and_sum_to_length(documents):
    for doc in documents:
        assert set(doc.tf) == set(doc.terms)
        assert sum(doc.tf.values()) == len(doc)


def test_tf_values_are_floats(documents):
    assert all(isinstance(v, float) for v in documents[0].tf.values())


def test_document_is_immutable(documents):
    with pytest.raises(dataclasses.FrozenInstanceError):
        documents[0].terms = ()
    with pytest.raises(TypeError):
        documents[0].tf["new"] = 1.0


def test_from_source_uses_tokenizer():
    doc = Document.from_source(SourceFile("x.txt", "for i i hello"), WhitespaceTokenizer())
    assert doc.file_id == "x.txt"
    assert doc.terms == ("for", "i", "i", "hello")
    assert doc.tf["i"] == 2.0


def test_empty_document_has_empty_tf():
    doc = Document.from_terms("empty", [])
    assert dict(doc.tf) == {}
    assert len(doc) == 0


class TestTfIdf:
    def test_vector_follows_index_order(self, index, documents):
        x = pytest.approx
        idf = index.idf("for")
        assert documents[0].calculate_tf_idf(index) == x((idf, 2 * idf, idf))
        assert documents[1].calculate_tf_idf(index) == x((idf, 0.0, idf))
        assert documents[2].calculate_tf_idf(index) == x((0.0, idf, 0.0))

    def test_vector_length_is_vocabulary_size(self, index, documents):
        for doc in documents:
            assert len(doc.calculate_tf_idf(index)) == len(index)

    def test_terms_outside_corpus_are_ignored(self, index):
        query = Document.from_terms("q", ["hello", "unknown"])
        vector = query.calculate_tf_idf(index)
        assert vector[index.position("hello")] == pytest.approx(index.idf("hello"))
        assert len(vector) == 3

    def test_vectorize_keeps_index(self, index, documents):
        scored = documents[0].vectorize(index)
        assert scored.index is index
        assert scored.file_id == "a.java"
        assert scored.document is documents[0]


class TestCosineSimilarity:
    def test_example_scenario(self, scored):
        assert scored["a.java"].calculate_cosine_similarity(scored["b.java"]) == pytest.approx(
            2.0 / (6.0 ** 0.5 * 2.0 ** 0.5)
        )

    def test_symmetric(self, scored):
        a, c = scored["a.java"], scored["c.java"]
        assert a.calculate_cosine_similarity(c) == c.calculate_cosine_similarity(a)

    def test_self_similarity(self, scored):
        a = scored["a.java"]
        assert a.calculate_cosine_similarity(a) == pytest.approx(1.0)

    def test_disjoint_documents(self, scored):
        assert scored["b.java"].calculate_cosine_similarity(scored["c.java"]) == 0.0

    def test_all_zero_vector_gives_zero(self):
        docs = [Document.from_terms("x", ["same"]), Document.from_terms("y", ["same"])]
        index = CorpusIndex(docs)
        x, y = (d.vectorize(index) for d in docs)
        assert x.vector == (0.0,)
        assert x.calculate_cosine_similarity(y) == 0.0

    def test_different_indexes_are_rejected(self, scored):
        other_index = CorpusIndex([Document.from_terms("z", ["hello", "world", "x"])])
        other = other_index.documents[0].vectorize(other_index)
        with pytest.raises(IncompatibleVectorError):
            scored["a.java"].calculate_cosine_similarity(other)

    def test_equivalent_index_is_accepted(self, documents, scored):
        rebuilt = CorpusIndex(documents)
        b = documents[1].vectorize(rebuilt)
        assert scored["a.java"].calculate_cosine_similarity(b) == pytest.approx(
            scored["a.java"].calculate_cosine_similarity(scored["b.java"])
        )


def test_documents_are_hashable_and_compare_by_content():
    first = Document.from_terms("a.java", ["for", "i"])
    same = Document.from_terms("a.java", ["for", "i"])
    other = Document.from_terms("a.java", ["for"])
    assert first == same
    assert first != other
    assert hash(first) == hash(same)
    assert len({first, same, other}) == 2


def test_scored_documents_are_hashable(index, documents):
    scored = documents[0].vectorize(index)
    assert scored in {scored}
    assert hash(scored) == hash(documents[0].vectorize(index))
