"""Corpus-wide inverted index and IDF weights."""

import math
from types import MappingProxyType

from loguru import logger

from code_similarity.errors import InvalidCorpusError


class CorpusIndex:
    """Inverted index and IDF map built once from a fixed set of documents.

    The canonical term order is the first-occurrence order of terms,
    walking documents in corpus order. It is frozen in ``terms`` and every
    TF-IDF vector built against this index follows it.
    """

    def __init__(self, documents):
        self.documents = tuple(documents)
        if not self.documents:
            raise InvalidCorpusError("cannot build an index from zero documents")
        self._doc_by_id = {}
        for doc in self.documents:
            if doc.file_id in self._doc_by_id:
                raise InvalidCorpusError("duplicate document id: %r" % (doc.file_id,))
            self._doc_by_id[doc.file_id] = doc

        self.inverted_index = MappingProxyType(self.build_inverted_index(self.documents))
        self.idf_map = MappingProxyType(self.calculate_idf(len(self.documents)))
        self.terms = tuple(self.idf_map)
        self._positions = {term: i for i, term in enumerate(self.terms)}
        logger.debug(
            "Built index: {} documents, {} terms", self.number_of_documents, len(self.terms)
        )

    @staticmethod
    def build_inverted_index(documents):
        """Map each term to the frozenset of ids of documents containing it."""
        index = {}
        for doc in documents:
            for term in doc.terms:
                index.setdefault(term, set()).add(doc.file_id)
        return {term: frozenset(ids) for term, ids in index.items()}

    def calculate_idf(self, number_of_documents):
        """idf(t) = ln(N / df(t)) for every term of the inverted index.

        No smoothing: a term present in every document gets 0.
        """
        if number_of_documents <= 0:
            raise InvalidCorpusError("number of documents must be positive")
        idf = {}
        for term, doc_ids in self.inverted_index.items():
            df = len(doc_ids)
            if df > number_of_documents:
                raise InvalidCorpusError(
                    "term %r occurs in %d documents but the corpus has %d"
                    % (term, df, number_of_documents)
                )
            idf[term] = math.log(number_of_documents / df)
        return idf

    @property
    def number_of_documents(self):
        return len(self.documents)

    @property
    def vocabulary(self):
        return frozenset(self.terms)

    def document_frequency(self, term):
        """Number of documents containing ``term``; 0 if unknown."""
        return len(self.inverted_index.get(term, ()))

    def idf(self, term):
        """IDF of ``term``; 0.0 for terms outside the vocabulary."""
        return self.idf_map.get(term, 0.0)

    def position(self, term):
        """Vector position of ``term`` in the canonical order."""
        return self._positions[term]

    def get_document(self, file_id):
        """Look up a document by id."""
        return self._doc_by_id[file_id]

    def __len__(self):
        return len(self.terms)

    def __contains__(self, term):
        return term in self._positions
