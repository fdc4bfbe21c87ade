"""Documents in their three stages: raw source, tokenized, scored."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from code_similarity.errors import IncompatibleVectorError
from code_similarity.math_utils import cosine_similarity


def calculate_tf(terms):
    """Raw term counts, as floats, for every distinct term in ``terms``.

    Terms that never occur are absent rather than mapped to 0.
    """
    tf = {}
    for term in terms:
        tf[term] = tf.get(term, 0.0) + 1.0
    return tf


@dataclass(frozen=True)
class SourceFile:
    """Raw text of one file, as handed over by a loader."""

    file_id: str
    text: str


@dataclass(frozen=True)
class Document:
    """A tokenized file: its ordered terms and their term frequencies."""

    file_id: str
    terms: Tuple[str, ...]
    tf: Mapping[str, float] = field(compare=False)

    @classmethod
    def from_terms(cls, file_id, terms):
        """Build a document from an already normalized term sequence."""
        terms = tuple(terms)
        return cls(file_id, terms, MappingProxyType(calculate_tf(terms)))

    @classmethod
    def from_source(cls, source, tokenizer):
        """Tokenize a SourceFile and build its document."""
        return cls.from_terms(source.file_id, tokenizer.tokenize(source.text))

    def __len__(self):
        return len(self.terms)

    def calculate_tf_idf(self, index):
        """TF-IDF values for every term of ``index``, in its canonical order.

        Vector positions follow the index vocabulary, not this document's
        own terms, so vectors built against one index line up.
        """
        idf = index.idf_map
        return tuple(
            self.tf[term] * idf[term] if term in self.tf else 0.0
            for term in index.terms
        )

    def vectorize(self, index):
        """Return the scored stage of this document against ``index``."""
        return ScoredDocument(self, self.calculate_tf_idf(index), index)


@dataclass(frozen=True)
class ScoredDocument:
    """A document together with its TF-IDF vector and the index behind it."""

    document: Document
    vector: Tuple[float, ...]
    index: Any

    @property
    def file_id(self):
        return self.document.file_id

    def is_compatible(self, other):
        """True when both vectors use the same term order."""
        return self.index is other.index or self.index.terms == other.index.terms

    def calculate_cosine_similarity(self, other):
        """Cosine similarity between this document's vector and ``other``'s."""
        if not self.is_compatible(other):
            raise IncompatibleVectorError(
                "%s and %s were vectorized against different indexes"
                % (self.file_id, other.file_id)
            )
        return cosine_similarity(self.vector, other.vector)
