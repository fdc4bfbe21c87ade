"""TF-IDF vectorizer bound to one corpus index."""

from loguru import logger


class TfIdfVectorizer:
    """Builds TF-IDF vectors in the canonical term order of ``index``.

    weight(t, d) = tf(t, d) * idf(t), with tf the raw count.
    """

    def __init__(self, index):
        self.index = index

    def weight(self, term, document):
        """TF-IDF weight of a single term in ``document``."""
        tf = document.tf.get(term, 0.0)
        if tf == 0.0:
            return 0.0
        return tf * self.index.idf(term)

    def vector(self, document):
        """The document's TF-IDF vector, one entry per vocabulary term."""
        return document.calculate_tf_idf(self.index)

    def vectorize(self, document):
        """Return ``document`` as a ScoredDocument against this index."""
        return document.vectorize(self.index)

    def vectorize_all(self):
        """Vectorize every document of the index, in corpus order."""
        scored = [self.vectorize(doc) for doc in self.index.documents]
        logger.debug("Vectorized {} documents over {} terms", len(scored), len(self.index))
        return scored
