"""Exceptions raised while indexing and scoring documents."""


class CodeSimilarityError(Exception):
    """Base class for all code_similarity errors."""


class InvalidCorpusError(CodeSimilarityError):
    """The document collection cannot produce a well-defined index."""


class IncompatibleVectorError(CodeSimilarityError):
    """Two vectors do not share the same term space."""


class LemmatizerUnavailableError(CodeSimilarityError):
    """WordNet data is missing and could not be downloaded."""
