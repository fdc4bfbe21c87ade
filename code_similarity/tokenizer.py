"""Tokenizers that turn raw source text into normalized terms."""

import re
from typing import Protocol

import nltk
from loguru import logger
from nltk.stem import WordNetLemmatizer

from code_similarity.errors import LemmatizerUnavailableError


class Tokenizer(Protocol):
    """Anything with a ``tokenize(text) -> list[str]`` method."""

    def tokenize(self, text):
        ...


# Boundaries inside an identifier: lower->Upper, ACRONYMWord, before digits,
# and runs of punctuation, underscores or whitespace.
_IDENTIFIER_SPLIT = re.compile(
    r"(?<=[^A-Z])(?=[A-Z])"
    r"|(?<!^)(?=[A-Z][a-z])"
    r"|(?<!^)(?=[0-9])"
    r"|[\W_]+"
)

_WORD_PATTERN = re.compile(r"\w+|[^\w\s]")


def split_identifier(token):
    """Split a camel-case identifier into its parts.

    ``CamelCase`` -> ``Camel``, ``Case``; ``MAXNumber`` -> ``MAX``,
    ``Number``; ``top1Results`` -> ``top``, ``1``, ``Results``.
    Empty fragments are dropped.
    """
    return [part for part in _IDENTIFIER_SPLIT.split(token) if part]


def is_identifier(token):
    """True for syntactically valid identifiers (keywords included)."""
    return token.isidentifier()


class CodeLemmatizer:
    """WordNet lemmatizer tuned for identifiers found in source code.

    Only lowercase alphabetic tokens are lemmatized; mixed-case
    identifiers are left for the camel-case split. The verb form is tried
    first (``has`` -> ``have``, ``was`` -> ``be``) and the noun form only
    when the verb lemma leaves the word unchanged and the word is longer
    than three characters, so short words like ``as`` are kept as is.
    """

    MIN_NOUN_LENGTH = 4

    def __init__(self, lemmatizer=None):
        self.lemmatizer = lemmatizer or WordNetLemmatizer()

    def __call__(self, token):
        if not (token.isalpha() and token.islower()):
            return token
        lemma = self.lemmatizer.lemmatize(token, pos="v")
        if lemma != token:
            return lemma
        if len(token) < self.MIN_NOUN_LENGTH:
            return token
        return self.lemmatizer.lemmatize(token, pos="n")


def ensure_wordnet():
    """Make sure the WordNet corpus is available, downloading it if needed."""
    try:
        nltk.data.find("corpora/wordnet")
        return
    except LookupError:
        logger.info("Downloading nltk wordnet data")
    if not nltk.download("wordnet", quiet=True):
        raise LemmatizerUnavailableError("nltk wordnet data could not be downloaded")
    try:
        nltk.data.find("corpora/wordnet")
    except LookupError as exc:
        raise LemmatizerUnavailableError("nltk wordnet data not found after download") from exc


def load_wordnet_lemmatizer():
    """Return a CodeLemmatizer backed by WordNet, fetching data if missing."""
    ensure_wordnet()
    return CodeLemmatizer()


class SourceCodeTokenizer:
    """Tokenize source code into lemmatized, camel-case-split identifiers.

    Steps, in order: split text into word and punctuation tokens,
    lemmatize each token (when a lemmatizer is given), split identifiers
    on case and digit boundaries, then keep only identifier-shaped terms.
    Case is preserved throughout.
    """

    def __init__(self, lemmatizer=None):
        self.lemmatizer = lemmatizer

    def tokenize(self, text):
        """Return the ordered list of normalized terms in ``text``."""
        terms = []
        for token in _WORD_PATTERN.findall(text):
            if self.lemmatizer is not None:
                token = self.lemmatizer(token)
            for part in split_identifier(token):
                if is_identifier(part):
                    terms.append(part)
        return terms


class WhitespaceTokenizer:
    """Split pre-normalized text on whitespace."""

    def tokenize(self, text):
        return text.split()
