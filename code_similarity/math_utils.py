"""Standalone vector math used by the similarity scorer."""

import math

from code_similarity.errors import IncompatibleVectorError


def dot_product(a, b):
    """Dot product of two vectors."""
    return sum(ai * bi for ai, bi in zip(a, b))


def vector_magnitude(v):
    """Euclidean magnitude of a vector."""
    return math.sqrt(sum(vi * vi for vi in v))


def cosine_similarity(a, b):
    """Cosine similarity between two aligned vectors.

    Returns 0.0 when either vector has zero magnitude instead of
    dividing by zero. Raises IncompatibleVectorError when the lengths
    differ, since positions would not refer to the same terms.
    """
    if len(a) != len(b):
        raise IncompatibleVectorError(
            "vector lengths differ: %d != %d" % (len(a), len(b))
        )
    denominator = vector_magnitude(a) * vector_magnitude(b)
    if denominator == 0.0:
        return 0.0
    return dot_product(a, b) / denominator
