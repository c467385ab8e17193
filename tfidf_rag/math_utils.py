"""Sparse-vector math used for similarity scoring.

Vectors are plain dicts mapping term -> weight; missing terms count as 0.
"""

import math


def dot_product(a, b):
    """Dot product of two sparse vectors."""
    if len(b) < len(a):
        a, b = b, a
    return sum(weight * b.get(term, 0.0) for term, weight in a.items())


def vector_magnitude(v):
    """Euclidean magnitude of a sparse vector."""
    return math.sqrt(sum(w * w for w in v.values()))


def cosine_similarity(a, b):
    """Cosine similarity between two sparse vectors.

    cos(a, b) = a . b / (|a| * |b|), taken over the union of both key
    sets. Returns 0.0 when either vector has zero magnitude.
    """
    mag_a = vector_magnitude(a)
    mag_b = vector_magnitude(b)
    if mag_a == 0.0 or mag_b == 0.0:
        return 0.0
    return dot_product(a, b) / (mag_a * mag_b)
