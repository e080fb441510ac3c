import math
from typing import Dict, List, Tuple

import numpy as np


def to_vectors(freq_a: Dict[str, int], freq_b: Dict[str, int]) -> Tuple[List[str], np.ndarray, np.ndarray]:
    """Project two frequency maps onto their shared vocabulary."""
    vocab = list(dict.fromkeys([*freq_a, *freq_b]))
    a = np.array([freq_a.get(k, 0) for k in vocab], dtype=np.int64)
    b = np.array([freq_b.get(k, 0) for k in vocab], dtype=np.int64)
    return vocab, a, b


def cosine_similarity(freq_a: Dict[str, int], freq_b: Dict[str, int]) -> float:
    """Cosine of the angle between two term-frequency vectors, 0..1."""
    _, a, b = to_vectors(freq_a, freq_b)
    dot = int(np.dot(a, b))
    norm_a = int(np.dot(a, a))
    norm_b = int(np.dot(b, b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    # sqrt(norm_a * norm_b) on exact ints, not sqrt(norm_a) * sqrt(norm_b):
    # identical documents stay at exactly 1.0 and the result is symmetric
    sim = dot / math.sqrt(norm_a * norm_b)
    return max(0.0, min(1.0, sim))
