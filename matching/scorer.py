from decimal import Decimal, ROUND_HALF_UP

# Weights are fixed; they must sum to 1 so the score stays within 0..100
SEMANTIC_WEIGHT = 0.6
KEYWORD_WEIGHT = 0.4


def round_score(value: float) -> float:
    """
    Round to 2 decimals, halves away from zero.

    Works on the shortest decimal form of the float, so 64.995 -> 65.0
    rather than the 64.99 that binary rounding would give.
    """
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def composite_score(semantic_similarity: float, overlap_pct: float) -> float:
    """Blend cosine similarity (0..1) and keyword overlap (0..100) into 0..100."""
    semantic_pct = semantic_similarity * 100
    final = semantic_pct * SEMANTIC_WEIGHT + overlap_pct * KEYWORD_WEIGHT
    final = max(0.0, min(100.0, final))
    return round_score(final)
