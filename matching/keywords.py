from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

JD_TOP_K = 200
RESUME_TOP_K = 400


@dataclass(frozen=True)
class KeywordMatch:
    """Overlap between the JD keyword set and the resume keyword set."""
    matched: Tuple[str, ...]
    missing: Tuple[str, ...]
    jd_count: int
    resume_count: int
    overlap_pct: float


def build_frequency(tokens: Iterable[str]) -> Dict[str, int]:
    """Term frequency map; keys keep first-occurrence order."""
    freq: Dict[str, int] = {}
    for t in tokens:
        freq[t] = freq.get(t, 0) + 1
    return freq


def extract_top_keywords(tokens: List[str], top_k: int = JD_TOP_K) -> List[str]:
    """
    Return the ``top_k`` most frequent tokens, most frequent first.

    Ties keep the order in which the tokens first appeared.
    """
    if top_k < 0:
        raise ValueError("top_k must be >= 0")

    freq = build_frequency(tokens)
    first_seen = {t: i for i, t in enumerate(freq)}
    ranked = sorted(freq.items(), key=lambda kv: (-kv[1], first_seen[kv[0]]))
    return [token for token, _ in ranked[:top_k]]


def match_keywords(jd_keywords: Iterable[str], resume_keywords: Iterable[str]) -> KeywordMatch:
    jd_set = dict.fromkeys(jd_keywords)
    resume_set = set(resume_keywords)

    matched, missing = [], []
    for k in jd_set:
        if k in resume_set:
            matched.append(k)
        else:
            missing.append(k)

    jd_count = len(jd_set)
    overlap_pct = 0.0 if jd_count == 0 else len(matched) / jd_count * 100

    return KeywordMatch(
        matched=tuple(matched),
        missing=tuple(missing),
        jd_count=jd_count,
        resume_count=len(resume_set),
        overlap_pct=overlap_pct,
    )
