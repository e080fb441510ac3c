import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from config import Settings
from .feedback import generate_feedback
from .keywords import build_frequency, extract_top_keywords, match_keywords
from .scorer import composite_score
from .similarity import cosine_similarity
from .text import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchReport:
    match_score: float
    semantic_similarity: float
    overlap_pct: float
    skills_matched: Tuple[str, ...]
    missing_skills: Tuple[str, ...]
    jd_skill_count: int
    resume_skill_count: int
    feedback: Tuple[str, ...]

    def to_payload(self) -> Dict[str, Any]:
        return {
            "match_score": self.match_score,
            "semantic_similarity": self.semantic_similarity,
            "overlap_pct": self.overlap_pct,
            "skills_matched": list(self.skills_matched),
            "missing_skills": list(self.missing_skills),
            "jd_skill_count": self.jd_skill_count,
            "resume_skill_count": self.resume_skill_count,
            "feedback": list(self.feedback),
        }


def build_match_report(jd_text: str, resume_text: str, settings: Optional[Settings] = None) -> MatchReport:
    """Score a resume against a job description."""
    settings = settings or Settings()

    jd_tokens = tokenize(jd_text, min_len=settings.min_token_len)
    resume_tokens = tokenize(resume_text, min_len=settings.min_token_len)

    jd_keywords = extract_top_keywords(jd_tokens, settings.jd_top_k)
    resume_keywords = extract_top_keywords(resume_tokens, settings.resume_top_k)
    overlap = match_keywords(jd_keywords, resume_keywords)

    similarity = cosine_similarity(build_frequency(jd_tokens), build_frequency(resume_tokens))
    score = composite_score(similarity, overlap.overlap_pct)

    logger.debug(
        f"tokens jd={len(jd_tokens)} resume={len(resume_tokens)}, "
        f"keywords jd={overlap.jd_count} resume={overlap.resume_count}, "
        f"similarity={similarity:.4f} overlap={overlap.overlap_pct:.2f}"
    )

    feedback = generate_feedback(score, overlap.missing, overlap.overlap_pct)

    return MatchReport(
        match_score=score,
        semantic_similarity=similarity,
        overlap_pct=overlap.overlap_pct,
        skills_matched=overlap.matched,
        missing_skills=overlap.missing,
        jd_skill_count=overlap.jd_count,
        resume_skill_count=overlap.resume_count,
        feedback=tuple(feedback),
    )
