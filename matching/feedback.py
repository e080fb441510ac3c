from typing import List, Optional, Sequence

EXCELLENT_THRESHOLD = 85
GOOD_THRESHOLD = 65
PARTIAL_THRESHOLD = 40
MAX_LISTED_MISSING = 8

EXCELLENT_FIT = "Excellent fit — the resume is highly aligned with the job description."
GOOD_FIT = "Good fit — candidate is a strong match with a few improvement areas."
PARTIAL_FIT = "Partial fit — some relevant skills present but there are notable gaps."
LOW_FIT = "Low fit — there are significant gaps in alignment with this role."
MISSING_LIST = "Missing important keywords/skills: {skills}."
MISSING_SUMMARY = "Missing {count} JD keywords. Key missing skills: {skills}."
NO_MISSING = "No major JD keywords appear to be missing in the resume."
TAILOR_ADVICE = (
    "Consider tailoring the resume by explicitly mentioning relevant tools, "
    "technologies, and responsibilities from the JD."
)
INTERVIEW_READY = "Candidate looks ready for this role. Focus the interview on depth and real projects."


def tier_message(score: float) -> str:
    if score >= EXCELLENT_THRESHOLD:
        return EXCELLENT_FIT
    if score >= GOOD_THRESHOLD:
        return GOOD_FIT
    if score >= PARTIAL_THRESHOLD:
        return PARTIAL_FIT
    return LOW_FIT


def missing_message(missing: Sequence[str]) -> str:
    if not missing:
        return NO_MISSING
    if len(missing) <= MAX_LISTED_MISSING:
        return MISSING_LIST.format(skills=", ".join(missing))
    top = missing[:MAX_LISTED_MISSING]
    return MISSING_SUMMARY.format(count=len(missing), skills=", ".join(top))


def generate_feedback(score: float, missing: Sequence[str], overlap_pct: Optional[float] = None) -> List[str]:
    """
    Build recruiter-facing feedback lines for a composed score.

    Returns three messages in order: the fit tier, the missing keyword
    summary and a closing recommendation. ``overlap_pct`` is accepted for
    callers that pass the whole match result but does not change the text.
    """
    closing = TAILOR_ADVICE if score < EXCELLENT_THRESHOLD else INTERVIEW_READY
    return [tier_message(score), missing_message(list(missing)), closing]
