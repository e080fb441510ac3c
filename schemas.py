from pydantic import BaseModel
from typing import List, Optional


# Incoming comparison request; both fields are checked by the route
class MatchRequest(BaseModel):
    jd_text: Optional[str] = None
    resume_text: Optional[str] = None


# Match report returned to the client
class MatchResponse(BaseModel):
    match_score: float
    semantic_similarity: float
    overlap_pct: float
    skills_matched: List[str] = []
    missing_skills: List[str] = []
    jd_skill_count: int
    resume_skill_count: int
    feedback: List[str] = []


class HealthOut(BaseModel):
    status: str
