from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from config import get_settings
from schemas import MatchRequest, MatchResponse, HealthOut
from matching.report import build_match_report

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MISSING_TEXT_DETAIL = "Both 'jd_text' and 'resume_text' are required in the request body."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective scoring settings on startup."""
    logger.info(
        f"Scoring with min_token_len={settings.min_token_len}, "
        f"jd_top_k={settings.jd_top_k}, resume_top_k={settings.resume_top_k}"
    )
    yield
    logger.info("Application shutting down.")


app = FastAPI(title="Resume JD Matcher", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    """Malformed /match bodies get the same 400 as missing texts."""
    if request.url.path == "/match":
        return JSONResponse(status_code=400, content={"detail": MISSING_TEXT_DETAIL})
    return await request_validation_exception_handler(request, exc)


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="ok")


@app.post("/match", response_model=MatchResponse)
def match_jd_and_resume(payload: Optional[MatchRequest] = None):
    """Score a resume against a job description."""
    payload = payload or MatchRequest()
    if not payload.jd_text or not payload.resume_text:
        raise HTTPException(status_code=400, detail=MISSING_TEXT_DETAIL)

    try:
        report = build_match_report(payload.jd_text, payload.resume_text, settings)
    except Exception as e:
        logger.exception("Error computing match")
        raise HTTPException(status_code=500, detail=f"Internal error computing match: {e}")

    logger.info(
        f"Match computed: score={report.match_score} "
        f"overlap={report.overlap_pct:.2f} missing={len(report.missing_skills)}"
    )
    return MatchResponse(**report.to_payload())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host=settings.host, port=settings.port)
