# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import pandas as pd
from dotenv import load_dotenv
from parsers.pdf import pdf_to_text
from ui.client import request_match, MatchAPIError
import requests

load_dotenv()
# -------------------- CONFIG --------------------
API_URL = os.getenv("API_URL", "http://localhost:8000")
st.set_page_config(page_title="Resume JD Matcher", page_icon="🧠", layout="wide")
st.title("📊 Resume ↔ Job Description Matcher")

st.markdown(
    "Paste or upload a Job Description and a resume to see the overall match score, "
    "keyword coverage, and which JD keywords the resume is missing."
)

# -------------------- SESSION STATE --------------------
if "api_url" not in st.session_state:
    st.session_state.api_url = API_URL

# Keep the last report so it survives reruns
if "last_report" not in st.session_state:
    st.session_state.last_report = None


def _text_input(label: str, key: str) -> str:
    """Text area prefilled from an optional PDF upload."""
    uploaded = st.file_uploader(f"📄 Upload {label} (PDF, optional)", type=["pdf"], key=f"{key}_file")
    text = ""
    if uploaded:
        with st.spinner(f"Extracting text from {label}..."):
            text = pdf_to_text(uploaded)
        if not text:
            st.warning(f"⚠️ No text could be extracted from the {label} PDF.")
    return st.text_area(f"Paste or Edit {label}", value=text, height=260, key=key)


col_jd, col_resume = st.columns(2)
with col_jd:
    st.subheader("Job Description")
    jd_text = _text_input("Job Description", "jd_text")
with col_resume:
    st.subheader("Resume")
    resume_text = _text_input("Resume", "resume_text")

if st.button("🔍 Run Matching"):
    if not jd_text.strip() or not resume_text.strip():
        st.warning("Please provide both a Job Description and a resume.")
    else:
        with st.spinner("Matching resume to JD..."):
            try:
                st.session_state.last_report = request_match(st.session_state.api_url, jd_text, resume_text)
            except MatchAPIError as e:
                st.error(f"❌ Matching failed: {e.detail}")
                st.stop()
            except requests.exceptions.RequestException as e:
                st.error(f"❌ Connection error: {e}")
                st.stop()

report = st.session_state.get("last_report")
if report:
    with st.container(border=True):
        st.markdown(f"### 🧑 Overall Match: {report['match_score']:.2f}%")

        st.markdown("### 🧩 Score Breakdown")
        score_table = pd.DataFrame({
            "Metric": [
                "Textual Similarity (Resume ↔ JD)",
                "JD Keyword Coverage",
                "Final Match Score",
            ],
            "Score (%)": [
                f"{report['semantic_similarity']*100:.2f}",
                f"{report['overlap_pct']:.2f}",
                f"{report['match_score']:.2f}",
            ]
        })
        st.table(score_table)
        st.caption(
            f"{len(report['skills_matched'])} of {report['jd_skill_count']} JD keywords found "
            f"among {report['resume_skill_count']} resume keywords."
        )

        matched = report.get("skills_matched", [])
        missing = report.get("missing_skills", [])
        st.markdown(f"**✅ Matched Keywords:** {', '.join(matched) or '—'}")
        with st.expander(f"❗ Missing Keywords ({len(missing)})", expanded=False):
            st.write(", ".join(missing) or "—")

        st.markdown("### 📝 Feedback")
        for line in report.get("feedback", []):
            st.markdown(f"- {line}")
