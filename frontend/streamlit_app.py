"""Streamlit UI for the AI Academic & Elective Advisor."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import streamlit as st

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from advisor.config import settings
from advisor.profile import (
    CAREER_INTERESTS,
    DEFAULT_LANGUAGE,
    DIFFICULTY_LEVELS,
    FACULTIES,
    LANGUAGES,
    SPECIALIZATIONS,
)
from advisor.services.recommender import RecommendationClient
from advisor.ui_utils import (
    FIELD_LABELS,
    advisor_message,
    format_errors,
    profile_message,
    render_chat_bubble,
    welcome_message,
)
from advisor.validation import validate

logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s: %(message)s")
log = logging.getLogger(__name__)

PAGE_TITLE = "SLIIT AI Academic & Elective Advisor for year 4 semester 1"
CHAT_CSS = """
<style>
.chat-row { display: flex; margin-bottom: 0.75rem; }
.chat-row--student { justify-content: flex-end; }
.chat-row--ai { justify-content: flex-start; }
.chat-bubble { max-width: 85%; border-radius: 1rem; padding: 0.75rem 1rem; font-size: 0.9rem; }
.chat-bubble--student { background: #1e2a5a; color: #f5f7ff; border-bottom-right-radius: 0.25rem; }
.chat-bubble--ai { background: rgba(255, 255, 255, 0.85); color: #1a1a1a; border-bottom-left-radius: 0.25rem; }
.chat-time { font-size: 0.65rem; margin: 0.5rem 0 0; opacity: 0.6; }
.chat-content ul { margin-top: 0.25rem; padding-left: 1rem; list-style: disc; }
.chat-content blockquote { border-left: 2px solid #3b4a8c; padding-left: 0.75rem; font-style: italic; opacity: 0.8; }
</style>
"""


@st.cache_resource
def get_client() -> RecommendationClient:
    return RecommendationClient()


def init_state() -> None:
    """Initialize Streamlit session state keys."""
    st.session_state.setdefault("messages", [welcome_message()])
    st.session_state.setdefault("field_errors", {})
    st.session_state.setdefault("pending_profile", None)


def profile_form() -> dict[str, Any] | None:
    """Draw the profile form; return raw field values when submitted."""
    with st.form("profile_form"):
        st.subheader("🎓 Student Profile")
        specialization = st.selectbox(
            FIELD_LABELS["specialization"],
            list(SPECIALIZATIONS),
            index=None,
            placeholder="Select specialization",
            format_func=lambda code: SPECIALIZATIONS[code],
        )
        gpa = st.text_input(FIELD_LABELS["gpa"], placeholder="e.g. 3.77")
        credits = st.text_input(FIELD_LABELS["credits"], placeholder="e.g. 84")
        grade_points = st.text_input(FIELD_LABELS["gradePoints"], placeholder="e.g. 316.4")
        faculty = st.selectbox(
            FIELD_LABELS["faculty"], FACULTIES, index=None, placeholder="Select faculty"
        )
        career_interest = st.selectbox(
            FIELD_LABELS["careerInterest"],
            CAREER_INTERESTS,
            index=None,
            placeholder="Select interest",
        )
        strong_subjects = st.text_input(
            FIELD_LABELS["strongSubjects"], placeholder="e.g. Math, OOP"
        )
        weak_subjects = st.text_input(FIELD_LABELS["weakSubjects"], placeholder="e.g. Statistics")
        difficulty = st.selectbox(
            FIELD_LABELS["difficulty"], DIFFICULTY_LEVELS, index=None, placeholder="Select level"
        )
        language = st.selectbox(
            FIELD_LABELS["language"], LANGUAGES, index=LANGUAGES.index(DEFAULT_LANGUAGE)
        )
        submitted = st.form_submit_button("➤ Get Recommendation")

    if not submitted:
        return None
    return {
        "specialization": specialization,
        "gpa": gpa,
        "credits": credits,
        "gradePoints": grade_points,
        "faculty": faculty,
        "careerInterest": career_interest,
        "strongSubjects": strong_subjects,
        "weakSubjects": weak_subjects,
        "difficulty": difficulty,
        "language": language,
    }


def handle_submit(fields: dict[str, Any]) -> None:
    result = validate(fields)
    st.session_state["field_errors"] = result.errors
    if not result.valid:
        log.info(f"Submission blocked: {list(result.errors)}")
        return

    profile = result.value
    st.session_state["messages"].append(profile_message(profile))
    st.session_state["pending_profile"] = profile


def answer_pending_profile() -> None:
    """Fetch advice for the last submitted profile below its chat bubble."""
    profile = st.session_state["pending_profile"]
    if profile is None:
        return
    with st.spinner("Thinking..."):
        answer = get_client().recommend(profile)
    st.session_state["messages"].append(advisor_message(answer))
    st.session_state["pending_profile"] = None
    st.rerun()


st.set_page_config(page_title=PAGE_TITLE, page_icon="🎓", layout="wide")
init_state()

st.title(PAGE_TITLE)
st.markdown(CHAT_CSS, unsafe_allow_html=True)

left, right = st.columns([1, 2], gap="large")

with left:
    fields = profile_form()
    if fields is not None:
        handle_submit(fields)
    for line in format_errors(st.session_state["field_errors"]):
        st.error(line)

with right:
    st.subheader("Advisor chat")
    for message in st.session_state["messages"]:
        st.markdown(render_chat_bubble(message), unsafe_allow_html=True)
    answer_pending_profile()

st.caption("Powered by Generative AI | SLIIT Academic Prototype")
