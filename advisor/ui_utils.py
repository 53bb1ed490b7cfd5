"""Helpers for the Streamlit UI."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Mapping

from advisor.markdown import render
from advisor.models import ChatMessage, StudentProfile
from advisor.profile import build_profile_summary
from advisor.validation import PROFILE_FIELDS

WELCOME_MESSAGE = (
    "👋 Welcome to the SLIIT AI Academic & Elective Advisor for year 4 semester 1! "
    "Fill in your academic profile above and click **Get Recommendation** to "
    "receive personalized elective and academic guidance."
)

FIELD_LABELS = {
    "specialization": "Specialization",
    "gpa": "Cumulative GPA",
    "credits": "Cumulative Credits",
    "gradePoints": "Cumulative Grade Points",
    "faculty": "Faculty",
    "careerInterest": "Career Interest",
    "strongSubjects": "Strong Subjects",
    "weakSubjects": "Weak Subjects",
    "difficulty": "Preferred Difficulty",
    "language": "Preferred Output Language",
}

_BUBBLE_CLASSES = {
    "student": ("chat-row chat-row--student", "chat-bubble chat-bubble--student"),
    "ai": ("chat-row chat-row--ai", "chat-bubble chat-bubble--ai"),
}


def welcome_message() -> ChatMessage:
    """Return the advisor's opening message."""
    return ChatMessage(role="ai", content=WELCOME_MESSAGE)


def format_time(timestamp: datetime) -> str:
    """Format a message timestamp as HH:MM."""
    return timestamp.strftime("%H:%M")


def render_chat_bubble(message: ChatMessage) -> str:
    """Return the HTML for one chat bubble; content is rendered exactly once."""
    row_class, bubble_class = _BUBBLE_CLASSES[message.role]
    return (
        f"<div class='{row_class}'>"
        f"<div class='{bubble_class}'>"
        f"<div class='chat-content'>{render(message.content)}</div>"
        f"<p class='chat-time'>{format_time(message.timestamp)}</p>"
        "</div></div>"
    )


def render_transcript(messages: Iterable[ChatMessage]) -> str:
    """Concatenate bubbles for a whole transcript."""
    return "".join(render_chat_bubble(message) for message in messages)


def profile_message(profile: StudentProfile) -> ChatMessage:
    """Return the student's profile summary as a chat message."""
    return ChatMessage(role="student", content=build_profile_summary(profile))


def advisor_message(answer: str) -> ChatMessage:
    return ChatMessage(role="ai", content=answer)


def format_errors(errors: Mapping[str, str]) -> list[str]:
    """Return "Label: message" lines in form field order."""
    lines: list[str] = []
    for field in PROFILE_FIELDS:
        message = errors.get(field)
        if message:
            lines.append(f"{FIELD_LABELS[field]}: {message}")
    return lines
