"""Pydantic models for type safety."""

from datetime import datetime
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class StudentProfile(BaseModel):
    """Validated form submission. Every value stays a string."""
    model_config = ConfigDict(populate_by_name=True)

    specialization: str
    gpa: str
    credits: str
    grade_points: str = Field(alias="gradePoints")
    faculty: str
    career_interest: str = Field(alias="careerInterest")
    strong_subjects: str = Field(alias="strongSubjects")
    weak_subjects: str = Field(alias="weakSubjects")
    difficulty: str
    language: str


class ValidationResult(BaseModel):
    """Either a profile (valid) or per-field messages in declaration order."""
    valid: bool
    value: Optional[StudentProfile] = None
    errors: Dict[str, str] = {}


class ChatMessage(BaseModel):
    role: Literal["student", "ai"]
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)


class RecommendationRequest(BaseModel):
    """Body of POST /api/recommend. Only gpa is coerced to a number."""
    model_config = ConfigDict(populate_by_name=True)

    gpa: float
    faculty: str
    strong: str
    weak: str
    career: str
    specialization: str
    credits: str
    grade_points: str = Field(alias="gradePoints")
    language: str


class RecommendationResponse(BaseModel):
    answer: Optional[str] = None
