"""Profile summary, request payload and fallback advice text."""

from advisor.models import RecommendationRequest, StudentProfile

SPECIALIZATIONS = {
    "IT": "Information Technology (IT)",
    "SE": "Software Engineering (SE)",
    "DS": "Data Science (DS)",
    "ISE": "Information Systems Engineering (ISE)",
    "CS": "Cyber Security (CS)",
    "IM": "Interactive Media (IM)",
    "CSNE": "Computer Systems & Network Engineering (CSNE)",
}
FACULTIES = ["Faculty of Computing", "Faculty of Engineering", "Faculty of Business"]
CAREER_INTERESTS = [
    "AI",
    "Data Science",
    "Cybersecurity",
    "Software Engineering",
    "DevOps",
    "General IT",
]
DIFFICULTY_LEVELS = ["Low", "Moderate", "High"]
LANGUAGES = ["English", "Sinhala", "Tamil"]
DEFAULT_LANGUAGE = "English"


def build_profile_summary(profile: StudentProfile) -> str:
    """Return the student's chat message describing their profile."""
    lines = [
        "📋 **My Profile:**",
        f"- Specialization: {profile.specialization}",
        f"- Cumulative GPA: {profile.gpa}",
        f"- Cumulative Credits: {profile.credits}",
        f"- Cumulative Grade Points: {profile.grade_points}",
        f"- Faculty: {profile.faculty}",
        f"- Strong Subjects: {profile.strong_subjects}",
        f"- Weak Subjects: {profile.weak_subjects}",
        f"- Career Interest: {profile.career_interest}",
        f"- Preferred Difficulty: {profile.difficulty}",
        f"- Preferred Language: {profile.language}",
    ]
    return "\n".join(lines)


def build_recommendation_request(profile: StudentProfile) -> RecommendationRequest:
    """Map a validated profile onto the backend payload (gpa as a number)."""
    return RecommendationRequest(
        gpa=float(profile.gpa),
        faculty=profile.faculty,
        strong=profile.strong_subjects,
        weak=profile.weak_subjects,
        career=profile.career_interest,
        specialization=profile.specialization,
        credits=profile.credits,
        grade_points=profile.grade_points,
        language=profile.language,
    )


def build_mock_recommendation(profile: StudentProfile) -> str:
    """Canned advice used whenever the backend cannot be reached."""
    return (
        "Based on your profile, here are my recommendations:\n\n"
        "**Recommended Electives:**\n"
        "- Machine Learning Fundamentals\n"
        "- Data Visualization & Analytics\n"
        "- Cloud Computing Essentials\n\n"
        "**Study Tips:**\n"
        f"- Focus on strengthening {profile.weak_subjects} with online resources\n"
        f"- Leverage your strengths in {profile.strong_subjects} for project work\n\n"
        f"**Career Path:** Your interest in {profile.career_interest} aligns well "
        "with your profile. Consider joining related student clubs and pursuing "
        "certifications.\n\n"
        "> *This is a mock response. Connect the backend API for real recommendations.*"
    )
