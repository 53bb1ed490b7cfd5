#!/usr/bin/env python3
"""Academic advisor - command-line entry point.

Usage:
    python -m advisor.main --specialization IT --gpa 3.5 --credits 80 \\
        --grade-points 300 --faculty "Faculty of Computing" --career-interest AI \\
        --strong-subjects Coding --weak-subjects Statistics --difficulty Moderate
    python -m advisor.main --profile-json profile.json       # Load fields from a file
    python -m advisor.main --profile-json profile.json --html # Print rendered HTML
    python -m advisor.main --profile-json profile.json --offline
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from advisor.config import settings
from advisor.markdown import render
from advisor.models import StudentProfile
from advisor.profile import DEFAULT_LANGUAGE, build_mock_recommendation, build_profile_summary
from advisor.services.recommender import RecommendationClient
from advisor.ui_utils import format_errors
from advisor.validation import PROFILE_FIELDS, validate

logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s: %(message)s")
log = logging.getLogger(__name__)

# form field name -> argparse dest
FIELD_OPTIONS = {
    "specialization": "specialization",
    "gpa": "gpa",
    "credits": "credits",
    "gradePoints": "grade_points",
    "faculty": "faculty",
    "careerInterest": "career_interest",
    "strongSubjects": "strong_subjects",
    "weakSubjects": "weak_subjects",
    "difficulty": "difficulty",
    "language": "language",
}


def load_profile_json(path: str) -> dict[str, Any]:
    """Load raw form fields from a JSON object file."""
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid profile JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Profile JSON in {path} must be an object")
    return data


def collect_fields(args: argparse.Namespace) -> dict[str, Any]:
    """Merge --profile-json values with explicit field options (options win)."""
    fields: dict[str, Any] = {}
    if getattr(args, "profile_json", None):
        fields.update(load_profile_json(args.profile_json))
    for field in PROFILE_FIELDS:
        value = getattr(args, FIELD_OPTIONS[field], None)
        if value is not None:
            fields[field] = value
    fields.setdefault("language", DEFAULT_LANGUAGE)
    return fields


def get_answer(profile: StudentProfile, client: Optional[RecommendationClient], offline: bool) -> str:
    if offline or client is None:
        log.info("Offline mode: using mock recommendation")
        return build_mock_recommendation(profile)
    return client.recommend(profile)


def run(args: argparse.Namespace, client: Optional[RecommendationClient] = None) -> int:
    """Validate the profile and print the exchange. Returns the exit code."""
    fields = collect_fields(args)
    result = validate(fields, split_parse_errors=args.split_parse_errors or None)
    if not result.valid:
        log.warning(f"Profile rejected with {len(result.errors)} error(s)")
        for line in format_errors(result.errors):
            print(line, file=sys.stderr)
        return 2

    profile = result.value
    log.info(f"Profile OK: specialization={profile.specialization}, gpa={profile.gpa}")
    summary = build_profile_summary(profile)
    answer = get_answer(profile, client, args.offline)

    if args.html:
        print(render(summary))
        print(render(answer))
    else:
        print(summary)
        print()
        print(answer)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AI Academic & Elective Advisor")
    parser.add_argument("--profile-json", type=str, default=None, help="JSON file of form fields")
    parser.add_argument("--specialization", type=str, default=None)
    parser.add_argument("--gpa", type=str, default=None, help="Cumulative GPA (0 - 4.0)")
    parser.add_argument("--credits", type=str, default=None, help="Cumulative credits (> 0)")
    parser.add_argument("--grade-points", type=str, default=None, help="Cumulative grade points")
    parser.add_argument("--faculty", type=str, default=None)
    parser.add_argument("--career-interest", type=str, default=None)
    parser.add_argument("--strong-subjects", type=str, default=None)
    parser.add_argument("--weak-subjects", type=str, default=None)
    parser.add_argument("--difficulty", type=str, default=None)
    parser.add_argument("--language", type=str, default=None)
    parser.add_argument(
        "--offline", action="store_true", help="Skip the backend and use the mock answer"
    )
    parser.add_argument("--html", action="store_true", help="Print rendered HTML")
    parser.add_argument(
        "--split-parse-errors",
        action="store_true",
        help="Report non-numeric values separately from out-of-range ones",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log.info(f"Config: api={settings.RECOMMEND_API_URL}, offline={args.offline}")
    client = None if args.offline else RecommendationClient()
    return run(args, client)


if __name__ == "__main__":
    raise SystemExit(main())
