"""Recommendation API Smoke Test Script

Posts a sample profile to the recommendation backend and checks the reply
shape (a JSON object with a non-empty ``answer`` string).

Endpoint:
- `POST {RECOMMEND_API_URL}` (default http://localhost:8000/api/recommend)

Configure via environment variable or a .env file in the repo root:
  RECOMMEND_API_URL=...

Usage
-----
  python3 testing/api_smoke_test.py
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import requests

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from advisor.config import settings
from advisor.profile import build_recommendation_request
from advisor.validation import validate

SAMPLE_FIELDS = {
    "specialization": "IT",
    "gpa": "3.5",
    "credits": "80",
    "gradePoints": "300",
    "faculty": "Faculty of Computing",
    "careerInterest": "AI",
    "strongSubjects": "Coding",
    "weakSubjects": "Statistics",
    "difficulty": "Moderate",
    "language": "English",
}


@dataclass
class CallResult:
    name: str
    method: str
    url: str
    status: Optional[int]
    ok: bool
    response_preview: str
    response_json: Optional[Any] = None


def post_json(name: str, url: str, body: Any, timeout_s: float) -> CallResult:
    try:
        r = requests.post(url, json=body, timeout=timeout_s)
        resp_json: Optional[Any] = None
        ctype = (r.headers.get("content-type") or "").lower()
        if "application/json" in ctype:
            try:
                resp_json = r.json()
            except ValueError:
                resp_json = None
        preview = r.text
        if len(preview) > 500:
            preview = preview[:500] + "..."
        return CallResult(
            name=name,
            method="POST",
            url=url,
            status=r.status_code,
            ok=r.ok,
            response_preview=preview,
            response_json=resp_json,
        )
    except requests.RequestException as e:
        return CallResult(name=name, method="POST", url=url, status=None, ok=False, response_preview=str(e))


def has_answer(result: CallResult) -> bool:
    data = result.response_json
    return isinstance(data, dict) and isinstance(data.get("answer"), str) and bool(data["answer"].strip())


def main() -> int:
    result = validate(SAMPLE_FIELDS)
    payload = build_recommendation_request(result.value).model_dump(by_alias=True)
    print(f"Payload: {json.dumps(payload, ensure_ascii=False)}")

    call = post_json("recommend", settings.RECOMMEND_API_URL, payload, settings.REQUEST_TIMEOUT_S)
    answer_ok = call.ok and has_answer(call)

    print("\n=== Recommendation API Smoke Test ===")
    status = str(call.status) if call.status is not None else "-"
    print(f"{'OK' if answer_ok else 'FAIL':4}  {status:>3}  {call.method} {call.url}")
    print(call.response_preview)

    return 0 if answer_ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
