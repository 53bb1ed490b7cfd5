"""Recommendation backend client."""

import logging
from typing import Optional

import httpx

from advisor.config import settings
from advisor.models import RecommendationResponse, StudentProfile
from advisor.profile import build_mock_recommendation, build_recommendation_request

log = logging.getLogger(__name__)

NO_ANSWER = "No recommendation received."


class RecommendationClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.url = base_url or settings.RECOMMEND_API_URL
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_S
        self.headers = {"content-type": "application/json"}
        self._http = http_client

    def fetch_answer(self, profile: StudentProfile) -> str:
        """POST the profile and return the backend's answer. Raises on failure."""
        payload = build_recommendation_request(profile).model_dump(by_alias=True)
        if self._http is not None:
            r = self._http.post(self.url, headers=self.headers, json=payload, timeout=self.timeout)
        else:
            r = httpx.post(self.url, headers=self.headers, json=payload, timeout=self.timeout)
        r.raise_for_status()
        data = RecommendationResponse.model_validate(r.json())
        return data.answer or NO_ANSWER

    def recommend(self, profile: StudentProfile) -> str:
        """Return advice for ``profile``, falling back to the mock text on any error."""
        try:
            return self.fetch_answer(profile)
        except (httpx.HTTPError, ValueError) as e:
            log.warning(f"Recommendation API unavailable ({e}); using mock response")
            return build_mock_recommendation(profile)
