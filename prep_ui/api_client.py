# prep_ui/api_client.py
# Thin requests wrapper around the Interview Prep API. Every call returns
# (data, error) so the UI can show one notification without try/except blocks.
import sys
import os
from typing import List, Optional, Tuple

import requests

# Add project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from interview_prep.models.flows import (
    AssessUserAnswerInput,
    AssessUserAnswerOutput,
    GenerateLearningPathsInput,
    GenerateLearningPlanInput,
    GenerateMcqInput,
    LearningPathResponse,
    Mcq,
)
from interview_prep.models.question import ExcelData
from interview_prep.utils.config import settings
from interview_prep.utils.logger import logger

UNREACHABLE_MESSAGE = "Could not reach the Interview Prep API. Please make sure it is running."
UPLOAD_FAILED = "Failed to parse the file. Please ensure it is a valid file and not corrupted."


class PrepApiClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_s
        self.session = session or requests.Session()

    def _post(self, path: str, fallback_error: str, **kwargs) -> Tuple[Optional[dict], Optional[str]]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.post(url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            return None, UNREACHABLE_MESSAGE

        if response.ok:
            try:
                return response.json(), None
            except ValueError:
                logger.error(f"{url} returned {response.status_code} with a non-JSON body: {response.text[:200]}")
                return None, fallback_error

        detail = None
        try:
            detail = response.json().get("detail")
        except ValueError:
            pass
        logger.warning(f"{url} returned {response.status_code}: {detail or response.text[:200]}")
        # Validation errors come back as a list of problems, not a message worth showing.
        return None, detail if isinstance(detail, str) and detail else fallback_error

    def upload(self, filename: str, content: bytes) -> Tuple[Optional[ExcelData], Optional[str]]:
        data, error = self._post("/upload/", UPLOAD_FAILED, files={"file": (filename, content)})
        return (ExcelData(**data) if data else None), error

    def assess(self, request: AssessUserAnswerInput) -> Tuple[Optional[AssessUserAnswerOutput], Optional[str]]:
        data, error = self._post(
            "/assessment/", "Failed to get assessment from AI. Please try again.", json=request.model_dump()
        )
        return (AssessUserAnswerOutput(**data) if data else None), error

    def learning_plan(self, request: GenerateLearningPlanInput) -> Tuple[Optional[str], Optional[str]]:
        data, error = self._post(
            "/learning/plan", "Failed to generate learning plan from AI. Please try again.", json=request.model_dump()
        )
        return (data["learning_plan"] if data else None), error

    def learning_path(self, request: GenerateLearningPathsInput) -> Tuple[Optional[LearningPathResponse], Optional[str]]:
        data, error = self._post(
            "/learning/paths", "Failed to generate learning path from AI. Please try again.", json=request.model_dump()
        )
        return (LearningPathResponse(**data) if data else None), error

    def skills(self, role_name: str, company_name: str) -> Tuple[Optional[List[str]], Optional[str]]:
        data, error = self._post(
            "/learning/skills",
            "Failed to generate skills from AI. Please try again.",
            json={"role_name": role_name, "company_name": company_name},
        )
        return (data["skills"] if data else None), error

    def study_guide(self, skills: List[str]) -> Tuple[Optional[str], Optional[str]]:
        data, error = self._post(
            "/learning/study-guide", "Failed to generate study guide from AI. Please try again.", json={"skills": skills}
        )
        return (data["study_guide"] if data else None), error

    def mcq(self, request: GenerateMcqInput) -> Tuple[Optional[Mcq], Optional[str]]:
        data, error = self._post(
            "/mcq/", "Failed to generate multiple-choice question from AI. Please try again.", json=request.model_dump()
        )
        return (Mcq(**data) if data else None), error

    def audio(self, text: str) -> Tuple[Optional[str], Optional[str]]:
        data, error = self._post("/audio/", "Failed to generate audio from AI. Please try again.", json={"text": text})
        return (data["media"] if data else None), error
