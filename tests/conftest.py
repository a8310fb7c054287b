# tests/conftest.py
import logging
import os
import sys

import pandas as pd
import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models import FakeListLLM

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from interview_prep.services import llm_client
from interview_prep.utils.config import settings
from tests.helpers import build_workbook


# --- Keep every test away from the real model service ---
@pytest.fixture(autouse=True)
def isolate_llm_client(request, monkeypatch):
    """
    Starts each test with no cached LLM client, unless the test is marked
    'llm_integration' and should talk to the configured provider.
    """
    if "llm_integration" in request.keywords:
        yield
        return
    monkeypatch.setattr(llm_client, "_llm_client", None)
    yield


@pytest.fixture
def fake_llm(monkeypatch):
    """
    Returns a function that installs a FakeListLLM answering with the given
    raw responses, in order.
    """
    def install(*responses: str) -> FakeListLLM:
        llm = FakeListLLM(responses=list(responses))
        monkeypatch.setattr(llm_client, "_llm_client", llm)
        return llm
    return install


@pytest.fixture
def unconfigured_provider(monkeypatch):
    monkeypatch.setattr(settings, "llm_provider", "google")
    monkeypatch.setattr(settings, "google_api_key", None)


# --- TestClient Fixture ---
@pytest.fixture(scope="session")
def client():
    from interview_prep.main import app
    logger.info("Creating TestClient instance for the session.")
    with TestClient(app) as c:
        yield c


# --- Spreadsheet fixtures ---
@pytest.fixture
def sample_workbook() -> bytes:
    return build_workbook({
        "Backend Engineer": pd.DataFrame({
            "Question": ["What is a REST API?", "Explain database indexing."],
            "Expected Answer": ["An architectural style for HTTP services.", "A structure that speeds up lookups."],
            "Difficulty": ["Easy", "Medium"],
        }),
        "Data Scientist": pd.DataFrame({
            "question": ["What is overfitting?"],
        }),
    })
