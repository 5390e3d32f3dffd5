"""
Tests for service outcomes, question selection, model routing and log sanitizing.
"""
import asyncio
import random

import pytest

from app.core.config import GEMINI_MODEL
from app.core.logging_config import sanitize_log_data
from app.llm.provider import LLMProvider, LLMResponse
from app.llm.router import get_model_for_feature
from app.schemas.interview import QuestionGenerationRequest
from app.services.interview_service import generate_questions, select_questions
from app.services.outcome import ErrorKind, ServiceResult, response_body_for, status_code_for


class ExplodingProvider(LLMProvider):
    """Provider that fails with an unexpected error."""

    async def generate_json(self, prompt, response_schema, model=None):
        raise RuntimeError("socket closed by peer")


class StaticProvider(LLMProvider):
    def __init__(self, content):
        self.content = content

    async def generate_json(self, prompt, response_schema, model=None):
        return LLMResponse(content=self.content, model=model or "")


@pytest.mark.parametrize("kind,expected", [
    (ErrorKind.VALIDATION, 400),
    (ErrorKind.UPSTREAM, 500),
    (ErrorKind.FORMAT, 500),
    (ErrorKind.UNEXPECTED, 500),
])
def test_status_code_for_errors(kind, expected):
    result = ServiceResult.failure(kind, "boom")

    assert not result.ok
    assert status_code_for(result) == expected
    assert response_body_for(result) == {"error": "boom"}


def test_status_code_for_success():
    result = ServiceResult.success(["Q1"])

    assert result.ok
    assert status_code_for(result) == 200
    assert response_body_for(result) == ["Q1"]


def test_select_questions_keeps_short_lists():
    assert select_questions(["Q1", "Q2"], count=3) == ["Q1", "Q2"]


def test_select_questions_samples_in_order():
    drafted = [f"Q{i}" for i in range(8)]

    picked = select_questions(drafted, count=3, rng=random.Random(7))

    assert len(picked) == 3
    assert len(set(picked)) == 3
    assert picked == [q for q in drafted if q in picked]


def test_unexpected_error_caught_at_boundary():
    request = QuestionGenerationRequest(jobDescription="Data engineer", cvDetails="Spark, Airflow")

    result = asyncio.run(generate_questions(request, ExplodingProvider()))

    assert result.error_kind == ErrorKind.UNEXPECTED
    assert result.error_message == "Internal server error: socket closed by peer"
    assert status_code_for(result) == 500


def test_generate_questions_with_static_provider():
    request = QuestionGenerationRequest(jobDescription="Data engineer", cvDetails="Spark, Airflow")

    result = asyncio.run(generate_questions(request, StaticProvider('["Q1","Q2","Q3"]')))

    assert result.ok
    assert result.payload == ["Q1", "Q2", "Q3"]


def test_model_routing_defaults():
    assert get_model_for_feature("interview_questions")
    assert get_model_for_feature("answer_evaluation")
    assert get_model_for_feature("unknown_feature") == GEMINI_MODEL


def test_sanitize_log_data_redacts_secrets():
    data = {"model": "gemini-test", "api_key": "AIza-secret", "Authorization": "Bearer x"}

    sanitized = sanitize_log_data(data)

    assert sanitized["model"] == "gemini-test"
    assert sanitized["api_key"] == "***REDACTED***"
    assert sanitized["Authorization"] == "***REDACTED***"
    # Original is untouched
    assert data["api_key"] == "AIza-secret"
