"""
Interview service: question generation and answer evaluation via Gemini.

Each operation validates its input, builds a prompt, makes one schema-constrained
model call and unwraps the JSON payload. Failures never escape: they come back
as a ServiceResult tagged with the error kind.
"""
import json
import logging
import random
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from app.core.config import INTERVIEW_QUESTION_COUNT
from app.llm.errors import ResponseFormatError, UpstreamError
from app.llm.prompts import build_evaluation_prompt, build_question_prompt
from app.llm.provider import LLMProvider
from app.llm.response_schemas import EVALUATION_SCHEMA, QUESTION_LIST_SCHEMA
from app.llm.router import get_model_for_feature
from app.schemas.interview import (
    AnswerEvaluationRequest,
    EvaluationResult,
    QuestionGenerationRequest,
)
from app.services.outcome import ErrorKind, ServiceResult

logger = logging.getLogger(__name__)

MISSING_QUESTION_INPUTS = "Both jobDescription and cvDetails are required."
INVALID_INTERVIEW_DATA = 'Request body must contain a non-empty "interviewData" array.'
INVALID_JOB_TITLE = 'Request body must contain a valid "jobTitle" string.'
QUESTIONS_FORMAT_ERROR = "Failed to generate questions: Unexpected API response format."
EVALUATION_FORMAT_ERROR = "Failed to evaluate answers: Unexpected API response format."


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_question_request(request: QuestionGenerationRequest) -> Optional[str]:
    """Return the client error message for an invalid request, or None."""
    if _is_blank(request.job_description) or _is_blank(request.cv_details):
        return MISSING_QUESTION_INPUTS
    return None


def validate_evaluation_request(request: AnswerEvaluationRequest) -> Optional[str]:
    """Return the client error message for an invalid request, or None."""
    if not isinstance(request.interview_data, list) or not request.interview_data:
        return INVALID_INTERVIEW_DATA
    if _is_blank(request.job_title):
        return INVALID_JOB_TITLE
    return None


async def _generate_payload(
    provider: LLMProvider,
    prompt: str,
    response_schema: Dict[str, Any],
    feature: str,
) -> Any:
    """Run one model call and decode the JSON text it returns."""
    response = await provider.generate_json(
        prompt,
        response_schema,
        model=get_model_for_feature(feature),
    )
    try:
        return json.loads(response.content)
    except json.JSONDecodeError as e:
        raise ResponseFormatError(f"Model output is not valid JSON: {e}", raw=response.content) from e


def select_questions(
    questions: List[str],
    count: int = INTERVIEW_QUESTION_COUNT,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Keep at most `count` questions, sampled at random.

    Sampled questions keep their original relative order.
    """
    if len(questions) <= count:
        return list(questions)
    rng = rng or random
    keep = sorted(rng.sample(range(len(questions)), count))
    return [questions[i] for i in keep]


async def generate_questions(
    request: QuestionGenerationRequest,
    provider: LLMProvider,
    rng: Optional[random.Random] = None,
) -> ServiceResult:
    """
    Generate interview questions linking a CV to a job description.

    Returns:
        ServiceResult with a list of question strings on success
    """
    error = validate_question_request(request)
    if error:
        return ServiceResult.failure(ErrorKind.VALIDATION, error)

    try:
        prompt = build_question_prompt(
            request.job_description,
            request.cv_details,
            question_count=INTERVIEW_QUESTION_COUNT,
        )
        payload = await _generate_payload(provider, prompt, QUESTION_LIST_SCHEMA, "interview_questions")
        if not isinstance(payload, list) or not all(isinstance(q, str) for q in payload):
            raise ResponseFormatError("Model output is not an array of strings", raw=payload)

        questions = select_questions(payload, rng=rng)
        logger.info(f"Interview questions generated: returned={len(questions)}, drafted={len(payload)}")
        return ServiceResult.success(questions)

    except ResponseFormatError as e:
        logger.warning(f"Gemini API response structure unexpected: {e}; raw={e.raw!r}")
        return ServiceResult.failure(ErrorKind.FORMAT, QUESTIONS_FORMAT_ERROR)
    except UpstreamError as e:
        logger.error(f"Error generating interview questions: {e}")
        return ServiceResult.failure(ErrorKind.UPSTREAM, f"Internal server error: {e}")
    except Exception as e:
        logger.error(f"Error generating interview questions: {type(e).__name__}: {e}", exc_info=True)
        return ServiceResult.failure(ErrorKind.UNEXPECTED, f"Internal server error: {e}")


async def evaluate_answers(
    request: AnswerEvaluationRequest,
    provider: LLMProvider,
) -> ServiceResult:
    """
    Rate each interview answer and the interview overall for the given job title.

    Returns:
        ServiceResult with an {individualEvaluations, overallEvaluation} dict on success
    """
    error = validate_evaluation_request(request)
    if error:
        return ServiceResult.failure(ErrorKind.VALIDATION, error)

    try:
        prompt = build_evaluation_prompt(request.job_title.strip(), request.interview_data)
        payload = await _generate_payload(provider, prompt, EVALUATION_SCHEMA, "answer_evaluation")
        try:
            evaluation = EvaluationResult.model_validate(payload)
        except ValidationError as e:
            raise ResponseFormatError(f"Model output does not match evaluation schema: {e}", raw=payload) from e

        if len(evaluation.individual_evaluations) != len(request.interview_data):
            logger.warning(
                f"Evaluation count mismatch: submitted={len(request.interview_data)}, "
                f"evaluated={len(evaluation.individual_evaluations)}"
            )
        logger.info(f"Interview answers evaluated: overall_rating={evaluation.overall_evaluation.rating}")
        return ServiceResult.success(evaluation.model_dump(by_alias=True))

    except ResponseFormatError as e:
        logger.warning(f"Gemini API response structure unexpected: {e}; raw={e.raw!r}")
        return ServiceResult.failure(ErrorKind.FORMAT, EVALUATION_FORMAT_ERROR)
    except UpstreamError as e:
        logger.error(f"Error evaluating interview answers: {e}")
        return ServiceResult.failure(ErrorKind.UPSTREAM, f"Internal server error: {e}")
    except Exception as e:
        logger.error(f"Error evaluating interview answers: {type(e).__name__}: {e}", exc_info=True)
        return ServiceResult.failure(ErrorKind.UNEXPECTED, f"Internal server error: {e}")
