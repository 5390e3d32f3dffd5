"""
Interview endpoints: question generation and answer evaluation.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.llm_dependency import get_llm_provider
from app.llm.provider import LLMProvider
from app.schemas.interview import (
    AnswerEvaluationRequest,
    ErrorResponse,
    EvaluationResult,
    QuestionGenerationRequest,
)
from app.services.interview_service import evaluate_answers, generate_questions
from app.services.outcome import ServiceResult, response_body_for, status_code_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/interview", tags=["Interview"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or malformed input"},
    500: {"model": ErrorResponse, "description": "Model call failed or returned an unexpected format"},
}


def _to_response(result: ServiceResult) -> JSONResponse:
    return JSONResponse(status_code=status_code_for(result), content=response_body_for(result))


@router.post("/questions", response_model=List[str], responses=ERROR_RESPONSES)
async def create_interview_questions(
    request: Optional[QuestionGenerationRequest] = None,
    provider: LLMProvider = Depends(get_llm_provider),
):
    """Generate interview questions tailored to a CV and job description."""
    result = await generate_questions(request or QuestionGenerationRequest(), provider)
    return _to_response(result)


@router.post("/evaluate", response_model=EvaluationResult, responses=ERROR_RESPONSES)
async def create_answer_evaluation(
    request: Optional[AnswerEvaluationRequest] = None,
    provider: LLMProvider = Depends(get_llm_provider),
):
    """Evaluate interview answers for a job title."""
    result = await evaluate_answers(request or AnswerEvaluationRequest(), provider)
    return _to_response(result)
