"""
Pydantic schemas for interview endpoints.

Request fields accept any JSON value; the interview service checks their shape.
"""
from typing import Any, List, Literal, Optional
from pydantic import BaseModel, Field

RATINGS = ("Excellent", "Good", "Average", "Below Average", "Poor")

Rating = Literal["Excellent", "Good", "Average", "Below Average", "Poor"]


class QuestionGenerationRequest(BaseModel):
    """Request model for interview question generation."""
    job_description: Optional[Any] = Field(None, alias="jobDescription", description="Job description text")
    cv_details: Optional[Any] = Field(None, alias="cvDetails", description="Candidate CV text")

    class Config:
        json_schema_extra = {
            "example": {
                "jobDescription": "Backend engineer building Python APIs on AWS...",
                "cvDetails": "5 years of Django and FastAPI, led migration to Kubernetes..."
            }
        }


class AnswerEvaluationRequest(BaseModel):
    """Request model for interview answer evaluation."""
    interview_data: Optional[Any] = Field(None, alias="interviewData", description="List of {question, answer} pairs")
    job_title: Optional[Any] = Field(None, alias="jobTitle", description="Role the candidate interviewed for")

    class Config:
        json_schema_extra = {
            "example": {
                "interviewData": [
                    {"question": "Describe a system you scaled.", "answer": "I sharded our Postgres cluster..."}
                ],
                "jobTitle": "Senior Backend Engineer"
            }
        }


class IndividualEvaluation(BaseModel):
    """Evaluation of a single answer."""
    question: str
    summary: str
    rating: Rating


class OverallEvaluation(BaseModel):
    """Evaluation across all answers."""
    summary: str
    rating: Rating
    strengths: List[str]
    areas_for_improvement: List[str] = Field(..., alias="areasForImprovement")

    class Config:
        populate_by_name = True


class EvaluationResult(BaseModel):
    """Response model for answer evaluation."""
    individual_evaluations: List[IndividualEvaluation] = Field(..., alias="individualEvaluations")
    overall_evaluation: OverallEvaluation = Field(..., alias="overallEvaluation")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Error body returned by interview endpoints."""
    error: str
