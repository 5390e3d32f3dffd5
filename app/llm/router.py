"""
Model router for selecting the Gemini model used by each feature.
"""
import logging

from app.core.config import GEMINI_MODEL, GEMINI_QUESTIONS_MODEL, GEMINI_EVALUATION_MODEL

logger = logging.getLogger(__name__)

# Feature -> model override (None falls back to GEMINI_MODEL)
MODEL_ROUTING = {
    "interview_questions": GEMINI_QUESTIONS_MODEL,
    "answer_evaluation": GEMINI_EVALUATION_MODEL,
}


def get_model_for_feature(feature: str) -> str:
    """
    Get the model for a feature.

    Args:
        feature: Feature name ("interview_questions" | "answer_evaluation")

    Returns:
        Model identifier string
    """
    if feature not in MODEL_ROUTING:
        logger.warning(f"Unknown feature '{feature}', using default model {GEMINI_MODEL}")
    return MODEL_ROUTING.get(feature) or GEMINI_MODEL
