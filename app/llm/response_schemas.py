"""
Gemini responseSchema definitions (OpenAPI subset, upper-case type names).
"""
from app.schemas.interview import RATINGS

QUESTION_LIST_SCHEMA = {
    "type": "ARRAY",
    "items": {"type": "STRING"},
}

RATING_SCHEMA = {"type": "STRING", "enum": list(RATINGS)}

EVALUATION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "individualEvaluations": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "question": {"type": "STRING"},
                    "summary": {"type": "STRING"},
                    "rating": RATING_SCHEMA,
                },
                "required": ["question", "summary", "rating"],
            },
        },
        "overallEvaluation": {
            "type": "OBJECT",
            "properties": {
                "summary": {"type": "STRING"},
                "rating": RATING_SCHEMA,
                "strengths": {"type": "ARRAY", "items": {"type": "STRING"}},
                "areasForImprovement": {"type": "ARRAY", "items": {"type": "STRING"}},
            },
            "required": ["summary", "rating", "strengths", "areasForImprovement"],
        },
    },
    "required": ["individualEvaluations", "overallEvaluation"],
}
