"""
Prompt templates for interview question generation and answer evaluation.
"""
import json
from typing import Any

QUESTION_GENERATION_PROMPT = """
You are an experienced interviewer. Write interview questions for the candidate below,
tailored to how their CV lines up with what this role requires.

Instructions:
1. Read the Job Description and the Candidate CV carefully.
2. Tie every question to specific experience, skills or projects from the CV and to the responsibilities of the role.
3. Pitch the difficulty of the questions at the seniority of the role.
4. Ask open-ended questions only. Nothing that can be answered with a plain "yes" or "no"; the candidate should have to explain their experience and how they solved problems.
5. Order the questions so they build on each other and leave room for follow-up discussion, like a probing conversation rather than a checklist.
6. Produce a fresh set of questions on every request, even when the role and the CV are exactly the same as before. Vary the angle: a deeper dive into a particular project, a behavioural question, a trade-off the candidate made.
7. Keep the questions professional and fair. Address the candidate directly and never mention "the job description document".
8. Draft a larger pool of questions internally, then pick {question_count} of them at random and return only those.

Job Description:
{job_description}

Candidate CV:
{cv_details}

Return the questions as a JSON array of strings.
"""

ANSWER_EVALUATION_PROMPT = """
You are an experienced interviewer evaluating a candidate's answers.
The candidate interviewed for the role of **{job_title}**.
Judge every answer against the knowledge, experience and depth expected from a **{job_title}**:
junior roles call for sound fundamentals and clear explanations, senior roles for deeper insight,
strategic thinking and hands-on experience.

For each question and answer provide:
1. A concise summary of the answer.
2. A rating: "Excellent", "Good", "Average", "Below Average" or "Poor".
3. Base the rating on clarity, completeness, relevance and depth relative to a {job_title} role.
4. If an answer is empty or very short, say so in the summary and rate it "Poor", unless the question can legitimately be answered briefly.

Then provide an overall evaluation for the **{job_title}** role across all answers:
an overall summary, an overall rating, a list of key strengths and a list of specific areas for improvement.
Each strength and each area for improvement must be at most 100 characters.

Questions and answers:
{interview_data}

Respond with a JSON object with two properties:
- "individualEvaluations": an array of objects with "question", "summary" and "rating".
- "overallEvaluation": an object with "summary", "rating", "strengths" (array of strings) and "areasForImprovement" (array of strings).

Example:
{{
    "individualEvaluations": [
        {{"question": "Question 1 text", "summary": "Summary of answer 1", "rating": "Excellent"}},
        {{"question": "Question 2 text", "summary": "Summary of answer 2", "rating": "Good"}}
    ],
    "overallEvaluation": {{
        "summary": "Overall assessment of the candidate across all questions.",
        "rating": "Good",
        "strengths": ["Explains technical concepts clearly", "Solid grasp of fundamentals"],
        "areasForImprovement": ["Broaden hands-on tooling experience", "Back claims with concrete examples"]
    }}
}}
"""


def build_question_prompt(job_description: str, cv_details: str, question_count: int = 3) -> str:
    """Fill the question generation template. Inputs are embedded verbatim."""
    return QUESTION_GENERATION_PROMPT.format(
        job_description=job_description,
        cv_details=cv_details,
        question_count=question_count,
    )


def build_evaluation_prompt(job_title: str, interview_data: Any) -> str:
    """Fill the answer evaluation template with the job title and pretty-printed Q&A pairs."""
    return ANSWER_EVALUATION_PROMPT.format(
        job_title=job_title,
        interview_data=json.dumps(interview_data, indent=2, ensure_ascii=False),
    )
