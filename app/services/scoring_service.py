# /app/services/scoring_service.py

"""
The deterministic scoring engine: a fixed weighted sum of the five metrics
mapped onto a letter grade, plus the rule-based remediation suggestions used
whenever the AI capability cannot answer.

Both functions are pure. Range validation is the caller's job.
"""

from typing import List, NamedTuple

from ..models.performance_model import Grade

# --- Weights (must stay in sync with every stored predictedGrade) ---
ATTENDANCE_WEIGHT = 0.15
ASSIGNMENT_WEIGHT = 0.20
INTERNAL_WEIGHT = 0.25
PROJECT_WEIGHT = 0.15
FINAL_EXAM_WEIGHT = 0.25

# Evaluated from the top down; the first threshold reached wins.
GRADE_THRESHOLDS = (
    (85.0, Grade.A),
    (70.0, Grade.B),
    (55.0, Grade.C),
    (40.0, Grade.D),
)

# --- Suggestion rules, in the order they are reported ---
SUGGESTION_RULES = (
    ("attendance", 75.0, "Improve attendance to ensure better engagement."),
    ("assignment", 70.0, "Focus on submitting higher quality assignments."),
    ("internal", 60.0, "Prepare better for internal assessments."),
    ("project", 60.0, "Put more effort into practical projects."),
)
DEFAULT_SUGGESTION = "Keep up the good work! Aim for consistency."
MAX_SUGGESTIONS = 3


class ScoreResult(NamedTuple):
    weighted_score: float
    grade: Grade


def calculate_weighted_score(attendance, assignment, internal, project, final_exam) -> float:
    return (
        float(attendance) * ATTENDANCE_WEIGHT
        + float(assignment) * ASSIGNMENT_WEIGHT
        + float(internal) * INTERNAL_WEIGHT
        + float(project) * PROJECT_WEIGHT
        + float(final_exam) * FINAL_EXAM_WEIGHT
    )


def grade_for_score(weighted_score: float) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if weighted_score >= threshold:
            return grade
    return Grade.F


def score(attendance, assignment, internal, project, final_exam) -> ScoreResult:
    weighted = calculate_weighted_score(attendance, assignment, internal, project, final_exam)
    return ScoreResult(weighted_score=weighted, grade=grade_for_score(weighted))


def suggest(attendance, assignment, internal, project) -> List[str]:
    """
    Returns at most three remediation messages, one per metric that falls
    below its threshold, in a fixed order. When nothing is below threshold a
    single encouragement message is returned instead.
    """
    values = {
        "attendance": float(attendance),
        "assignment": float(assignment),
        "internal": float(internal),
        "project": float(project),
    }
    suggestions = [message for metric, threshold, message in SUGGESTION_RULES if values[metric] < threshold]
    if not suggestions:
        suggestions.append(DEFAULT_SUGGESTION)
    return suggestions[:MAX_SUGGESTIONS]
