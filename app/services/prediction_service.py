# /app/services/prediction_service.py

"""
The grade-prediction orchestrator.

A prediction is first requested from the AI capability. If that call fails for
any reason, or its answer cannot be parsed into the expected shape, the
deterministic scoring engine answers instead with a fixed confidence. The
caller always gets a prediction; only missing or out-of-range input is an
error.

When a student id is supplied, the inputs and the final grade are stored as a
performance record. A storage failure is logged and does not discard the
prediction.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import ValidationError
from ..models.prediction_model import AIPrediction, PredictionRequest, PredictionResult, PredictionSource
from . import prompt_library, scoring_service
from .ai_helpers.fallback import with_fallback
from .ai_helpers.response_parsing import parse_json_response
from .database_service import DatabaseService
from .gemini_service import TextGenerator

logger = logging.getLogger(__name__)

METRIC_FIELDS = ("attendance", "assignmentScore", "internalMarks", "projectMarks", "finalExamMarks")
DEFAULT_SUBJECT = "General Performance"
FALLBACK_CONFIDENCE = 85.0


def validate_metrics(request: PredictionRequest) -> Dict[str, float]:
    """Returns the five metrics, or raises if any is absent or outside [0, 100]."""
    metrics = {field: getattr(request, field) for field in METRIC_FIELDS}
    if any(value is None for value in metrics.values()):
        raise ValidationError("All performance fields are required")
    for field, value in metrics.items():
        if not 0 <= value <= 100:
            raise ValidationError(f"{field} must be between 0 and 100")
    return metrics


def fallback_prediction(metrics: Dict[str, float]) -> PredictionResult:
    result = scoring_service.score(
        metrics["attendance"],
        metrics["assignmentScore"],
        metrics["internalMarks"],
        metrics["projectMarks"],
        metrics["finalExamMarks"],
    )
    suggestions = scoring_service.suggest(
        metrics["attendance"],
        metrics["assignmentScore"],
        metrics["internalMarks"],
        metrics["projectMarks"],
    )
    return PredictionResult(
        grade=result.grade,
        confidenceScore=FALLBACK_CONFIDENCE,
        predictedValue=result.weighted_score,
        suggestions=suggestions,
        source=PredictionSource.FALLBACK,
    )


class PredictionService:
    def __init__(self, text_generator: TextGenerator):
        self.text_generator = text_generator

    async def _predict_with_ai(self, metrics: Dict[str, float]) -> PredictionResult:
        prompt = prompt_library.GRADE_PREDICTION_PROMPT.format(
            attendance=metrics["attendance"],
            assignment_score=metrics["assignmentScore"],
            internal_marks=metrics["internalMarks"],
            project_marks=metrics["projectMarks"],
            final_exam_marks=metrics["finalExamMarks"],
        )
        text = await self.text_generator.generate_text(prompt)
        ai_prediction = AIPrediction.model_validate(parse_json_response(text))
        return PredictionResult(
            grade=ai_prediction.predictedGrade,
            confidenceScore=ai_prediction.confidence,
            predictedValue=ai_prediction.predictedValue,
            suggestions=ai_prediction.suggestions[:scoring_service.MAX_SUGGESTIONS],
            source=PredictionSource.AI,
        )

    async def predict(self, request: PredictionRequest, db: Optional[DatabaseService] = None) -> PredictionResult:
        metrics = validate_metrics(request)

        # Any failure of the AI path, including a malformed answer, degrades to the scoring engine.
        sourced = await with_fallback(
            lambda: self._predict_with_ai(metrics),
            lambda: fallback_prediction(metrics),
            recover_on=(Exception,),
            context="Grade prediction",
        )
        prediction = sourced.value
        logger.info("Prediction %s produced by %s path.", prediction.grade.value, prediction.source.value)

        if request.studentId and db is not None:
            self._save_performance(db, request.studentId, metrics, prediction)

        return prediction

    def _save_performance(self, db: DatabaseService, student_id: str, metrics: Dict[str, float], prediction: PredictionResult):
        record = {
            "id": f"perf_{uuid.uuid4().hex[:16]}",
            "studentId": student_id,
            "subject": DEFAULT_SUBJECT,
            "predictedGrade": prediction.grade.value,
            "createdAt": datetime.now(timezone.utc),
            **metrics,
        }
        try:
            db.add_performance_record(record)
        except SQLAlchemyError:
            logger.exception("Failed to save performance record for student %s; returning prediction anyway.", student_id)
