# /app/services/study_plan_service.py

"""
The study-plan orchestrator.

It finds a student's weakest subjects from their performance history, asks the
AI capability for a short multi-goal plan, and saves every goal it gets back.

Failures are handled differently by kind:
- no history at all -> InsufficientDataError, nothing is created
- AI unavailable (timeout, quota, busy) -> a templated plan is used instead
- AI answered with unusable content -> GenerationError, nothing is guessed
- storage fails partway -> DatabaseError carrying the goals already saved
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Dict

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import (
    AIServiceError,
    AIUnavailableError,
    DatabaseError,
    GenerationError,
    InsufficientDataError,
)
from ..models.study_goal_model import GoalStatus
from . import prompt_library
from .ai_helpers.fallback import with_fallback
from .database_service import DatabaseService
from .gemini_service import TextGenerator
from .study_plan_helpers.ai_plan import parse_generated_goals
from .study_plan_helpers.fallback_plan import build_fallback_goals
from .study_plan_helpers.weak_subjects import find_weak_subjects

logger = logging.getLogger(__name__)

AI_GOAL_COUNT = 5
PLAN_WINDOW = timedelta(days=14)


class StudyPlanService:
    def __init__(self, text_generator: TextGenerator, goal_count: int = AI_GOAL_COUNT):
        self.text_generator = text_generator
        self.goal_count = goal_count

    async def _request_ai_goals(self, weak_subjects: List[str], now: datetime) -> List[Dict]:
        today = now.date()
        prompt = prompt_library.STUDY_PLAN_PROMPT.format(
            weak_subjects=", ".join(weak_subjects),
            goal_count=self.goal_count,
            today=today.isoformat(),
            start_date=(today + timedelta(days=1)).isoformat(),
            end_date=(today + PLAN_WINDOW).isoformat(),
        )
        try:
            text = await self.text_generator.generate_text(prompt)
        except AIUnavailableError:
            raise
        except AIServiceError as e:
            raise GenerationError(f"Failed to generate study plan: {e}") from e
        return parse_generated_goals(text)

    async def generate_plan(self, student_id: str, db: DatabaseService) -> List:
        performances = db.get_performances_as_dataframe(student_id)
        logger.info("Fetched %d performance records for student %s", len(performances), student_id)

        weak_subjects = find_weak_subjects(performances)
        if not weak_subjects:
            raise InsufficientDataError("Not enough performance data to generate a plan.")

        now = datetime.now(timezone.utc)
        sourced = await with_fallback(
            lambda: self._request_ai_goals(weak_subjects, now),
            lambda: build_fallback_goals(weak_subjects, now),
            recover_on=(AIUnavailableError,),
            context="Study plan generation",
        )
        logger.info("Study plan for student %s produced by %s path (%d goals).", student_id, sourced.source, len(sourced.value))

        return self._save_goals(db, student_id, sourced.value)

    def _save_goals(self, db: DatabaseService, student_id: str, goals: List[Dict]) -> List:
        """Saves goals one at a time, in order. Earlier goals survive a later failure."""
        saved = []
        for goal in goals:
            record = {
                "id": f"goal_{uuid.uuid4().hex[:16]}",
                "studentId": student_id,
                "status": GoalStatus.PENDING.value,
                "createdAt": datetime.now(timezone.utc),
                **goal,
            }
            try:
                saved.append(db.add_study_goal(record))
            except SQLAlchemyError as e:
                logger.exception("Failed to save study goal %d of %d for student %s", len(saved) + 1, len(goals), student_id)
                raise DatabaseError(
                    f"Saved {len(saved)} of {len(goals)} study goals before a database error occurred.",
                    saved=saved,
                ) from e
        return saved
