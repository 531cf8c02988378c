# /app/services/study_plan_helpers/ai_plan.py

import logging
from datetime import datetime, time, timezone
from typing import List, Dict

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from app.core.exceptions import GenerationError
from ...models.study_goal_model import GeneratedGoal
from ..ai_helpers.response_parsing import parse_json_response

logger = logging.getLogger(__name__)

_GOAL_LIST_ADAPTER = TypeAdapter(List[GeneratedGoal])


def parse_generated_goals(text: str) -> List[Dict]:
    """
    Validates the AI's study-plan answer. Anything other than a non-empty
    JSON array of well-formed goals is a GenerationError; nothing is guessed.
    """
    data = parse_json_response(text)
    if not isinstance(data, list) or not data:
        logger.error("AI study plan was not a non-empty JSON array: %.500s", text)
        raise GenerationError("AI response was not a list of study goals. Try again.")

    try:
        goals = _GOAL_LIST_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        logger.error("AI study plan failed validation: %s", e)
        raise GenerationError("AI response contained invalid study goals. Try again.") from e

    return [
        {
            "subject": goal.subject,
            "topic": goal.topic,
            "deadline": datetime.combine(goal.deadline, time.min, tzinfo=timezone.utc),
            "priority": goal.priority.value,
        }
        for goal in goals
    ]
