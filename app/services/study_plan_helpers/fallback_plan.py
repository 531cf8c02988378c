# /app/services/study_plan_helpers/fallback_plan.py

"""
The templated study plan used when the AI capability is unavailable: one
review goal per weak subject, plus a short-deadline practice goal for the
single weakest subject.
"""

from datetime import datetime, timedelta
from typing import List, Dict

from ...models.study_goal_model import Priority

REVIEW_DEADLINE = timedelta(days=7)
PRACTICE_DEADLINE = timedelta(days=3)


def build_fallback_goals(weak_subjects: List[str], now: datetime) -> List[Dict]:
    goals = [
        {
            "subject": subject,
            "topic": f"Review core concepts of {subject}",
            "deadline": now + REVIEW_DEADLINE,
            "priority": Priority.MEDIUM.value,
        }
        for subject in weak_subjects
    ]
    if weak_subjects:
        weakest = weak_subjects[0]
        goals.append({
            "subject": weakest,
            "topic": f"Practice past papers for {weakest}",
            "deadline": now + PRACTICE_DEADLINE,
            "priority": Priority.HIGH.value,
        })
    return goals
