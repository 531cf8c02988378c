# /app/services/study_plan_helpers/weak_subjects.py

from typing import List
import pandas as pd

WEAK_SUBJECT_LIMIT = 3


def find_weak_subjects(performances: pd.DataFrame, limit: int = WEAK_SUBJECT_LIMIT) -> List[str]:
    """
    Ranks subjects by their average final-exam marks, lowest first, and
    returns up to `limit` of them. Subjects with equal averages keep the order
    in which they first appear in `performances`.
    """
    if performances.empty:
        return []

    averages = (
        performances.groupby("subject", sort=False)["finalExamMarks"]
        .mean()
        .sort_values(ascending=True, kind="mergesort")
    )
    return [str(subject) for subject in averages.index[:limit]]
