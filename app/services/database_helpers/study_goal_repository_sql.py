# /app/services/database_helpers/study_goal_repository_sql.py

from typing import List, Dict, Optional
from sqlalchemy.orm import Session

from app.db.models.study_goal_models import StudyGoal


class StudyGoalRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_goals_by_student_id(self, student_id: str) -> List[StudyGoal]:
        """Retrieves a student's goals, soonest deadline first."""
        return (
            self.db.query(StudyGoal)
            .filter(StudyGoal.studentId == student_id)
            .order_by(StudyGoal.deadline.asc())
            .all()
        )

    def get_goal_by_id(self, goal_id: str) -> Optional[StudyGoal]:
        return self.db.query(StudyGoal).filter(StudyGoal.id == goal_id).first()

    def add_goal(self, record: Dict) -> StudyGoal:
        """
        Creates a single goal in its own transaction, so a failure on one goal
        never rolls back goals that were saved before it.
        """
        new_goal = StudyGoal(**record)
        self.db.add(new_goal)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(new_goal)
        return new_goal

    def update_goal(self, goal_id: str, data: Dict) -> Optional[StudyGoal]:
        db_goal = self.get_goal_by_id(goal_id)
        if db_goal:
            for key, value in data.items():
                setattr(db_goal, key, value)
            self.db.commit()
            self.db.refresh(db_goal)
        return db_goal

    def delete_goal(self, goal_id: str) -> bool:
        db_goal = self.get_goal_by_id(goal_id)
        if db_goal:
            self.db.delete(db_goal)
            self.db.commit()
            return True
        return False
