# /app/services/database_helpers/performance_repository_sql.py

from typing import List, Dict
from sqlalchemy.orm import Session, joinedload

from app.db.models.performance_models import Performance


class PerformanceRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_performance(self, record: Dict) -> Performance:
        """Creates a new, immutable Performance record."""
        new_performance = Performance(**record)
        self.db.add(new_performance)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(new_performance)
        return new_performance

    def get_performances_by_student_id(self, student_id: str) -> List[Performance]:
        """All records for one student, newest first, with the owning student loaded."""
        return (
            self.db.query(Performance)
            .options(joinedload(Performance.student))
            .filter(Performance.studentId == student_id)
            .order_by(Performance.createdAt.desc(), Performance.id.desc())
            .all()
        )

    def get_all_performances(self) -> List[Performance]:
        return (
            self.db.query(Performance)
            .options(joinedload(Performance.student))
            .order_by(Performance.createdAt.desc(), Performance.id.desc())
            .all()
        )
