# /app/db/models/performance_models.py

"""
SQLAlchemy model for a single performance submission. Records are written
once and never updated; `predictedGrade` is always derived server-side.
"""

from sqlalchemy import Column, String, Float, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base

METRIC_COLUMNS = ("attendance", "assignmentScore", "internalMarks", "projectMarks", "finalExamMarks")


class Performance(Base):
    __tablename__ = "performances"
    __table_args__ = tuple(
        CheckConstraint(f'"{column}" >= 0 AND "{column}" <= 100', name=f"ck_performances_{column}_range")
        for column in METRIC_COLUMNS
    )

    id = Column(String, primary_key=True, index=True)
    studentId = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    subject = Column(String, nullable=False, index=True)

    attendance = Column(Float, nullable=False)
    assignmentScore = Column(Float, nullable=False)
    internalMarks = Column(Float, nullable=False)
    projectMarks = Column(Float, nullable=False)
    finalExamMarks = Column(Float, nullable=False)

    predictedGrade = Column(String(1), nullable=True)
    createdAt = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    student = relationship("Student", back_populates="performances")
